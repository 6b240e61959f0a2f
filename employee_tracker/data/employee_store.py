# data/employee_store.py
from __future__ import annotations
import logging
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional

from employee_tracker.config import DEFAULT_DATA_FILE
from employee_tracker.exceptions import (
    InvalidFieldNameError, MalformedRecordError, RecordFileNotFoundError, StoreIOError
)
from employee_tracker.models.employee import TENURE_CATEGORIES, Employee
from employee_tracker.utils.parse_utils import is_blank_record

logger = logging.getLogger(__name__)


class EmployeeStore:
    """
    메모리 상의 직원 목록 + ID 발급 + 파일 저장/불러오기.
    - 순서: 추가(또는 파일) 순서 유지
    - next_id: 1부터 시작, load 때마다 max(id)+1 로 재계산
    """

    def __init__(self):
        self._employees: List[Employee] = []
        self._next_id = 1

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self):
        return len(self._employees)

    # ---------- 조회 ----------
    def list_all(self) -> List[Employee]:
        return list(self._employees)

    def find(self, employee_id: int) -> Optional[Employee]:
        return next((e for e in self._employees if e.id == employee_id), None)

    # ---------- 파일 ----------
    def load(self, path=DEFAULT_DATA_FILE) -> int:
        """
        파일 전체를 다시 읽어 목록을 교체한다. 읽은 레코드 수를 반환.
        - 파일 확인 전에 목록/next_id를 먼저 비움 (실패해도 이전 상태는 사라짐)
        - 해석 불가 줄, 중복 id 줄은 경고 후 건너뜀
        - 읽기 중 I/O 오류만 StoreIOError
        """
        self._employees.clear()
        self._next_id = 1

        path = Path(path)
        if not path.is_file():
            raise RecordFileNotFoundError(path)

        seen = set()
        try:
            with path.open("r", encoding="utf-8") as fh:
                for lineno, line in enumerate(fh, start=1):
                    if is_blank_record(line):
                        continue
                    try:
                        emp = Employee.from_text(line)
                    except MalformedRecordError as e:
                        logger.warning("%s:%d: skipping invalid line (%s)", path, lineno, e)
                        continue
                    if emp.id in seen:
                        logger.warning("%s:%d: skipping duplicate id %d", path, lineno, emp.id)
                        continue
                    seen.add(emp.id)
                    self._employees.append(emp)
                    self._next_id = max(self._next_id, emp.id + 1)
        except (OSError, UnicodeDecodeError) as e:
            raise StoreIOError(path, f"read failed: {e}") from e

        logger.info("loaded %d employee(s) from %s", len(self._employees), path)
        return len(self._employees)

    def save(self, path=DEFAULT_DATA_FILE) -> int:
        """모든 레코드를 한 줄씩 기록 (기존 파일 덮어쓰기). 기록한 수를 반환."""
        path = Path(path)
        tmp = path.with_name(path.name + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8", newline="\n") as fh:
                for emp in self._employees:
                    fh.write(emp.to_text() + "\n")
            tmp.replace(path)
        except OSError as e:
            # 실패 시 임시 파일 정리, 기존 파일은 그대로
            tmp.unlink(missing_ok=True)
            raise StoreIOError(path, f"write failed: {e}") from e

        logger.info("saved %d employee(s) to %s", len(self._employees), path)
        return len(self._employees)

    # ---------- 변경 ----------
    def add(self, name: str, position: str, salary: float,
            hire_date: Optional[date], department: str, active: bool) -> Employee:
        # 값 검증은 호출 측(입력 단계) 책임
        emp = Employee(self._next_id, name, position, salary, hire_date, department, active)
        self._next_id += 1
        self._employees.append(emp)
        logger.debug("added %r", emp)
        return emp

    def remove(self, employee_id: int) -> bool:
        before = len(self._employees)
        self._employees = [e for e in self._employees if e.id != employee_id]
        removed = len(self._employees) != before
        if removed:
            logger.debug("removed id %d", employee_id)
        return removed

    def update(self, employee_id: int, field_name: str, value) -> bool:
        """
        필드 하나만 수정. id 없음/알 수 없는 필드면 False.
        값 타입이 필드와 다르면 InvalidFieldTypeError (아무것도 바뀌지 않음).
        범위 검사(급여 음수 등)는 하지 않음.
        """
        emp = self.find(employee_id)
        if emp is None:
            return False
        try:
            emp.set_field(field_name, value)
        except InvalidFieldNameError as e:
            logger.debug("update id %d: %s", employee_id, e)
            return False
        logger.debug("updated id %d: %s", employee_id, field_name.lower())
        return True

    # ---------- 리포트 ----------
    def tenure_report(self, today: Optional[date] = None) -> Dict[str, List[Employee]]:
        today = today or date.today()
        report = {cat: [] for cat in TENURE_CATEGORIES}
        for emp in self._employees:
            report[emp.tenure_category(today)].append(emp)
        return report
