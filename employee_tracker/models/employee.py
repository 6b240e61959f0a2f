# models/employee.py
import logging
import math
from datetime import date, datetime
from enum import Enum

from employee_tracker.exceptions import (
    InvalidFieldNameError, InvalidFieldTypeError, MalformedRecordError
)
from employee_tracker.utils.date_helper import format_date, parse_date, whole_years_between
from employee_tracker.utils.parse_utils import (
    format_bool, is_bool_literal, parse_bool, split_fields
)

logger = logging.getLogger(__name__)

FIELD_COUNT = 7   # id,name,position,salary,hire_date,department,active

TENURE_CATEGORIES = ("0-1 years", "1-5 years", "5+ years")

MAX_ID = 2 ** 63 - 1   # 64비트 정수 범위


class FieldKind(Enum):
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"


# update 키(소문자) -> (속성명, 값 종류)
EDITABLE_FIELDS = {
    "name": ("name", FieldKind.TEXT),
    "position": ("position", FieldKind.TEXT),
    "salary": ("salary", FieldKind.NUMBER),
    "hiredate": ("hire_date", FieldKind.DATE),
    "department": ("department", FieldKind.TEXT),
    "active": ("active", FieldKind.BOOLEAN),
}


def value_kind(value) -> FieldKind | None:
    # bool은 int의 하위 타입이므로 먼저 검사
    if isinstance(value, bool):
        return FieldKind.BOOLEAN
    if isinstance(value, (int, float)):
        return FieldKind.NUMBER
    if value is None or isinstance(value, date):
        return FieldKind.DATE
    if isinstance(value, str):
        return FieldKind.TEXT
    return None


def _no_underscore(text: str) -> str:
    # int()/float()는 "1_000" 을 허용하므로 따로 거부
    if "_" in text:
        raise ValueError(text)
    return text


def tenure_category_for(years: int) -> str:
    if years <= 1:
        return TENURE_CATEGORIES[0]
    if years <= 5:
        return TENURE_CATEGORIES[1]
    return TENURE_CATEGORIES[2]


class Employee:
    def __init__(self, id, name, position, salary, hire_date=None,
                 department="", active=True):
        self._id = int(id)
        self.name = name
        self.position = position
        self.salary = float(salary)
        self.hire_date = hire_date        # date | None
        self.department = department
        self.active = active

    @property
    def id(self) -> int:
        return self._id

    # ---------- 근속 ----------
    def tenure_years(self, today: date | None = None) -> int:
        if self.hire_date is None:
            return 0
        today = today or date.today()
        return max(0, whole_years_between(self.hire_date, today))

    def tenure_category(self, today: date | None = None) -> str:
        return tenure_category_for(self.tenure_years(today))

    # ---------- 필드 수정 ----------
    def set_field(self, field_name: str, value) -> None:
        key = field_name.strip().lower()
        if key not in EDITABLE_FIELDS:
            raise InvalidFieldNameError(field_name)
        attr, expected = EDITABLE_FIELDS[key]

        actual = value_kind(value)
        # None은 DATE로 분류되므로 hiredate 에서만 통과 (입사일 삭제)
        if actual is not expected:
            raise InvalidFieldTypeError(key, expected.value, type(value).__name__)

        if expected is FieldKind.NUMBER:
            value = float(value)
        elif isinstance(value, datetime):
            value = value.date()
        setattr(self, attr, value)

    # ---------- 직렬화 ----------
    def to_text(self) -> str:
        return ",".join([
            str(self.id),
            self.name,
            self.position,
            f"{self.salary:.2f}",
            format_date(self.hire_date),
            self.department,
            format_bool(self.active),
        ])

    @classmethod
    def from_text(cls, line: str) -> "Employee":
        fields = split_fields(line.strip())
        if len(fields) != FIELD_COUNT:
            raise MalformedRecordError(
                line, f"expected {FIELD_COUNT} fields, got {len(fields)}")

        id_txt, name, position, salary_txt, date_txt, department, active_txt = fields

        try:
            emp_id = int(_no_underscore(id_txt))
        except ValueError:
            raise MalformedRecordError(id_txt, "invalid id") from None
        if not 1 <= emp_id <= MAX_ID:
            raise MalformedRecordError(id_txt, "id out of range")

        if not name:
            raise MalformedRecordError(line, "empty name")

        try:
            salary = float(_no_underscore(salary_txt))
        except ValueError:
            raise MalformedRecordError(salary_txt, "invalid salary") from None
        if not math.isfinite(salary):
            raise MalformedRecordError(salary_txt, "salary must be finite")

        try:
            hire_date = parse_date(date_txt) if date_txt else None
        except ValueError:
            raise MalformedRecordError(date_txt, "invalid hire date") from None

        if not is_bool_literal(active_txt):
            logger.warning("id %d: active value %r is not true/false, read as false",
                           emp_id, active_txt)

        return cls(emp_id, name, position, salary, hire_date, department,
                   parse_bool(active_txt))

    # ---------- 비교/표시 ----------
    def __eq__(self, other):
        if not isinstance(other, Employee):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return f"Employee(id={self.id}, name={self.name!r})"

    def __str__(self):
        return (f"ID: {self.id} | Name: {self.name} | Position: {self.position} | "
                f"Salary: {self.salary:.2f} | Hire Date: {format_date(self.hire_date, 'N/A')} | "
                f"Department: {self.department} | Active: {format_bool(self.active)}")
