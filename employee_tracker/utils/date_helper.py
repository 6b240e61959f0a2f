# utils/date_helper.py
import re
from datetime import date, datetime

from employee_tracker.config import DATE_FORMAT

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(text: str) -> date:
    """
    'YYYY-MM-DD' -> date
    - 자릿수까지 엄격히 검사 ('2025-3-5', '20250305' 등은 거부)
    - 실패 시 ValueError
    """
    text = text.strip()
    if not _ISO_DATE.match(text):
        raise ValueError(f"expected YYYY-MM-DD, got {text!r}")
    return datetime.strptime(text, DATE_FORMAT).date()


def format_date(d: date | None, empty: str = "") -> str:
    if d is None:
        return empty
    return d.strftime(DATE_FORMAT)


def whole_years_between(start: date, end: date) -> int:
    """
    start ~ end 사이의 '만' 연수.
    기념일(월/일)에 도달해야 1년으로 센다. 2020-02-29 -> 2021-02-28 은 0년.
    end가 start보다 이전이면 음수가 될 수 있음 (호출 측에서 보정).
    """
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years
