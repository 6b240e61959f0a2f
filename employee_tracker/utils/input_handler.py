# utils/input_handler.py
import math
from datetime import date

from employee_tracker.config import DEFAULT_DATA_FILE
from employee_tracker.exceptions import CancelAction, GoBackAction
from employee_tracker.utils.date_helper import parse_date
from employee_tracker.utils.parse_utils import FIELD_SEPARATOR


def get_input(prompt: str, allow_empty: bool = False, default: str | None = None) -> str:
    label = prompt
    if default is not None:
        label += f" [{default}]"
    label += ": "

    while True:
        v = input(label).strip()

        low = v.lower()
        if low == "cancel":
            raise CancelAction()
        if low == "back":
            raise GoBackAction()

        if not v and allow_empty:
            return ""   # 명시적 빈값 허용
        if not v:
            print("Input cannot be empty (type 'cancel' or 'back' to leave).")
            continue
        return v


def get_non_empty(prompt: str) -> str:
    # 파일 형식상 값에 콤마를 넣을 수 없음
    while True:
        v = get_input(prompt)
        if FIELD_SEPARATOR in v:
            print("Commas are not supported.")
            continue
        return v


def get_non_negative_float(prompt: str) -> float:
    while True:
        v = get_input(prompt)
        try:
            value = float(v)
        except ValueError:
            print("Invalid decimal number.")
            continue
        # nan/inf 거부
        if not math.isfinite(value):
            print("Invalid decimal number.")
            continue
        if value < 0:
            print("Value must be non-negative.")
            continue
        return value


def get_positive_int(prompt: str) -> int:
    while True:
        v = get_input(prompt)
        try:
            value = int(v)
        except ValueError:
            print("Invalid number format.")
            continue
        if value < 1:
            print("ID must be positive.")
            continue
        return value


def get_date(prompt: str, allow_empty: bool = False) -> date | None:
    """YYYY-MM-DD. allow_empty면 빈 입력 -> None (입사일 없음)."""
    while True:
        v = get_input(f"{prompt} (YYYY-MM-DD)", allow_empty=allow_empty)
        if not v:
            return None
        try:
            return parse_date(v)
        except ValueError:
            print("Invalid date format.")


def get_bool(prompt: str) -> bool:
    while True:
        v = get_input(f"{prompt} (true/false)").lower()
        if v == "true":
            return True
        if v == "false":
            return False
        print("Please enter true or false.")


def get_menu_choice(prompt: str, low: int, high: int) -> int:
    while True:
        v = get_input(prompt)
        try:
            choice = int(v)
        except ValueError:
            print("Invalid integer input.")
            continue
        if not low <= choice <= high:
            print(f"Choice must be between {low} and {high}.")
            continue
        return choice


def get_file_path(prompt: str, default: str = DEFAULT_DATA_FILE) -> str:
    # 빈 입력이면 기본 파일
    v = get_input(prompt, allow_empty=True, default=default)
    return v or default
