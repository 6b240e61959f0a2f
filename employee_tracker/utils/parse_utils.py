# utils/parse_utils.py
import re

FIELD_SEPARATOR = ","

_BLANK_RECORD = re.compile(r"^[,\s]*$")


def is_blank_record(line: str) -> bool:
    """빈 줄, 또는 콤마/공백으로만 된 줄."""
    return bool(_BLANK_RECORD.match(line))


def split_fields(line: str) -> list[str]:
    """
    'a, b ,c' -> ['a', 'b', 'c']
    따옴표/이스케이프 미지원: 값 안에 콤마가 있으면 필드 수가 달라진다.
    빈 필드는 유지 ('1,,x' -> ['1', '', 'x']).
    """
    return [tok.strip() for tok in line.split(FIELD_SEPARATOR)]


def parse_bool(text: str) -> bool:
    """'true'(대소문자 무시)만 True. 그 외는 전부 False (오류 없음)."""
    return text.strip().lower() == "true"


def is_bool_literal(text: str) -> bool:
    return text.strip().lower() in ("true", "false")


def format_bool(value: bool) -> str:
    return "true" if value else "false"
