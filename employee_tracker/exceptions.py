# exceptions.py
class EmployeeTrackerError(Exception):
    pass


class MalformedRecordError(EmployeeTrackerError):
    """데이터 파일 한 줄을 해석하지 못했을 때. load 중에는 해당 줄만 건너뜀."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: {text!r}")


class StoreIOError(EmployeeTrackerError):
    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class RecordFileNotFoundError(StoreIOError):
    def __init__(self, path):
        super().__init__(path, "file not found or not a regular file")


class InvalidFieldNameError(EmployeeTrackerError):
    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"unknown field: {field_name!r}")


class InvalidFieldTypeError(EmployeeTrackerError):
    def __init__(self, field_name: str, expected: str, actual: str):
        self.field_name = field_name
        self.expected = expected
        self.actual = actual
        super().__init__(f"field {field_name!r} expects {expected}, got {actual}")


# --- 콘솔 입력 흐름 제어 ---
class CancelAction(Exception):
    """'cancel' 입력 시: 현재 작업 취소 후 메인 메뉴로."""


class GoBackAction(Exception):
    """'back' 입력 시: 이전 메뉴로."""
