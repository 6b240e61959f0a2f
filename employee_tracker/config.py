# config.py
# 기본 데이터 파일: 실행 위치(cwd) 기준 상대 경로
DEFAULT_DATA_FILE = "employees.txt"

DATE_FORMAT = "%Y-%m-%d"          # YYYY-MM-DD
LOG_FORMAT = "%(levelname)s: %(message)s"

# 콘솔 표 컬럼 폭 (잘림 기준)
TABLE_WIDTHS = {
    "id": 2,
    "name": 17,
    "position": 20,
    "salary": 10,
    "hire_date": 10,
    "department": 12,
    "active": 6,
}
