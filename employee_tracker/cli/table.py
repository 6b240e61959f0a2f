# cli/table.py
from typing import Iterable, List

from employee_tracker.config import TABLE_WIDTHS
from employee_tracker.models.employee import Employee
from employee_tracker.utils.date_helper import format_date
from employee_tracker.utils.parse_utils import format_bool

HEADERS = ["ID", "Name", "Position", "Salary", "Hire Date", "Department", "Active"]


def truncate(text: str | None, max_len: int) -> str:
    if text is None:
        return ""
    return text if len(text) <= max_len else text[:max_len - 3] + "..."


def _border() -> str:
    return "+" + "+".join("-" * (w + 2) for w in TABLE_WIDTHS.values()) + "+"


def _row(cells: List[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def format_table(employees: Iterable[Employee]) -> str:
    w = TABLE_WIDTHS
    border = _border()
    lines = [
        border,
        _row([h.ljust(width) for h, width in zip(HEADERS, w.values())]),
        border,
    ]
    for e in employees:
        lines.append(_row([
            str(e.id).rjust(w["id"]),
            truncate(e.name, w["name"]).ljust(w["name"]),
            truncate(e.position, w["position"]).ljust(w["position"]),
            f"{e.salary:{w['salary']}.2f}",
            format_date(e.hire_date, "N/A").rjust(w["hire_date"]),
            truncate(e.department, w["department"]).ljust(w["department"]),
            format_bool(e.active).ljust(w["active"]),
        ]))
    lines.append(border)
    return "\n".join(lines)
