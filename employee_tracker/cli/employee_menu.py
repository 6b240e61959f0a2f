# cli/employee_menu.py
from employee_tracker.cli.table import format_table
from employee_tracker.data.employee_store import EmployeeStore
from employee_tracker.exceptions import InvalidFieldTypeError, StoreIOError
from employee_tracker.utils.input_handler import (
    get_bool, get_date, get_file_path, get_menu_choice, get_non_empty,
    get_non_negative_float, get_positive_int
)

# 수정 메뉴 번호 -> (update 키, 라벨)
UPDATE_FIELDS = {
    1: ("name", "Name"),
    2: ("position", "Position"),
    3: ("salary", "Salary"),
    4: ("hiredate", "Hire Date"),
    5: ("department", "Department"),
    6: ("active", "Active"),
}


def load_employees(store: EmployeeStore, default_path: str) -> bool:
    path = get_file_path("Enter file path to load", default=default_path)
    try:
        count = store.load(path)
    except StoreIOError as e:
        print(f"Failed to load data: {e}")
        return False
    print(f"Data loaded ({count} employee(s)).")
    return True


def save_employees(store: EmployeeStore, default_path: str) -> bool:
    path = get_file_path("Enter file path to save", default=default_path)
    try:
        count = store.save(path)
    except StoreIOError as e:
        print(f"Failed to save data: {e}")
        return False
    print(f"Data saved ({count} employee(s)).")
    return True


def show_employees(store: EmployeeStore):
    employees = store.list_all()
    if not employees:
        print("No employee records found.")
        return
    print(format_table(employees))


def add_employee(store: EmployeeStore):
    name = get_non_empty("Name")
    position = get_non_empty("Position")
    salary = get_non_negative_float("Salary")
    hire_date = get_date("Hire Date (empty if unknown)", allow_empty=True)
    department = get_non_empty("Department")
    active = get_bool("Active")

    emp = store.add(name, position, salary, hire_date, department, active)
    print(f"Added Employee:\n{emp}")
    return emp


def remove_employee(store: EmployeeStore) -> bool:
    emp_id = get_positive_int("Employee ID to remove")
    removed = store.remove(emp_id)
    print("Employee removed." if removed else "Employee not found.")
    return removed


def _read_value(key: str, label: str):
    if key == "salary":
        return get_non_negative_float(f"New {label}")
    if key == "hiredate":
        return get_date(f"New {label} (empty to clear)", allow_empty=True)
    if key == "active":
        return get_bool(f"New {label}")
    return get_non_empty(f"New {label}")


def update_employee(store: EmployeeStore) -> bool:
    emp_id = get_positive_int("Employee ID to update")
    emp = store.find(emp_id)
    if emp is None:
        print("Employee not found.")
        return False

    print(f"Current data: {emp}")
    print("Select field to update:")
    for num, (_, label) in UPDATE_FIELDS.items():
        print(f"{num}. {label}")
    key, label = UPDATE_FIELDS[get_menu_choice("Choice", 1, len(UPDATE_FIELDS))]

    try:
        updated = store.update(emp_id, key, _read_value(key, label))
    except InvalidFieldTypeError as e:
        print(f"Update failed: {e}")
        return False
    print("Update successful." if updated else "Update failed.")
    return updated


def show_tenure_report(store: EmployeeStore):
    for category, employees in store.tenure_report().items():
        print(f"\n{category}:")
        if not employees:
            print("  No employees.")
        else:
            print(format_table(employees))
