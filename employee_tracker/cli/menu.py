# cli/menu.py
from employee_tracker.cli.employee_menu import (
    add_employee, load_employees, remove_employee, save_employees,
    show_employees, show_tenure_report, update_employee
)
from employee_tracker.config import DEFAULT_DATA_FILE
from employee_tracker.data.employee_store import EmployeeStore
from employee_tracker.exceptions import CancelAction, GoBackAction
from employee_tracker.utils.input_handler import get_menu_choice

MENU_ITEMS = [
    "Load employees from file",
    "Display all employees",
    "Add employee",
    "Remove employee",
    "Update employee",
    "Generate tenure report",
    "Save employees",
    "Exit",
]


def main_menu(store: EmployeeStore, data_file: str = DEFAULT_DATA_FILE):
    while True:
        print("\n=== Employee Tracker Menu ===")
        for i, label in enumerate(MENU_ITEMS, start=1):
            print(f"{i}. {label}")

        try:
            choice = get_menu_choice("Choose option", 1, len(MENU_ITEMS))
            if choice == 1:
                load_employees(store, data_file)
            elif choice == 2:
                show_employees(store)
            elif choice == 3:
                add_employee(store)
            elif choice == 4:
                remove_employee(store)
            elif choice == 5:
                update_employee(store)
            elif choice == 6:
                show_tenure_report(store)
            elif choice == 7:
                save_employees(store, data_file)
            else:
                print("Exiting Employee Tracker... Goodbye!")
                break
        except GoBackAction:
            print("Back to main menu.")
        except CancelAction:
            print("Cancelled.")
