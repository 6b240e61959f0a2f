"""
Tests for employee_tracker/utils/input_handler.py - prompt loops and validators.
"""
from datetime import date

import pytest

from employee_tracker.exceptions import CancelAction, GoBackAction
from employee_tracker.utils import input_handler as ih


class TestGetInput:
    def test_strips_and_returns(self, scripted_input):
        scripted_input(["  hello  "])
        assert ih.get_input("Name") == "hello"

    def test_reprompts_on_empty(self, scripted_input, capsys):
        prompts = scripted_input(["", "x"])
        assert ih.get_input("Name") == "x"
        assert len(prompts) == 2
        assert "cannot be empty" in capsys.readouterr().out

    def test_allow_empty(self, scripted_input):
        scripted_input([""])
        assert ih.get_input("Memo", allow_empty=True) == ""

    def test_default_in_label(self, scripted_input):
        prompts = scripted_input(["a"])
        ih.get_input("File", default="employees.txt")
        assert prompts == ["File [employees.txt]: "]

    def test_cancel_and_back(self, scripted_input):
        scripted_input(["CANCEL", "back"])
        with pytest.raises(CancelAction):
            ih.get_input("Name")
        with pytest.raises(GoBackAction):
            ih.get_input("Name")


class TestValidators:
    def test_non_negative_float(self, scripted_input, capsys):
        scripted_input(["abc", "-1", "nan", "1250.5"])
        assert ih.get_non_negative_float("Salary") == 1250.5
        out = capsys.readouterr().out
        assert "Invalid decimal number." in out
        assert "Value must be non-negative." in out

    def test_positive_int(self, scripted_input, capsys):
        scripted_input(["1.5", "0", "7"])
        assert ih.get_positive_int("ID") == 7
        assert "ID must be positive." in capsys.readouterr().out

    def test_date(self, scripted_input, capsys):
        scripted_input(["2024/01/01", "2024-01-01"])
        assert ih.get_date("Hire Date") == date(2024, 1, 1)
        assert "Invalid date format." in capsys.readouterr().out

    def test_date_allow_empty(self, scripted_input):
        scripted_input([""])
        assert ih.get_date("Hire Date", allow_empty=True) is None

    def test_bool(self, scripted_input, capsys):
        scripted_input(["yes", "False"])
        assert ih.get_bool("Active") is False
        assert "Please enter true or false." in capsys.readouterr().out

    def test_menu_choice_range(self, scripted_input, capsys):
        scripted_input(["x", "9", "3"])
        assert ih.get_menu_choice("Choose", 1, 8) == 3
        out = capsys.readouterr().out
        assert "Invalid integer input." in out
        assert "Choice must be between 1 and 8." in out

    def test_file_path_default(self, scripted_input):
        scripted_input(["", "other.txt"])
        assert ih.get_file_path("Path") == "employees.txt"
        assert ih.get_file_path("Path") == "other.txt"


class TestNonEmptyText:
    def test_rejects_commas(self, scripted_input, capsys):
        prompts = scripted_input(["Smith, John", "Smith John"])
        assert ih.get_non_empty("Name") == "Smith John"
        assert len(prompts) == 2
        assert "Commas are not supported." in capsys.readouterr().out
