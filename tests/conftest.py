"""
Shared fixtures for Employee Tracker tests.
"""
from datetime import date

import pytest

from employee_tracker.data.employee_store import EmployeeStore

TODAY = date(2026, 6, 1)

SAMPLE_LINES = [
    "1,Sarah Clark,Data Scientist,35000.00,2025-03-20,Software,true",
    "2,Tom Baker,Engineer,72000.50,2022-01-10,Software,false",
    "3,Ana Ruiz,Director,120000.00,2015-05-01,Management,true",
]


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def store():
    """Store with three employees spread over all tenure buckets."""
    s = EmployeeStore()
    s.add("Sarah Clark", "Data Scientist", 35000.0, date(2025, 3, 20), "Software", True)
    s.add("Tom Baker", "Engineer", 72000.5, date(2022, 1, 10), "Software", False)
    s.add("Ana Ruiz", "Director", 120000.0, date(2015, 5, 1), "Management", True)
    return s


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "employees.txt"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def scripted_input(monkeypatch):
    """Feed a list of answers to input(); returns the list of prompts seen."""
    prompts = []

    def install(answers):
        it = iter(answers)

        def fake_input(prompt=""):
            prompts.append(prompt)
            return next(it)

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return install
