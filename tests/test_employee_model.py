"""
Tests for employee_tracker/models/employee.py - tenure, text format, field updates.
"""
from datetime import date, datetime

import pytest

from employee_tracker.exceptions import (
    InvalidFieldNameError, InvalidFieldTypeError, MalformedRecordError
)
from employee_tracker.models.employee import (
    TENURE_CATEGORIES, Employee, FieldKind, tenure_category_for, value_kind
)


def make(**overrides):
    fields = dict(id=1, name="Jane", position="Dev", salary=50000.0,
                  hire_date=date(2020, 6, 15), department="Eng", active=True)
    fields.update(overrides)
    return Employee(**fields)


class TestTenure:
    """Whole-year tenure and the three report buckets."""

    def test_no_hire_date_is_zero(self, today):
        assert make(hire_date=None).tenure_years(today) == 0

    def test_counts_completed_years_only(self):
        emp = make(hire_date=date(2020, 6, 15))
        assert emp.tenure_years(date(2026, 6, 14)) == 5
        assert emp.tenure_years(date(2026, 6, 15)) == 6

    def test_leap_day_anniversary(self):
        emp = make(hire_date=date(2020, 2, 29))
        assert emp.tenure_years(date(2021, 2, 28)) == 0
        assert emp.tenure_years(date(2021, 3, 1)) == 1

    def test_future_hire_date_is_not_negative(self, today):
        assert make(hire_date=date(2030, 1, 1)).tenure_years(today) == 0

    def test_monotonic_as_today_advances(self):
        emp = make(hire_date=date(2019, 9, 30))
        values = [emp.tenure_years(date(y, m, 1)) for y in range(2019, 2027) for m in (1, 6, 12)]
        assert values == sorted(values)

    def test_defaults_to_current_date(self):
        emp = make(hire_date=date.today())
        assert emp.tenure_years() == 0

    @pytest.mark.parametrize("years,expected", [
        (0, "0-1 years"), (1, "0-1 years"), (2, "1-5 years"),
        (5, "1-5 years"), (6, "5+ years"), (40, "5+ years"),
    ])
    def test_category_boundaries(self, years, expected):
        assert tenure_category_for(years) == expected

    def test_every_value_falls_in_exactly_one_bucket(self):
        for years in range(0, 60):
            assert tenure_category_for(years) in TENURE_CATEGORIES

    def test_category_uses_hire_date(self, today):
        assert make(hire_date=date(2015, 5, 1)).tenure_category(today) == "5+ years"
        assert make(hire_date=None).tenure_category(today) == "0-1 years"


class TestToText:
    """Serialization to one comma-separated line."""

    def test_field_order_and_formatting(self):
        emp = make(id=7, salary=1234.5, active=False)
        assert emp.to_text() == "7,Jane,Dev,1234.50,2020-06-15,Eng,false"

    def test_missing_hire_date_is_empty_field(self):
        assert make(hire_date=None).to_text() == "1,Jane,Dev,50000.00,,Eng,true"

    def test_salary_rounds_to_two_digits(self):
        assert ",0.13," in make(salary=0.125001).to_text()


class TestFromText:
    """Parsing of one persisted line."""

    def test_parses_all_fields(self):
        emp = Employee.from_text("1,Sarah Clark,Data Scientist,35000.00,2025-03-20,Software,true")
        assert emp.id == 1
        assert emp.name == "Sarah Clark"
        assert emp.position == "Data Scientist"
        assert emp.salary == 35000.0
        assert emp.hire_date == date(2025, 3, 20)
        assert emp.department == "Software"
        assert emp.active is True

    def test_trims_whitespace(self):
        emp = Employee.from_text("  4 , Bo ,  QA , 10 , , Ops , TRUE \n")
        assert (emp.id, emp.name, emp.position, emp.department) == (4, "Bo", "QA", "Ops")
        assert emp.hire_date is None
        assert emp.active is True

    def test_round_trip(self):
        original = make(id=12, salary=99.99, hire_date=date(2011, 1, 2), active=False)
        parsed = Employee.from_text(original.to_text())
        assert parsed == original
        assert parsed.to_text() == original.to_text()

    @pytest.mark.parametrize("line", [
        "garbage,line",
        "1,a,b,1.0,2020-01-01,c",
        "1,a,b,1.0,2020-01-01,c,true,extra",
        "1,Smith, John,Dev,1.0,2020-01-01,Eng,true",
    ])
    def test_wrong_field_count(self, line):
        with pytest.raises(MalformedRecordError):
            Employee.from_text(line)

    def test_bad_id_carries_text(self):
        with pytest.raises(MalformedRecordError) as exc:
            Employee.from_text("x1,a,b,1.0,,c,true")
        assert exc.value.text == "x1"

    def test_non_positive_id(self):
        with pytest.raises(MalformedRecordError):
            Employee.from_text("0,a,b,1.0,,c,true")

    def test_bad_salary_carries_text(self):
        with pytest.raises(MalformedRecordError) as exc:
            Employee.from_text("1,a,b,lots,,c,true")
        assert exc.value.text == "lots"

    @pytest.mark.parametrize("bad_date", ["2020-13-01", "2020-1-5", "20200105", "yesterday"])
    def test_bad_date(self, bad_date):
        with pytest.raises(MalformedRecordError) as exc:
            Employee.from_text(f"1,a,b,1.0,{bad_date},c,true")
        assert exc.value.text == bad_date

    @pytest.mark.parametrize("id_txt", ["99999999999999999999999", "9223372036854775808", "1_0"])
    def test_id_must_be_64_bit_literal(self, id_txt):
        with pytest.raises(MalformedRecordError) as exc:
            Employee.from_text(f"{id_txt},a,b,1.0,,c,true")
        assert exc.value.text == id_txt

    def test_largest_64_bit_id(self):
        assert Employee.from_text("9223372036854775807,a,b,1.0,,c,true").id == 2 ** 63 - 1

    @pytest.mark.parametrize("salary_txt", ["1_000", "inf", "-Infinity", "nan"])
    def test_salary_must_be_plain_finite_number(self, salary_txt):
        with pytest.raises(MalformedRecordError) as exc:
            Employee.from_text(f"1,a,b,{salary_txt},,c,true")
        assert exc.value.text == salary_txt

    def test_empty_name(self):
        with pytest.raises(MalformedRecordError):
            Employee.from_text("1,,b,1.0,,c,true")

    def test_lenient_boolean(self, caplog):
        emp = Employee.from_text("1,a,b,1.0,,c,yes")
        assert emp.active is False
        assert "not true/false" in caplog.text

    def test_false_literal_does_not_warn(self, caplog):
        assert Employee.from_text("1,a,b,1.0,,c,False").active is False
        assert caplog.text == ""


class TestIdentity:
    """Equality and hashing depend only on id."""

    def test_equal_by_id(self):
        assert make(id=3, name="A") == make(id=3, name="B")
        assert make(id=3) != make(id=4)

    def test_hash_by_id(self):
        assert len({make(id=3, name="A"), make(id=3, name="B")}) == 1

    def test_id_is_read_only(self):
        with pytest.raises(AttributeError):
            make().id = 9

    def test_str_display(self):
        text = str(make(hire_date=None))
        assert "ID: 1" in text
        assert "Hire Date: N/A" in text
        assert "Salary: 50000.00" in text


class TestSetField:
    """Typed single-field update."""

    def test_value_kinds(self):
        assert value_kind(True) is FieldKind.BOOLEAN
        assert value_kind(3) is FieldKind.NUMBER
        assert value_kind(2.5) is FieldKind.NUMBER
        assert value_kind(date(2020, 1, 1)) is FieldKind.DATE
        assert value_kind(None) is FieldKind.DATE
        assert value_kind("x") is FieldKind.TEXT
        assert value_kind([1]) is None

    def test_case_insensitive_name(self):
        emp = make()
        emp.set_field("NAME", "Janet")
        assert emp.name == "Janet"

    def test_number_stored_as_float(self):
        emp = make()
        emp.set_field("salary", 60000)
        assert isinstance(emp.salary, float)
        assert emp.salary == 60000.0

    def test_hire_date_accepts_none_and_datetime(self):
        emp = make()
        emp.set_field("hireDate", datetime(2021, 4, 5, 9, 30))
        assert emp.hire_date == date(2021, 4, 5)
        emp.set_field("hiredate", None)
        assert emp.hire_date is None

    def test_unknown_field(self):
        with pytest.raises(InvalidFieldNameError):
            make().set_field("id", 5)

    @pytest.mark.parametrize("field,value", [
        ("salary", "50000"),
        ("salary", True),
        ("active", "true"),
        ("active", 1),
        ("name", None),
        ("hiredate", "2020-01-01"),
    ])
    def test_type_mismatch_leaves_record_unchanged(self, field, value):
        emp = make()
        before = emp.to_text()
        with pytest.raises(InvalidFieldTypeError):
            emp.set_field(field, value)
        assert emp.to_text() == before
