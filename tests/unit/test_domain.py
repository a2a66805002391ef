from __future__ import annotations

import pytest
from pydantic import ValidationError

from roster.domain.categories import CategoryError, check_categories, is_valid_category
from roster.domain.models import Employee, full_name_key
from tests.factories import make_employee


def test_employee_is_immutable():
    employee = make_employee()

    with pytest.raises(ValidationError):
        employee.salary = 1.0


def test_employee_accepts_file_header_aliases():
    employee = Employee.model_validate(
        {
            "firstName": "Ana",
            "lastName": "Silva",
            "gender": "Female",
            "email": "a@x.com",
            "salary": 50000,
            "department": "IT",
            "position": "Senior",
            "jobTitle": "Dev",
            "company": "Acme",
        }
    )

    assert employee == make_employee(email="a@x.com")


def test_full_name_key_trims_and_ignores_case():
    assert full_name_key("  Ana ", " SILVA ") == "ana silva"
    assert make_employee("ANA", "Silva").full_name_key == "ana silva"


def test_str_summarises_employee():
    assert str(make_employee()) == "Ana Silva - Dev (IT) - Acme"


def test_check_categories_accepts_closed_set_values_in_any_case():
    check_categories(make_employee(gender="female", department="technical support", position="JUNIOR"))


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("gender", "Unknown"),
        ("department", "Legal"),
        ("position", "Head Manager"),
    ],
)
def test_check_categories_reports_offending_field(field, value):
    with pytest.raises(CategoryError) as excinfo:
        check_categories(make_employee(**{field: value}))

    assert excinfo.value.field == field
    assert excinfo.value.value == value
    assert isinstance(excinfo.value, ValueError)


def test_is_valid_category_ignores_surrounding_whitespace():
    assert is_valid_category("department", "  IT ")
    assert not is_valid_category("department", "I T")
