from __future__ import annotations

import logging

import pytest

from roster.infrastructure.codec import HEADER, format_line, parse_line
from tests.factories import make_employee

ANA_LINE = "Ana,Silva,Female,a@x.com,50000,IT,Senior,Dev,Acme"


def test_header_matches_field_order():
    assert HEADER == "firstName,lastName,gender,email,salary,department,position,jobTitle,company"


def test_parse_line_maps_fields_positionally():
    employee = parse_line(ANA_LINE)

    assert employee is not None
    assert employee.first_name == "Ana"
    assert employee.last_name == "Silva"
    assert employee.gender == "Female"
    assert employee.email == "a@x.com"
    assert employee.salary == 50000.0
    assert employee.department == "IT"
    assert employee.position == "Senior"
    assert employee.job_title == "Dev"
    assert employee.company == "Acme"


def test_parse_line_trims_every_field():
    employee = parse_line(" Ana , Silva ,Female, a@x.com , 50000 ,IT, Senior ,Dev , Acme ")

    assert employee == parse_line(ANA_LINE)


@pytest.mark.parametrize(
    "line",
    [
        "",
        "Ana",
        "Ana,Silva,Female,a@x.com,50000,IT,Senior,Dev",
    ],
)
def test_parse_line_with_too_few_fields_is_invalid(line):
    assert parse_line(line) is None


def test_parse_line_ignores_extra_columns():
    employee = parse_line(ANA_LINE + ",extra,columns")

    assert employee is not None
    assert employee.company == "Acme"


def test_parse_line_with_bad_salary_defaults_to_zero(caplog):
    with caplog.at_level(logging.WARNING, logger="roster.infrastructure.codec"):
        employee = parse_line("Ana,Silva,Female,a@x.com,lots,IT,Senior,Dev,Acme")

    assert employee is not None
    assert employee.salary == 0.0
    assert employee.department == "IT"
    assert employee.company == "Acme"
    assert "Invalid salary value for: Ana Silva" in caplog.text


def test_comma_inside_a_field_shifts_columns():
    employee = parse_line("Ana,Silva,Female,a@x.com,50000,IT,Senior,Dev,Smith, Inc.")

    assert employee is not None
    assert employee.company == "Smith"


def test_format_line_renders_salary_as_float_text():
    line = format_line(make_employee(salary=50000))

    assert line == "Ana,Silva,Female,asilva@example.com,50000.0,IT,Senior,Dev,Acme"


@pytest.mark.parametrize(
    "employee",
    [
        make_employee(),
        make_employee("Carl", "Zee", salary=1234.56, company=""),
        make_employee("Bea", "Ng", salary=0.1 + 0.2, department="Customer Service"),
    ],
)
def test_parse_line_inverts_format_line(employee):
    assert parse_line(format_line(employee)) == employee
