import random

from roster.domain.categories import check_categories
from roster.generator import MIN_SALARY, SALARY_SPAN, generate_employee, generate_employees
from roster.infrastructure.codec import format_line, parse_line

BATCH_SIZE = 50


def test_generate_employees_is_deterministic_for_a_seed():
    first = list(generate_employees(BATCH_SIZE, seed=123))
    second = list(generate_employees(BATCH_SIZE, seed=123))

    assert len(first) == BATCH_SIZE
    assert first == second


def test_generated_employees_pass_strict_category_check():
    for employee in generate_employees(BATCH_SIZE, seed=1):
        check_categories(employee)


def test_generated_fields_are_well_formed():
    employee = generate_employee(random.Random(5))

    assert MIN_SALARY <= employee.salary <= MIN_SALARY + SALARY_SPAN
    assert employee.email == employee.email.lower()
    assert employee.email.startswith(f"{employee.first_name[0]}{employee.last_name}".lower())
    assert "@" in employee.email


def test_generated_employee_survives_file_round_trip():
    employee = generate_employee(random.Random(9))

    assert parse_line(format_line(employee)) == employee
