"""
Line codec for the roster file.

Maps one comma-separated line to an `Employee` and back. The format has no
quoting or escaping: a comma inside a field value shifts every later column,
so such values cannot be stored faithfully.
"""

from __future__ import annotations

from typing import Optional

from roster.domain.models import Employee
from roster.utils.logging import get_logger

log = get_logger(__name__)

FIELD_NAMES = (
    "firstName",
    "lastName",
    "gender",
    "email",
    "salary",
    "department",
    "position",
    "jobTitle",
    "company",
)
HEADER = ",".join(FIELD_NAMES)
SEPARATOR = ","


def parse_salary(raw: str) -> Optional[float]:
    """Parse a salary value, returning None when it is not a number."""
    try:
        return float(raw.strip())
    except ValueError:
        return None


def parse_line(line: str) -> Optional[Employee]:
    """
    Build an `Employee` from one roster line.

    Returns None when the line has fewer than nine fields. Columns past the
    ninth are ignored. A non-numeric salary is logged and replaced by 0.0; the
    record is still produced.
    """
    parts = [part.strip() for part in line.split(SEPARATOR)]
    if len(parts) < len(FIELD_NAMES):
        return None

    first_name, last_name, gender, email, raw_salary, department, position, job_title, company = (
        parts[: len(FIELD_NAMES)]
    )

    salary = parse_salary(raw_salary)
    if salary is None:
        log.warning(
            f"Invalid salary value for: {first_name} {last_name}",
            extra={"salary": raw_salary},
        )
        salary = 0.0

    return Employee(
        first_name=first_name,
        last_name=last_name,
        gender=gender,
        email=email,
        salary=salary,
        department=department,
        position=position,
        job_title=job_title,
        company=company,
    )


def format_line(record: Employee) -> str:
    """Serialize an `Employee` as one roster line (no trailing newline)."""
    return SEPARATOR.join(
        [
            record.first_name,
            record.last_name,
            record.gender,
            record.email,
            repr(float(record.salary)),
            record.department,
            record.position,
            record.job_title,
            record.company,
        ]
    )


__all__ = ["FIELD_NAMES", "HEADER", "format_line", "parse_line", "parse_salary"]
