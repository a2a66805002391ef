from __future__ import annotations

from roster.domain.models import Employee


def make_employee(first_name: str = "Ana", last_name: str = "Silva", **overrides) -> Employee:
    """Build an employee with plausible defaults for every field not overridden."""
    fields = {
        "first_name": first_name,
        "last_name": last_name,
        "gender": "Female",
        "email": f"{first_name[:1]}{last_name}@example.com".lower(),
        "salary": 50000.0,
        "department": "IT",
        "position": "Senior",
        "job_title": "Dev",
        "company": "Acme",
    }
    fields.update(overrides)
    return Employee(**fields)
