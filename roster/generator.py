"""
Synthetic employee generation.

Draws records from fixed value pools for demos and test fixtures. Categorical
fields come from the closed sets, so generated records always pass the strict
category check. Pass a seeded `random.Random` for deterministic output.
"""

from __future__ import annotations

import random
from typing import Iterator, Optional

from roster.domain.categories import DEPARTMENTS, GENDERS, POSITIONS
from roster.domain.models import Employee

FIRST_NAMES = (
    "Abby", "Abdul", "Ada", "Addison", "Adelbert", "Adelina", "Adella", "Adolf",
    "Adriane", "Alex", "Alice", "Aaron", "Ava", "Vitor", "Hugo", "Tainara", "Carlos",
)
LAST_NAMES = (
    "Lulham", "Siaskowski", "Blinkhorn", "Tamburo", "Ramsey", "Alderton", "Pattle",
    "Chrispin", "Johnson", "Smith", "Williams",
)
EMAIL_DOMAINS = (
    "gmail.com", "yahoo.com", "outlook.com", "hotmail.com", "icloud.com", "aol.com", "live.com",
)
JOB_TITLES = (
    "Java Developer", "HR Specialist", "Finance Analyst", "Marketing Coordinator", "Support Clerk",
)
COMPANIES = ("VTR-TECH", "TechCorp", "InfoSphere", "CodeSolutions", "DevsUnited")

MIN_SALARY = 2500.0
SALARY_SPAN = 100_000.0


def generate_employee(rng: Optional[random.Random] = None) -> Employee:
    """Build one random employee."""
    rng = rng or random.Random()
    first_name = rng.choice(FIRST_NAMES)
    last_name = rng.choice(LAST_NAMES)
    email = f"{first_name[0]}{last_name}{rng.randrange(100)}@{rng.choice(EMAIL_DOMAINS)}".lower()

    return Employee(
        first_name=first_name,
        last_name=last_name,
        gender=rng.choice(GENDERS),
        email=email,
        salary=round(MIN_SALARY + rng.random() * SALARY_SPAN, 2),
        department=rng.choice(DEPARTMENTS),
        position=rng.choice(POSITIONS),
        job_title=rng.choice(JOB_TITLES),
        company=rng.choice(COMPANIES),
    )


def generate_employees(count: int, seed: Optional[int] = None) -> Iterator[Employee]:
    """Yield `count` random employees; the same seed yields the same batch."""
    rng = random.Random(seed)
    for _ in range(count):
        yield generate_employee(rng)


__all__ = ["generate_employee", "generate_employees"]
