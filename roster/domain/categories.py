"""
Closed option sets for the categorical employee fields.

Department and position are open string tags on `Employee`. These sets back the
numbered selection menus and the optional strict-mode check that rejects
records whose categories fall outside them.
"""
from __future__ import annotations

from typing import Dict, Tuple

from roster.domain.models import Employee

GENDERS: Tuple[str, ...] = ("Male", "Female")

DEPARTMENTS: Tuple[str, ...] = (
    "IT Development",
    "Sales",
    "HR",
    "Finance",
    "Marketing",
    "Accounting",
    "Operations",
    "Technical Support",
    "Customer Service",
    "IT",
)

POSITIONS: Tuple[str, ...] = ("Senior", "Middle", "Intern", "Junior", "Contract", "Analyst")

CATEGORY_OPTIONS: Dict[str, Tuple[str, ...]] = {
    "gender": GENDERS,
    "department": DEPARTMENTS,
    "position": POSITIONS,
}


class CategoryError(ValueError):
    """Raised when a categorical field holds a value outside its closed set."""

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        options = ", ".join(CATEGORY_OPTIONS[field])
        super().__init__(f"Invalid {field} '{value}'. Expected one of: {options}")


def is_valid_category(field: str, value: str) -> bool:
    """Case-insensitive membership test against the closed set for `field`."""
    wanted = value.strip().casefold()
    return any(option.casefold() == wanted for option in CATEGORY_OPTIONS[field])


def check_categories(employee: Employee) -> None:
    """
    Validate gender, department and position against their closed sets.

    Raises
    ------
    CategoryError
        For the first field (in file order) whose value is not allowed.
    """
    for field in ("gender", "department", "position"):
        value = getattr(employee, field)
        if not is_valid_category(field, value):
            raise CategoryError(field, value)


__all__ = [
    "CATEGORY_OPTIONS",
    "DEPARTMENTS",
    "GENDERS",
    "POSITIONS",
    "CategoryError",
    "check_categories",
    "is_valid_category",
]
