"""
Domain package for the employee roster.

Exports the employee model and the closed category sets used for selection
menus and optional strict validation.
"""

from roster.domain.categories import (
    DEPARTMENTS,
    GENDERS,
    POSITIONS,
    CategoryError,
    check_categories,
)
from roster.domain.models import Employee, full_name_key

__all__ = [
    "DEPARTMENTS",
    "GENDERS",
    "POSITIONS",
    "CategoryError",
    "Employee",
    "check_categories",
    "full_name_key",
]
