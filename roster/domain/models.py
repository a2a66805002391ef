"""
Domain models for the employee roster.

Defines the employee record as stored one-per-line in the roster file. Field
aliases match the camelCase header of that file so the model can be built from
(or dumped to) header-keyed mappings as well as from Python field names.
"""
from __future__ import annotations

from pydantic import BaseModel, Field


def full_name_key(first_name: str, last_name: str) -> str:
    """
    Case-insensitive ordering/search key: trimmed first and last name joined by a space.
    """
    return f"{first_name.strip()} {last_name.strip()}".casefold()


class Employee(BaseModel):
    """
    A single employee record.

    Records have no identity field; two records are the "same person" for
    ordering and search purposes when their `full_name_key` matches.
    """

    first_name: str = Field(..., alias="firstName", description="Given name.")
    last_name: str = Field(..., alias="lastName", description="Family name.")
    gender: str = Field(..., description="Free text, or one of GENDERS in strict mode.")
    email: str = Field(..., description="Contact email address.")
    salary: float = Field(0.0, description="Annual salary; non-negative by convention.")
    department: str = Field(..., description="Department tag.")
    position: str = Field(..., description="Seniority / position tag.")
    job_title: str = Field(..., alias="jobTitle", description="Job title.")
    company: str = Field(..., description="Employer company name.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def full_name_key(self) -> str:
        return full_name_key(self.first_name, self.last_name)

    def __str__(self) -> str:
        return f"{self.full_name} - {self.job_title} ({self.department}) - {self.company}"


__all__ = ["Employee", "full_name_key"]
