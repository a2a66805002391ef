"""
Pytest configuration for the employee roster.

Provides fixtures for:
- Settings isolation (environment + cached settings)
- Sample employees and a roster file on disk
- A rich console that renders into a buffer
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Generator, Iterable, List

import pytest
from rich.console import Console

from roster.config import get_settings
from roster.domain.models import Employee
from roster.infrastructure.codec import HEADER, format_line
from tests.factories import make_employee

ROSTER_ENV_VARS = (
    "ROSTER_DATA_FILE",
    "ROSTER_TOP_N",
    "ROSTER_STRICT_CATEGORIES",
    "ROSTER_RANDOM_SEED",
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
)


@pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """
    Run every test with a clean environment and a fresh settings cache.

    The working directory moves to a temp dir so a developer's `.env` or
    roster file is never picked up.
    """
    for name in ROSTER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_employees() -> List[Employee]:
    return [
        make_employee("Carl", "Zee", gender="Male", department="Sales"),
        make_employee("Ann", "Ng", department="HR", position="Junior"),
        make_employee("Bea", "Ng", department="Finance", position="Intern"),
    ]


@pytest.fixture
def write_roster(tmp_path: Path) -> Callable[[Iterable[str]], Path]:
    """
    Write a roster file made of HEADER plus the given raw lines.
    """

    def _write(lines: Iterable[str], name: str = "roster.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join([HEADER, *lines]) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def roster_file(write_roster, sample_employees: List[Employee]) -> Path:
    return write_roster(format_line(employee) for employee in sample_employees)


@pytest.fixture
def console_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_buffer: io.StringIO) -> Console:
    return Console(file=console_buffer, width=120, color_system=None, force_terminal=False)
