from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from roster.domain.models import Employee


def _salary(value: float) -> str:
    return f"{value:,.2f}"


def print_employees(
    employees: Sequence[Employee],
    title: str = "Employees",
    console: Optional[Console] = None,
) -> None:
    """
    Render employees as a numbered rich table in their current order.
    """
    console = console or Console()

    if not employees:
        console.print("[yellow]No employees to display.[/yellow]")
        return

    table = Table(title=title, box=box.ROUNDED, caption=f"{len(employees)} record(s)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Position", style="magenta")
    table.add_column("Department", style="blue")
    table.add_column("Job Title")
    table.add_column("Company", style="green")

    for index, employee in enumerate(employees, start=1):
        table.add_row(
            str(index),
            employee.full_name,
            employee.position,
            employee.department,
            employee.job_title,
            employee.company,
        )

    console.print(table)


def print_employee(
    employee: Employee,
    title: str = "Employee",
    console: Optional[Console] = None,
) -> None:
    """
    Render every field of a single employee as a two-column table.
    """
    console = console or Console()

    table = Table(title=title, box=box.ROUNDED, show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Name", employee.full_name)
    table.add_row("Gender", employee.gender)
    table.add_row("Email", employee.email)
    table.add_row("Salary", _salary(employee.salary))
    table.add_row("Department", employee.department)
    table.add_row("Position", employee.position)
    table.add_row("Job Title", employee.job_title)
    table.add_row("Company", employee.company)

    console.print(table)


def print_not_found(query: str, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(f"[red]Employee not found:[/red] {escape(query.strip())}")


__all__ = ["print_employee", "print_employees", "print_not_found"]
