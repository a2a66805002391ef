"""
Interactive controller for the employee roster console.

Runs the numbered menu loop and links each choice to the record store, the
roster file and the console renderer. Input is read through a `prompt`
callable (typer's prompt by default) so scripted answers can drive the loop.

Usage:
    from roster.controller import RosterController

    controller = RosterController(store, data_file=Path("Applicants_Form.txt"))
    controller.run()
"""

from __future__ import annotations

import random
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple

import typer
from rich.console import Console

from roster.domain.categories import CATEGORY_OPTIONS
from roster.domain.models import Employee
from roster.generator import generate_employee
from roster.infrastructure.codec import parse_salary
from roster.infrastructure.roster_file import append_record
from roster.reporter import print_employee, print_employees, print_not_found
from roster.store import RecordStore
from roster.utils.logging import get_logger

log = get_logger(__name__)

Prompt = Callable[[str], str]


class MenuOption(Enum):
    SORT = "Sort and list top employees"
    LIST_ALL = "List all employees"
    SEARCH = "Search by full name"
    ADD = "Add employee"
    GENERATE_RANDOM = "Generate random employee"
    EXIT = "Exit"


def _typer_prompt(text: str) -> str:
    return typer.prompt(text, default="", show_default=False)


class RosterController:
    """
    Menu-driven front end over a `RecordStore`.

    Records created through ADD or GENERATE_RANDOM are added to the store and
    appended to `data_file`. A failed append is reported but the record stays
    in the store for the rest of the session.
    """

    def __init__(
        self,
        store: RecordStore,
        data_file: Path | str,
        console: Optional[Console] = None,
        prompt: Optional[Prompt] = None,
        top_n: int = 20,
        strict_categories: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.store = store
        self.data_file = Path(data_file)
        self.console = console or Console()
        self.prompt = prompt or _typer_prompt
        self.top_n = top_n
        self.strict_categories = strict_categories
        self.rng = rng or random.Random()

    def run(self) -> None:
        """Show the menu until the user picks EXIT."""
        while True:
            self.display_menu()
            option = self.read_choice()
            if option is None:
                continue
            if option is MenuOption.EXIT:
                self.console.print("Exiting program. Goodbye!")
                return
            self.handle(option)

    def display_menu(self) -> None:
        self.console.print("\n[bold]Please select an option:[/bold]")
        for number, option in enumerate(MenuOption, start=1):
            self.console.print(f"{number}. {option.value}")

    def read_choice(self) -> Optional[MenuOption]:
        """Read a menu number. Returns None (after a notice) for invalid input."""
        options = list(MenuOption)
        raw = self.prompt("Enter your choice").strip()
        try:
            choice = int(raw)
        except ValueError:
            choice = 0
        if not 1 <= choice <= len(options):
            self.console.print(
                f"[red]Invalid option. Please enter a number between 1 and {len(options)}.[/red]"
            )
            return None
        return options[choice - 1]

    def handle(self, option: MenuOption) -> None:
        handlers = {
            MenuOption.SORT: self.show_top,
            MenuOption.LIST_ALL: self.list_all,
            MenuOption.SEARCH: self.search,
            MenuOption.ADD: self.add_from_prompts,
            MenuOption.GENERATE_RANDOM: self.generate_random,
        }
        handlers[option]()

    # Menu actions

    def show_top(self) -> Tuple[Employee, ...]:
        """Sort the store and list the first `top_n` employees."""
        self.store.sort_by_full_name()
        top = self.store.top_n(self.top_n)
        print_employees(top, title=f"Top {self.top_n} Sorted Employees", console=self.console)
        return top

    def list_all(self) -> Tuple[Employee, ...]:
        employees = self.store.all()
        print_employees(employees, title="All Employees", console=self.console)
        return employees

    def search(self, query: Optional[str] = None) -> Optional[Employee]:
        if query is None:
            query = self.prompt("Enter the full name to search (First and Last name)")
        found = self.store.search_by_full_name(query)
        if found is None:
            print_not_found(query, console=self.console)
        else:
            print_employee(found, title="Employee Found", console=self.console)
        return found

    def add_from_prompts(self) -> Employee:
        """Prompt for the nine fields in file order, then store and persist the record."""
        first_name = self._read_non_empty("First Name")
        last_name = self._read_non_empty("Last Name")
        gender = self._read_category("gender", "Gender")
        email = self._read_non_empty("Email")
        salary = self._read_salary()
        department = self._read_category("department", "Department")
        position = self._read_category("position", "Position")
        job_title = self._read_non_empty("Job Title")
        company = self._read_non_empty("Company")

        employee = Employee(
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
        self._persist(employee)
        self.console.print("\n[green]Employee added successfully![/green]")
        print_employee(employee, console=self.console)
        return employee

    def generate_random(self) -> Employee:
        employee = generate_employee(self.rng)
        self._persist(employee)
        self.console.print("\n[green]Random Employee Generated[/green]")
        print_employee(employee, console=self.console)
        return employee

    # Helpers

    def _persist(self, employee: Employee) -> None:
        self.store.add(employee)
        if not append_record(self.data_file, employee):
            self.console.print(
                f"[yellow]Could not save to {self.data_file}; "
                "the record is kept for this session only.[/yellow]"
            )
        else:
            log.info(
                f"Appended {employee.full_name}",
                extra={"path": str(self.data_file), "records": len(self.store)},
            )

    def _read_non_empty(self, label: str) -> str:
        while True:
            value = self.prompt(label).strip()
            if value:
                return value
            self.console.print("[red]This field cannot be empty. Please enter a valid value.[/red]")

    def _read_option(self, label: str, options: Sequence[str]) -> str:
        self.console.print(f"Select {label}:")
        for number, option in enumerate(options, start=1):
            self.console.print(f"{number}. {option}")
        while True:
            raw = self.prompt(f"Enter a number between 1 and {len(options)}").strip()
            try:
                choice = int(raw)
            except ValueError:
                self.console.print("[red]Invalid input. Please enter a valid number.[/red]")
                continue
            if 1 <= choice <= len(options):
                return options[choice - 1]
            self.console.print("[red]Invalid input. Please enter a valid number.[/red]")

    def _read_category(self, field: str, label: str) -> str:
        if self.strict_categories:
            return self._read_option(label, CATEGORY_OPTIONS[field])
        return self._read_non_empty(label)

    def _read_salary(self) -> float:
        raw = self.prompt("Salary")
        salary = parse_salary(raw)
        if salary is None:
            log.warning("Invalid salary input", extra={"salary": raw})
            self.console.print("[yellow]Invalid salary input. Setting salary to 0.0.[/yellow]")
            return 0.0
        return salary


__all__ = ["MenuOption", "Prompt", "RosterController"]
