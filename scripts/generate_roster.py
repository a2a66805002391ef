"""
Sample roster generation script.

Writes a fresh roster file (header plus N randomly generated employees) using
a deterministic seed, for demos and test fixtures.
"""

from __future__ import annotations

import sys
import time
from pathlib import Path

import typer

from roster.generator import generate_employees
from roster.infrastructure.codec import HEADER, format_line

app = typer.Typer(help="Generate a sample employee roster file.")


def _write_roster(path: Path, rows: int, seed: int) -> None:
    with path.open("w", encoding="utf-8") as f:
        f.write(HEADER + "\n")
        for employee in generate_employees(rows, seed=seed):
            f.write(format_line(employee) + "\n")


@app.command()
def main(
    rows: int = typer.Option(
        100,
        "--rows",
        "-r",
        min=0,
        help="Number of employees to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("Applicants_Form.txt"),
        "--output",
        "-o",
        help="Roster file to write (overwritten if it exists).",
    ),
) -> None:
    """
    Generate a roster file with random employees.
    """
    start = time.perf_counter()
    output.parent.mkdir(parents=True, exist_ok=True)

    typer.echo(f"Generating {rows:,} employees -> {output} (seed={seed})")
    _write_roster(output, rows=rows, seed=seed)
    typer.echo(f"Done in {time.perf_counter() - start:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
