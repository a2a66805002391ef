from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import Optional

import typer

from roster.config import Settings, get_settings
from roster.controller import RosterController
from roster.infrastructure.roster_file import load_store
from roster.store import RecordStore
from roster.utils.logging import configure_logging

app = typer.Typer(help="Employee roster console.")


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else get_settings()


def _controller(settings: Settings, store: Optional[RecordStore] = None) -> RosterController:
    if store is None:
        store = load_store(settings.data_file, strict_categories=settings.strict_categories)
    return RosterController(
        store,
        data_file=settings.data_file,
        top_n=settings.top_n,
        strict_categories=settings.strict_categories,
        rng=random.Random(settings.random_seed),
    )


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    data_file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Roster file to load and append to (default from settings).",
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--open",
        help="Restrict gender, department and position to their closed option sets.",
    ),
) -> None:
    """
    Browse, search, sort and extend an employee roster file.

    Without a subcommand, starts the interactive menu.
    """
    updates = {}
    if data_file is not None:
        updates["data_file"] = data_file
    if strict is not None:
        updates["strict_categories"] = strict
    settings = get_settings().model_copy(update=updates)
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        _controller(settings).run()


@app.command()
def menu(ctx: typer.Context) -> None:
    """
    Start the interactive menu.
    """
    _controller(_settings(ctx)).run()


@app.command()
def info(ctx: typer.Context) -> None:
    """
    Show effective configuration values.
    """
    settings = _settings(ctx)
    typer.echo(
        f"file={settings.data_file} | top_n={settings.top_n} "
        f"strict_categories={settings.strict_categories} | "
        f"env={settings.app_env} log_level={settings.log_level}"
    )


@app.command()
def top(
    ctx: typer.Context,
    n: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        min=0,
        help="How many employees to list (default from settings).",
    ),
) -> None:
    """
    Sort the roster by full name and list the first N employees.
    """
    settings = _settings(ctx)
    if n is not None:
        settings = settings.model_copy(update={"top_n": n})
    _controller(settings).show_top()


@app.command("list")
def list_all(ctx: typer.Context) -> None:
    """
    List every employee in file order.
    """
    _controller(_settings(ctx)).list_all()


@app.command()
def search(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Full name to look up, e.g. 'Ana Silva'."),
) -> None:
    """
    Look up an employee by full name (case-insensitive). Exits with 1 when not found.
    """
    if _controller(_settings(ctx)).search(name) is None:
        raise typer.Exit(code=1)


@app.command()
def add(ctx: typer.Context) -> None:
    """
    Prompt for a new employee and append it to the roster file.
    """
    _controller(_settings(ctx)).add_from_prompts()


@app.command()
def generate(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", "-c", min=1, help="Number of employees to generate."),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Deterministic RNG seed (default from settings).",
    ),
) -> None:
    """
    Generate random employees and append them to the roster file.
    """
    settings = _settings(ctx)
    if seed is not None:
        settings = settings.model_copy(update={"random_seed": seed})
    controller = _controller(settings, store=RecordStore())
    for _ in range(count):
        controller.generate_random()


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
