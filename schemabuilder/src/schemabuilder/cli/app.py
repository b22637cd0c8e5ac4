"""Typer CLI application."""

from pathlib import Path
from typing import Optional

import typer

from schemabuilder.config.logging import setup_logging
from schemabuilder.config.settings import get_settings
from schemabuilder.scenarios.repository import (
    UnknownScenarioError,
    get_scenario,
    list_problem_sets,
)
from schemabuilder.session.operations import validate
from schemabuilder.session.progress import next_level
from schemabuilder.utils.schema_io import load_workspace
from schemabuilder.validation.diagnostics import random_anomaly_picker

app = typer.Typer(help="Schema Builder: practice database normalization (1NF, 2NF, 3NF)")

# Catalog, level and file problems exit 2; a failed verdict exits 1
CONFIG_ERRORS = (UnknownScenarioError, FileNotFoundError, ValueError)

SET_OPTION = typer.Option(
    None, "--set", help="Problem set id (defaults to the default_problem_set setting)"
)


def _fail(error: Exception) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(2)


def _resolve_set(set_id: Optional[str]) -> str:
    return set_id or get_settings().default_problem_set


@app.command()
def sets():
    """List problem sets and their levels."""
    setup_logging()
    try:
        problem_sets = list_problem_sets()
    except CONFIG_ERRORS as e:
        _fail(e)

    for problem_set in problem_sets:
        typer.echo(f"{problem_set.id}: {problem_set.name}")
        for scenario in problem_set.levels:
            typer.echo(f"  {scenario.level}. {scenario.title}")


@app.command()
def show(level: int, set_id: Optional[str] = SET_OPTION):
    """
    Show a level's description, hint and attribute pool.

    Args:
        level: Level number
        set_id: Problem set id, e.g. 'university'
    """
    setup_logging()
    try:
        scenario = get_scenario(_resolve_set(set_id), level)
    except CONFIG_ERRORS as e:
        _fail(e)

    typer.echo(scenario.title)
    typer.echo(scenario.description)
    typer.echo(f"Hint: {scenario.hint}")
    typer.echo("Attributes:")
    for attr in scenario.initial_attributes:
        typer.echo(f"  {attr.id}  {attr.name} ({attr.type})")


@app.command()
def check(
    level: int,
    schema_json: Path,
    set_id: Optional[str] = SET_OPTION,
    seed: Optional[int] = typer.Option(None, help="Seed for the anomaly narrative"),
):
    """
    Validate a workspace JSON file against a level's solution.

    Args:
        level: Level number
        schema_json: Path to a WorkspaceState JSON file
        set_id: Problem set id
        seed: Optional seed for the anomaly narrative
    """
    setup_logging()
    try:
        scenario = get_scenario(_resolve_set(set_id), level)
        state = load_workspace(schema_json)
    except CONFIG_ERRORS as e:
        _fail(e)

    pick = random_anomaly_picker(seed) if seed is not None else None
    verdict = validate(state, scenario, pick)

    typer.echo(verdict.headline)
    typer.echo(verdict.detail)
    if not verdict.passed:
        raise typer.Exit(1)


@app.command(name="next")
def next_(level: int, set_id: Optional[str] = SET_OPTION):
    """Show which level follows the given one."""
    setup_logging()
    set_id = _resolve_set(set_id)
    try:
        advance = next_level(set_id, level)
        following = None if advance.set_complete else get_scenario(set_id, advance.next_level)
    except CONFIG_ERRORS as e:
        _fail(e)

    if following is None:
        typer.echo(advance.message)
    else:
        typer.echo(f"Next: {following.level}. {following.title}")


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
