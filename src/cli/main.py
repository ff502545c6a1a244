"""Command line host for the path alias actions.

Acts as a minimal rule engine: builds the configured alias storage, looks an
action up by id, feeds it context values and executes it.
"""

from __future__ import annotations

import json
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.storage_factory import build_alias_storage
from cli import doctor
from cli.ui_components import build_actions_table, build_aliases_table
from core.actions.path_alias_create import ALIAS_STORAGE_SERVICE, PathAliasCreate
from core.actions.path_alias_delete import PathAliasDelete
from core.actions.registry import create_action, get_action_class, get_action_definitions
from core.config import AppSettings
from core.domain.language import LANGCODE_NOT_SPECIFIED, LanguageTag
from core.errors import InvalidContextValueError, PathAliasError
from core.logging_setup import setup_logging

app = typer.Typer(no_args_is_help=True, help="Create and delete URL path aliases through rule actions.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _fail(exc: Exception) -> typer.Exit:
    _err_console.print(f"[red]Error:[/red] {exc}")
    return typer.Exit(code=1)


def language_tag(name: str, value: str) -> LanguageTag:
    try:
        return LanguageTag(id=value)
    except ValidationError as exc:
        reason = "; ".join(err["msg"] for err in exc.errors())
        raise InvalidContextValueError(name, value, reason) from exc


def parse_assignments(action_id: str, assignments: list[str]) -> dict[str, Any]:
    """Turn `KEY=VALUE` pairs into typed context values for `action_id`."""

    definitions = get_action_class(action_id).definition.context
    values: dict[str, Any] = {}
    for item in assignments:
        if "=" not in item:
            raise typer.BadParameter(f"expected KEY=VALUE, got '{item}'")
        name, value = item.split("=", 1)
        definition = definitions.get(name)
        if definition is not None and definition.data_type == "language":
            values[name] = language_tag(name, value)
        else:
            values[name] = value
    return values


@app.callback()
def main() -> None:
    setup_logging(AppSettings())


@app.command()
def actions(
    as_json: bool = typer.Option(False, "--json", help="Dump the definitions as JSON."),
) -> None:
    """List the available rule actions and their parameters."""

    definitions = get_action_definitions()
    if as_json:
        payload = [d.model_dump(mode="json") for d in definitions]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    _console.print(build_actions_table(definitions))


@app.command()
def execute(
    action_id: str = typer.Argument(..., help="Action id, e.g. rules_path_alias_create."),
    assignments: list[str] = typer.Argument(None, help="Context values as KEY=VALUE."),
) -> None:
    """Run any registered action with the given context values."""

    try:
        values = parse_assignments(action_id, assignments or [])
        action = create_action(action_id, build_alias_storage())
        action.execute_with(**values)
    except PathAliasError as exc:
        raise _fail(exc) from exc
    _console.print(f"[green]Executed:[/green] {action.summary()}")


@app.command()
def create(
    source: str = typer.Argument(..., help="Existing system path, e.g. node/28."),
    alias: str = typer.Argument(..., help="Alias, e.g. about."),
    language: str | None = typer.Option(None, "--language", "-l", help="Language code."),
) -> None:
    """Create a path alias (shortcut for rules_path_alias_create)."""

    try:
        action = PathAliasCreate.create({ALIAS_STORAGE_SERVICE: build_alias_storage()})
        action.execute_with(
            source=source,
            alias=alias,
            language=language_tag("language", language) if language is not None else None,
        )
    except PathAliasError as exc:
        raise _fail(exc) from exc
    _console.print(f"[green]Alias saved:[/green] {source} -> {alias}")


@app.command()
def delete(
    path: str = typer.Argument(..., help="Existing system path whose aliases are removed."),
) -> None:
    """Delete every alias of a path, in all languages."""

    try:
        action = PathAliasDelete.create({ALIAS_STORAGE_SERVICE: build_alias_storage()})
        action.execute_with(path=path)
    except PathAliasError as exc:
        raise _fail(exc) from exc
    _console.print(f"[green]Aliases deleted for:[/green] {path}")


@app.command(name="list")
def list_aliases() -> None:
    """Show every stored alias."""

    try:
        records = build_alias_storage().list_aliases()
    except PathAliasError as exc:
        raise _fail(exc) from exc
    _console.print(build_aliases_table(records))


@app.command()
def lookup(
    path: str = typer.Argument(..., help="Existing system path."),
    language: str = typer.Option(LANGCODE_NOT_SPECIFIED, "--language", "-l", help="Language code."),
) -> None:
    """Print the alias a path resolves to."""

    try:
        alias = build_alias_storage().lookup_path_alias(path, language)
    except PathAliasError as exc:
        raise _fail(exc) from exc
    if alias is None:
        _err_console.print(f"[yellow]No alias for[/yellow] {path}")
        raise typer.Exit(code=1)
    typer.echo(alias)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
