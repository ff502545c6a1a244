"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from adapters.storage_factory import build_alias_storage
from core.config import AppSettings, write_user_env_vars
from core.errors import PathAliasError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_storage(settings: AppSettings) -> tuple[bool, str]:
    try:
        storage = build_alias_storage(settings)
        count = len(storage.list_aliases())
    except (PathAliasError, SQLAlchemyError, OSError) as exc:
        return False, str(exc)
    return True, f"{count} alias(es)"


@app.command()
def run() -> None:
    """Show the effective configuration and check the alias storage."""

    settings = AppSettings()

    table = Table(title="path-alias-rules Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Storage backend", "OK", settings.storage_backend)
    if settings.storage_backend == "json":
        table.add_row("Storage path", "OK", str(settings.storage_path))
    elif settings.storage_backend == "sql":
        table.add_row("Database URL", "OK", settings.database_url)
    else:
        table.add_row("Persistence", "WARN", "memory backend forgets aliases on exit")
    table.add_row("Logging", "OK", f"{settings.log_level} ({settings.log_format})")

    ok_storage, detail_storage = _check_storage(settings)
    table.add_row("Storage access", "OK" if ok_storage else "FAIL", detail_storage)

    _console.print(table)

    if not ok_storage:
        raise typer.Exit(code=1)


@app.command(name="setup-storage")
def setup_storage() -> None:
    """Interactive storage setup (stores config in the user config .env)."""

    backend = typer.prompt(
        "Storage backend (json/sql/memory)",
        default="json",
        show_default=True,
    ).strip().lower()

    values: dict[str, str | None] = {"PATH_ALIAS_RULES_STORAGE_BACKEND": backend}
    if backend == "json":
        path = typer.prompt("Alias file", default="data/aliases.json", show_default=True).strip()
        values["PATH_ALIAS_RULES_STORAGE_PATH"] = path
    elif backend == "sql":
        url = typer.prompt("Database URL", default="sqlite:///data/aliases.db", show_default=True).strip()
        values["PATH_ALIAS_RULES_DATABASE_URL"] = url
    elif backend != "memory":
        raise typer.BadParameter("backend must be one of: json, sql, memory")

    env_path = write_user_env_vars(values)

    _console.print(f"[green]Saved storage config to:[/green] {env_path}")
