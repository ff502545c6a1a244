"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables are reused by several commands.
"""

from __future__ import annotations

from typing import Iterable

from rich.table import Table

from core.domain.models import ActionDefinition, AliasRecord


def build_actions_table(definitions: Iterable[ActionDefinition]) -> Table:
    """One row per action parameter, grouped by action."""

    table = Table(title="Rule actions")
    table.add_column("Action", style="cyan", no_wrap=True)
    table.add_column("Label", style="white")
    table.add_column("Parameter", style="magenta", no_wrap=True)
    table.add_column("Type", style="green")
    table.add_column("Required", style="yellow")

    for definition in definitions:
        first = True
        for name, context in definition.context.items():
            table.add_row(
                definition.id if first else "",
                definition.label if first else "",
                name,
                context.data_type,
                "yes" if context.required else "no",
            )
            first = False
        if first:
            table.add_row(definition.id, definition.label, "-", "-", "-")
    return table


def build_aliases_table(records: Iterable[AliasRecord]) -> Table:
    table = Table(title="Path aliases")
    table.add_column("pid", style="dim", justify="right")
    table.add_column("Source", style="cyan")
    table.add_column("Alias", style="magenta")
    table.add_column("Language", style="green", no_wrap=True)
    for record in records:
        table.add_row(str(record.pid), record.source, record.alias, record.langcode)
    return table
