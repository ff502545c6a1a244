"""Command line host (typer + rich)."""
