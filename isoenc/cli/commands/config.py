"""
isoenc CLI Configuration Commands

Configuration display and validation commands.
"""

import click
from rich.console import Console
from rich.table import Table

from ...utils.config import IsoEncConfig

SECTIONS = ["encoding", "output", "logging"]


def _format_value(value) -> str:
    if value is None:
        return "-"
    return str(getattr(value, "value", value))


def show_config(config: IsoEncConfig, section: str = None, quiet: bool = False):
    """Display current configuration."""
    if section and section not in SECTIONS:
        raise ValueError(f"Section '{section}' not found. Available sections: {', '.join(SECTIONS)}")

    sections = [section] if section else SECTIONS

    if quiet:
        for name in sections:
            for key, value in getattr(config, name).model_dump().items():
                click.echo(f"{name}.{key}={_format_value(value)}")
        return

    console = Console()
    for name in sections:
        table = Table(title=f"{name.title()} Configuration")
        table.add_column("Setting", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        for key, value in getattr(config, name).model_dump().items():
            table.add_row(key, _format_value(value))

        console.print(table)


def validate_config(config: IsoEncConfig, quiet: bool = False) -> bool:
    """Re-validate the loaded configuration and report the outcome."""
    try:
        IsoEncConfig.model_validate(config.model_dump())
    except ValueError as e:
        click.echo(f"Configuration is invalid: {e}", err=True)
        return False

    if not quiet:
        click.echo("Configuration is valid")
    return True
