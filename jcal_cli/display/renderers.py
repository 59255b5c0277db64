"""Renderers for conversion results and data type listings."""

from pathlib import Path

from rich.table import Table

from jcal.models.data_type import ICalDataType
from jcal_cli.display.console import console, err_console


def render_conversion_summary(
    input_path: Path, output_path: Path | None, calendars: int, components: int
) -> None:
    """Print a one-line summary of a conversion on stderr."""
    destination = str(output_path.resolve()) if output_path else "stdout"
    err_console.print(
        f"[bold green]✓[/bold green] Converted {calendars} calendar(s) "
        f"({components} component(s)) from {input_path.name} to {destination}"
    )


def render_data_types() -> None:
    """Render the known jCal data types as a table."""
    table = Table(title="jCal data types")
    table.add_column("Name", style="cyan")
    table.add_column("Attribute")

    for data_type in ICalDataType.all():
        table.add_row(str(data_type), data_type.name.upper().replace("-", "_"))

    console.print(table)
