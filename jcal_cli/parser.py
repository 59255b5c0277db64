"""CLI command registration."""

import typer

from jcal_cli.commands import convert_command, types_command

app = typer.Typer(
    help="Convert iCalendar data to jCal (RFC 7265).",
    no_args_is_help=True,
)


@app.callback()
def callback() -> None:
    """jCal command line tools."""


app.command("convert")(convert_command)
app.command("types")(types_command)
