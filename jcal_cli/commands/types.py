"""List the known jCal data types."""

from jcal_cli.display.renderers import render_data_types


def types_command() -> None:
    """
    List the data types that can appear in a jCal property.
    """
    render_data_types()
