"""Convert ICS files to jCal."""

import logging
import sys
from pathlib import Path

import typer
from typing_extensions import Annotated

from jcal.config import JCalConfig
from jcal.exceptions import JCalError, UnsupportedFormatError
from jcal.ingestion.ics_reader import ICSReader
from jcal.output.jcal_writer import JCalWriter
from jcal_cli import setup_logging
from jcal_cli.display.renderers import render_conversion_summary

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".ics", ".ical", ".ifb"}


def convert_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to the input ICS file"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (default: stdout)"),
    ] = None,
    pretty: Annotated[
        bool,
        typer.Option("--pretty", "-p", help="Pretty-print the JSON"),
    ] = False,
    no_wrap: Annotated[
        bool,
        typer.Option(
            "--no-wrap", help="Do not wrap the calendars in an outer JSON array"
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show informational log messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """
    Convert an ICS file to jCal (RFC 7265).

    Every VCALENDAR in the input is written. By default the calendars are
    wrapped in a JSON array; JCAL_PRETTY_PRINT and JCAL_WRAP_IN_ARRAY set
    the defaults.
    """
    config = JCalConfig.from_env()
    setup_logging(verbose=verbose, quiet=quiet, config=config)

    pretty = pretty or config.pretty_print
    wrap = config.wrap_in_array and not no_wrap

    try:
        if input_file.suffix.lower() not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFormatError(
                f"Unsupported file format: {input_file.suffix or '(none)'}. "
                f"Supported formats: {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
            )
        if not input_file.exists():
            logger.error(f"Input file {input_file} does not exist")
            sys.exit(1)

        calendars = ICSReader().read(input_file)
        components = sum(len(list(calendar.walk())) for calendar in calendars)

        if output is None:
            writer = JCalWriter(
                sys.stdout, wrap_in_array=wrap, pretty_print=pretty, version=config.version
            )
            for calendar in calendars:
                writer.write(calendar)
            # stdout stays open
            writer.close_json_stream()
            sys.stdout.write("\n")
        else:
            sink = open(output, "w", encoding="utf-8")
            with JCalWriter(
                sink, wrap_in_array=wrap, pretty_print=pretty, version=config.version
            ) as writer:
                for calendar in calendars:
                    writer.write(calendar)

        logger.info(f"Converted {len(calendars)} calendar(s) from {input_file}")
    except JCalError as e:
        logger.error(f"Conversion failed: {e}")
        sys.exit(1)

    if not quiet:
        render_conversion_summary(input_file, output, len(calendars), components)

