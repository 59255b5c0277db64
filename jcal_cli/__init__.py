"""CLI package for the jCal tools."""

import logging
import sys

from jcal.config import JCalConfig

# Packages whose DEBUG records reach the log file
JCAL_LOGGERS = ("jcal", "jcal_cli")


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: JCalConfig | None = None
) -> None:
    """Send jcal log records to the log file and to stderr.

    The file gets everything the jcal packages log, down to DEBUG. Other
    libraries only reach the handlers from WARNING up.

    Args:
        verbose: If True, show INFO records on the console
        quiet: If True, show only errors on the console
        config: Optional JCalConfig for log directory/filename settings
    """
    if config is None:
        config = JCalConfig.from_env()

    config.log_dir.mkdir(parents=True, exist_ok=True)
    log_path = config.log_dir / config.log_filename

    file_handler = logging.FileHandler(log_path)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    if quiet:
        console_handler.setLevel(logging.ERROR)
    elif verbose:
        console_handler.setLevel(logging.INFO)
    else:
        console_handler.setLevel(logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for name in JCAL_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG)

    logging.getLogger(__name__).debug(f"Logging to {log_path}")


def main() -> None:
    """Main entry point for the CLI."""
    from jcal_cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
