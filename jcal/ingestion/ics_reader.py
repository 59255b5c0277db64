"""ICS file reader for calendar files."""

import logging
from pathlib import Path

from icalendar import Calendar

from jcal.exceptions import IngestionError

logger = logging.getLogger(__name__)


class ICSReader:
    """Reader for ICS calendar files."""

    def read(self, path: Path) -> list[Calendar]:
        """Read all VCALENDAR objects from an ICS file.

        Missing, empty and whitespace-only files yield no calendars.

        Raises:
            IngestionError: If the file cannot be read or parsed
        """
        logger.info(f"Reading ICS file: {path}")
        try:
            if not path.exists():
                logger.warning(f"ICS file does not exist: {path}")
                return []

            if path.stat().st_size == 0:
                logger.warning(f"ICS file is empty: {path}")
                return []

            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
            if not content.strip():
                logger.warning(f"ICS file contains only whitespace: {path}")
                return []

            return self.read_string(content)
        except IngestionError:
            raise
        except Exception as e:
            raise IngestionError(f"Failed to read ICS file: {e}") from e

    def read_string(self, content: str) -> list[Calendar]:
        """Parse all VCALENDAR objects from ICS text."""
        try:
            calendars = Calendar.from_ical(content, multiple=True)
        except Exception as e:
            raise IngestionError(f"Failed to parse ICS data: {e}") from e

        logger.info(f"Parsed {len(calendars)} calendar(s)")
        return list(calendars)
