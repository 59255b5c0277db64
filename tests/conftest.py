import io
import logging

import pytest


SAMPLE_ICS = (
    "BEGIN:VCALENDAR\r\n"
    "VERSION:2.0\r\n"
    "PRODID:-//Test//EN\r\n"
    "BEGIN:VEVENT\r\n"
    "UID:1@example.com\r\n"
    "SUMMARY:Team meeting\r\n"
    "DTSTART:20250101T090000Z\r\n"
    "DTEND;VALUE=DATE:20250102\r\n"
    "GEO:37.386013;-122.082932\r\n"
    "RRULE:FREQ=WEEKLY;COUNT=3\r\n"
    "END:VEVENT\r\n"
    "END:VCALENDAR\r\n"
)


class RecordingSink(io.StringIO):
    """StringIO that remembers its contents and how often it was closed."""

    def __init__(self):
        super().__init__()
        self.close_count = 0
        self.final_value = None

    def close(self):
        self.close_count += 1
        if not self.closed:
            self.final_value = self.getvalue()
        super().close()


@pytest.fixture
def sink():
    """In-memory text sink for writers."""
    return RecordingSink()


@pytest.fixture
def sample_ics():
    """ICS text with one calendar containing one event."""
    return SAMPLE_ICS


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    for name in ("jcal", "jcal_cli"):
        logging.getLogger(name).setLevel(logging.NOTSET)


CONFIG_ENV_VARS = (
    "JCAL_PRETTY_PRINT",
    "JCAL_WRAP_IN_ARRAY",
    "JCAL_VERSION",
    "LOG_DIR",
    "LOG_FILENAME",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in tmp_path with no config variables set.

    Variables are registered with monkeypatch first so values loaded from a
    .env file during the test are removed afterwards.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
