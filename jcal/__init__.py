"""iCalendar data model and jCal (RFC 7265) streaming writer."""

from jcal.exceptions import (
    ConversionError,
    IngestionError,
    JCalError,
    UnsupportedFormatError,
    WriterStateError,
)
from jcal.models import (
    Categories,
    ICalDataType,
    ICalParameters,
    ICalProperty,
    ICalVersion,
    JCalValue,
    JsonValue,
    Status,
    TextProperty,
)
from jcal.output import JCalRawWriter, JCalWriter

__version__ = "0.1.0"

__all__ = [
    "Categories",
    "ConversionError",
    "ICalDataType",
    "ICalParameters",
    "ICalProperty",
    "ICalVersion",
    "IngestionError",
    "JCalError",
    "JCalRawWriter",
    "JCalValue",
    "JCalWriter",
    "JsonValue",
    "Status",
    "TextProperty",
    "UnsupportedFormatError",
    "WriterStateError",
]
