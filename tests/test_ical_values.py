"""Tests for icalendar value conversion."""

from datetime import date, datetime, timedelta, timezone

import pytest
from icalendar.prop import (
    vBoolean,
    vCalAddress,
    vCategory,
    vDDDTypes,
    vFloat,
    vGeo,
    vInt,
    vText,
    vUri,
    vUTCOffset,
)

from jcal.exceptions import ConversionError
from jcal.models.data_type import ICalDataType
from jcal.output.ical_values import (
    _date_value,
    format_datetime,
    format_utc_offset,
    to_jcal_value,
)


@pytest.mark.parametrize(
    "value,data_type,expected",
    [
        (vText("Team meeting"), ICalDataType.TEXT, ["Team meeting"]),
        (vInt(5), ICalDataType.INTEGER, [5]),
        (vFloat(1.5), ICalDataType.FLOAT, [1.5]),
        (vBoolean(True), ICalDataType.BOOLEAN, [True]),
        (vCalAddress("mailto:a@example.com"), ICalDataType.CAL_ADDRESS, ["mailto:a@example.com"]),
        (vUri("https://example.com"), ICalDataType.URI, ["https://example.com"]),
        (vDDDTypes(date(2025, 1, 31)), ICalDataType.DATE, ["2025-01-31"]),
        (vDDDTypes(datetime(2025, 1, 31, 9, 30)), ICalDataType.DATE_TIME, ["2025-01-31T09:30:00"]),
        (vDDDTypes(timedelta(hours=1, minutes=30)), ICalDataType.DURATION, ["PT1H30M"]),
        (vCategory(["WORK", "MEETING"]), ICalDataType.TEXT, ["WORK", "MEETING"]),
        (vGeo((1.5, -2.25)), ICalDataType.FLOAT, [[1.5, -2.25]]),
        (vUTCOffset(timedelta(hours=-5)), ICalDataType.UTC_OFFSET, ["-05:00"]),
    ],
)
def test_to_jcal_value(value, data_type, expected):
    """Test conversion of each icalendar value type."""
    jcal_value = to_jcal_value(value)
    assert jcal_value.data_type == data_type
    assert jcal_value.to_python() == expected


def test_plain_string_is_text():
    """Test that plain strings are treated as text."""
    assert to_jcal_value("hello").data_type == ICalDataType.TEXT


def test_utc_datetime():
    """Test that UTC date-times end in Z."""
    value = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)
    assert format_datetime(value) == "2025-01-01T09:00:00Z"
    # a TZID parameter means local time in that zone
    assert format_datetime(value, has_tzid=True) == "2025-01-01T09:00:00"


def test_utc_offset_with_seconds():
    """Test offsets that include seconds."""
    assert format_utc_offset(timedelta(hours=5, minutes=30, seconds=15)) == "+05:30:15"


def test_period():
    """Test period tuples."""
    data_type, value = _date_value(
        (datetime(2025, 1, 1, 9, 0), timedelta(hours=2)), has_tzid=False
    )
    assert data_type == ICalDataType.PERIOD
    assert value == ["2025-01-01T09:00:00", "PT2H"]


def test_unsupported_date_value():
    """Test that odd date/time shapes are rejected."""
    with pytest.raises(ConversionError):
        _date_value("not a date", has_tzid=False)
