"""Conversion of icalendar property values into jCal values."""

from datetime import date, datetime, time, timedelta
from typing import Any

from icalendar.prop import (
    vBinary,
    vBoolean,
    vCalAddress,
    vCategory,
    vDDDLists,
    vDDDTypes,
    vDuration,
    vFloat,
    vGeo,
    vInt,
    vPeriod,
    vRecur,
    vText,
    vUri,
    vUTCOffset,
)

from jcal.exceptions import ConversionError
from jcal.models.data_type import ICalDataType
from jcal.models.values import JCalValue


def _ical_text(value: Any) -> str:
    text = value.to_ical()
    return text.decode("utf-8") if isinstance(text, bytes) else text


def _is_utc(value: datetime | time, has_tzid: bool) -> bool:
    if has_tzid or value.tzinfo is None:
        return False
    return value.utcoffset() == timedelta(0)


def format_date(value: date) -> str:
    """jCal date, e.g. 2025-01-31."""
    return value.strftime("%Y-%m-%d")


def format_datetime(value: datetime, has_tzid: bool = False) -> str:
    """jCal date-time, e.g. 2025-01-31T09:00:00 (with Z when in UTC)."""
    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    return text + "Z" if _is_utc(value, has_tzid) else text


def format_time(value: time, has_tzid: bool = False) -> str:
    """jCal time, e.g. 09:00:00."""
    text = value.strftime("%H:%M:%S")
    return text + "Z" if _is_utc(value, has_tzid) else text


def format_duration(value: timedelta) -> str:
    """Duration in ISO 8601 form, e.g. PT1H30M."""
    return _ical_text(vDuration(value))


def format_utc_offset(value: timedelta) -> str:
    """jCal UTC offset, e.g. -05:00."""
    text = _ical_text(vUTCOffset(value))
    # +HHMM[SS] -> +HH:MM[:SS]
    parts = [text[1:3], text[3:5]]
    if len(text) > 5:
        parts.append(text[5:7])
    return text[0] + ":".join(parts)


def _date_value(value: Any, has_tzid: bool) -> tuple[ICalDataType, Any]:
    if isinstance(value, datetime):
        return ICalDataType.DATE_TIME, format_datetime(value, has_tzid)
    if isinstance(value, date):
        return ICalDataType.DATE, format_date(value)
    if isinstance(value, time):
        return ICalDataType.TIME, format_time(value, has_tzid)
    if isinstance(value, timedelta):
        return ICalDataType.DURATION, format_duration(value)
    if isinstance(value, tuple) and len(value) == 2:
        start, end = value
        _, start_text = _date_value(start, has_tzid)
        _, end_text = _date_value(end, has_tzid)
        return ICalDataType.PERIOD, [start_text, end_text]
    raise ConversionError(f"Unsupported date/time value: {value!r}")


def _recur_part(value: Any) -> Any:
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, date):
        return format_date(value)
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return int(value)
    return str(value)


def _has_tzid(value: Any) -> bool:
    params = getattr(value, "params", None)
    return bool(params) and "TZID" in params


def to_jcal_value(value: Any) -> JCalValue:
    """Convert one icalendar property value into a JCalValue.

    Raises:
        ConversionError: If a date/time value has an unexpected shape
    """
    has_tzid = _has_tzid(value)

    if isinstance(value, vDDDTypes):
        data_type, converted = _date_value(value.dt, has_tzid)
        return JCalValue.single(converted, data_type)

    if isinstance(value, vDDDLists):
        converted = [_date_value(item.dt, has_tzid) for item in value.dts]
        if not converted:
            return JCalValue(ICalDataType.DATE_TIME, [])
        return JCalValue.multi(
            *(text for _, text in converted), data_type=converted[0][0]
        )

    if isinstance(value, vPeriod):
        end = value.duration if value.by_duration else value.end
        _, converted = _date_value((value.start, end), has_tzid)
        return JCalValue.single(converted, ICalDataType.PERIOD)

    if isinstance(value, vCategory):
        return JCalValue.multi(*(str(cat) for cat in value.cats), data_type=ICalDataType.TEXT)

    if isinstance(value, vGeo):
        return JCalValue.structured(
            float(value.latitude), float(value.longitude), data_type=ICalDataType.FLOAT
        )

    if isinstance(value, vRecur):
        parts = {}
        for key, items in value.items():
            if not isinstance(items, (list, tuple)):
                items = [items]
            parts[key.lower()] = [_recur_part(item) for item in items]
        return JCalValue.object(parts, ICalDataType.RECUR)

    if isinstance(value, vUTCOffset):
        return JCalValue.single(format_utc_offset(value.td), ICalDataType.UTC_OFFSET)

    if isinstance(value, vDuration):
        return JCalValue.single(format_duration(value.td), ICalDataType.DURATION)

    if isinstance(value, vBoolean):
        return JCalValue.single(bool(value), ICalDataType.BOOLEAN)

    if isinstance(value, vInt):
        return JCalValue.single(int(value), ICalDataType.INTEGER)

    if isinstance(value, vFloat):
        return JCalValue.single(float(value), ICalDataType.FLOAT)

    if isinstance(value, vCalAddress):
        return JCalValue.single(str(value), ICalDataType.CAL_ADDRESS)

    if isinstance(value, vUri):
        return JCalValue.single(str(value), ICalDataType.URI)

    if isinstance(value, vBinary):
        return JCalValue.single(_ical_text(value), ICalDataType.BINARY)

    if isinstance(value, (vText, str)):
        return JCalValue.single(str(value), ICalDataType.TEXT)

    if isinstance(value, (datetime, date, time, timedelta)):
        data_type, converted = _date_value(value, has_tzid)
        return JCalValue.single(converted, data_type)

    if hasattr(value, "to_ical"):
        return JCalValue.single(_ical_text(value))

    return JCalValue.single(str(value))
