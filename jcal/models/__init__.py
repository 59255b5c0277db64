"""iCalendar data model: data types, parameters, values and properties."""

from jcal.models.data_type import ICalDataType
from jcal.models.parameters import ICalParameters
from jcal.models.properties import Categories, ICalProperty, Status, TextProperty
from jcal.models.values import JCalValue, JsonValue, JsonValueKind
from jcal.models.version import ICalVersion

__all__ = [
    "Categories",
    "ICalDataType",
    "ICalParameters",
    "ICalProperty",
    "ICalVersion",
    "JCalValue",
    "JsonValue",
    "JsonValueKind",
    "Status",
    "TextProperty",
]
