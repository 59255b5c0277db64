"""Value data types used in the jCal data-type slot."""

from typing import ClassVar


class ICalDataType:
    """An iCalendar value data type, such as "text" or "date-time".

    The known RFC 5545 types are exposed as class attributes. Unknown names
    (e.g. experimental "x-" types) are accepted through ``get`` so producers
    can pass them through unchanged. Names compare case-insensitively.
    """

    _registry: ClassVar[dict[str, "ICalDataType"]] = {}

    BINARY: ClassVar["ICalDataType"]
    BOOLEAN: ClassVar["ICalDataType"]
    CAL_ADDRESS: ClassVar["ICalDataType"]
    DATE: ClassVar["ICalDataType"]
    DATE_TIME: ClassVar["ICalDataType"]
    DURATION: ClassVar["ICalDataType"]
    FLOAT: ClassVar["ICalDataType"]
    INTEGER: ClassVar["ICalDataType"]
    PERIOD: ClassVar["ICalDataType"]
    RECUR: ClassVar["ICalDataType"]
    TEXT: ClassVar["ICalDataType"]
    TIME: ClassVar["ICalDataType"]
    URI: ClassVar["ICalDataType"]
    UTC_OFFSET: ClassVar["ICalDataType"]

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        """Data type name as given."""
        return self._name

    @classmethod
    def _register(cls, name: str) -> "ICalDataType":
        data_type = cls(name)
        cls._registry[name.lower()] = data_type
        return data_type

    @classmethod
    def find(cls, name: str) -> "ICalDataType | None":
        """Return the known data type with this name, or None."""
        return cls._registry.get(name.lower())

    @classmethod
    def get(cls, name: str) -> "ICalDataType":
        """Return the known data type with this name, or a new one."""
        known = cls.find(name)
        if known is not None:
            return known
        return cls(name)

    @classmethod
    def all(cls) -> list["ICalDataType"]:
        """All known data types."""
        return list(cls._registry.values())

    def __str__(self) -> str:
        return self._name.lower()

    def __repr__(self) -> str:
        return f"ICalDataType({self._name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ICalDataType):
            return NotImplemented
        return self._name.lower() == other._name.lower()

    def __hash__(self) -> int:
        return hash(self._name.lower())


ICalDataType.BINARY = ICalDataType._register("binary")
ICalDataType.BOOLEAN = ICalDataType._register("boolean")
ICalDataType.CAL_ADDRESS = ICalDataType._register("cal-address")
ICalDataType.DATE = ICalDataType._register("date")
ICalDataType.DATE_TIME = ICalDataType._register("date-time")
ICalDataType.DURATION = ICalDataType._register("duration")
ICalDataType.FLOAT = ICalDataType._register("float")
ICalDataType.INTEGER = ICalDataType._register("integer")
ICalDataType.PERIOD = ICalDataType._register("period")
ICalDataType.RECUR = ICalDataType._register("recur")
ICalDataType.TEXT = ICalDataType._register("text")
ICalDataType.TIME = ICalDataType._register("time")
ICalDataType.URI = ICalDataType._register("uri")
ICalDataType.UTC_OFFSET = ICalDataType._register("utc-offset")
