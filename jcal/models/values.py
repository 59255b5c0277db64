"""Typed values written into the value slots of a jCal property."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping

from jcal.models.data_type import ICalDataType


class JsonValueKind(str, Enum):
    """Variant tag of a JsonValue."""

    NULL = "null"
    SCALAR = "scalar"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class JsonValue:
    """A node of a JSON value tree: null, scalar, array or object.

    Exactly one variant is populated, selected by ``kind``. Build instances
    with the factory classmethods rather than the constructor.
    """

    kind: JsonValueKind
    payload: Any = None

    @classmethod
    def null(cls) -> "JsonValue":
        return cls(JsonValueKind.NULL)

    @classmethod
    def scalar(cls, value: Any) -> "JsonValue":
        """Scalar node; None becomes a null node."""
        if value is None:
            return cls.null()
        return cls(JsonValueKind.SCALAR, value)

    @classmethod
    def of_array(cls, items: Iterable[Any]) -> "JsonValue":
        return cls(JsonValueKind.ARRAY, tuple(cls.wrap(item) for item in items))

    @classmethod
    def of_object(cls, mapping: Mapping[str, Any]) -> "JsonValue":
        # Pairs in insertion order, which is the order fields are written in
        return cls(
            JsonValueKind.OBJECT,
            tuple((str(key), cls.wrap(value)) for key, value in mapping.items()),
        )

    @classmethod
    def wrap(cls, obj: Any) -> "JsonValue":
        """Convert a plain Python value into a JsonValue tree."""
        if isinstance(obj, JsonValue):
            return obj
        if obj is None:
            return cls.null()
        if isinstance(obj, (list, tuple)):
            return cls.of_array(obj)
        if isinstance(obj, Mapping):
            return cls.of_object(obj)
        return cls.scalar(obj)

    @property
    def is_null(self) -> bool:
        return self.kind is JsonValueKind.NULL

    @property
    def value(self) -> Any:
        """Scalar value, or None if this is not a scalar node."""
        return self.payload if self.kind is JsonValueKind.SCALAR else None

    @property
    def array(self) -> list["JsonValue"] | None:
        """Child nodes, or None if this is not an array node."""
        return list(self.payload) if self.kind is JsonValueKind.ARRAY else None

    @property
    def object(self) -> dict[str, "JsonValue"] | None:
        """Child fields, or None if this is not an object node."""
        return dict(self.payload) if self.kind is JsonValueKind.OBJECT else None

    def to_python(self) -> Any:
        """Plain Python equivalent (None, scalar, list or dict)."""
        if self.kind is JsonValueKind.ARRAY:
            return [item.to_python() for item in self.payload]
        if self.kind is JsonValueKind.OBJECT:
            return {key: item.to_python() for key, item in self.payload}
        return self.payload


@dataclass
class JCalValue:
    """Data type and value(s) of one jCal property.

    Each entry of ``values`` is written as a sibling element after the
    data type, so a property with several values (e.g. CATEGORIES) becomes
    ``["categories", {}, "text", "a", "b"]``.
    """

    data_type: ICalDataType | None = None
    values: list[JsonValue] = field(default_factory=list)

    @classmethod
    def single(cls, value: Any, data_type: ICalDataType | None = None) -> "JCalValue":
        """A property with one value."""
        return cls(data_type, [JsonValue.wrap(value)])

    @classmethod
    def multi(cls, *values: Any, data_type: ICalDataType | None = None) -> "JCalValue":
        """A property with several sibling values."""
        return cls(data_type, [JsonValue.wrap(value) for value in values])

    @classmethod
    def structured(
        cls, *components: Any, data_type: ICalDataType | None = None
    ) -> "JCalValue":
        """A structured value, such as GEO or REQUEST-STATUS.

        Written as a single array. A component with one item is written as
        that item, a multi-item component as a nested array, and empty or
        None items as empty strings.
        """
        array = []
        for component in components:
            if not isinstance(component, (list, tuple)):
                component = [component]
            if not component:
                array.append(JsonValue.scalar(""))
                continue
            items = ["" if item is None else item for item in component]
            if len(items) == 1:
                array.append(JsonValue.wrap(items[0]))
            else:
                array.append(JsonValue.of_array(items))
        return cls(data_type, [JsonValue(JsonValueKind.ARRAY, tuple(array))])

    @classmethod
    def object(
        cls, mapping: Mapping[str, Any], data_type: ICalDataType | None = None
    ) -> "JCalValue":
        """An object value, such as RRULE.

        List values with exactly one item are written as that item.
        """
        fields = {}
        for key, value in mapping.items():
            if isinstance(value, (list, tuple)) and len(value) == 1:
                value = value[0]
            fields[key] = value
        return cls(data_type, [JsonValue.of_object(fields)])

    def to_python(self) -> list[Any]:
        return [value.to_python() for value in self.values]
