"""Property parameter collection."""

from typing import Iterable, Iterator

from jcal.models.data_type import ICalDataType


class ICalParameters:
    """Ordered multimap of property parameters.

    Parameter names are case-insensitive and are stored and enumerated in
    lowercase. Each name maps to an ordered list of string values; iteration
    yields ``(name, values)`` pairs in insertion order.

    Usage:
        params = ICalParameters()
        params.put("LANGUAGE", "en")
        params.put("member", "a@example.com")
        params.put("member", "b@example.com")
    """

    LANGUAGE = "language"
    VALUE = "value"

    def __init__(self, initial: dict[str, str | Iterable[str]] | None = None):
        self._params: dict[str, list[str]] = {}
        if initial:
            for name, values in initial.items():
                if isinstance(values, str):
                    self.put(name, values)
                else:
                    self._params.setdefault(self._key(name), [])
                    for value in values:
                        self.put(name, value)

    @staticmethod
    def _key(name: str) -> str:
        return name.lower()

    def put(self, name: str, value: str) -> None:
        """Append a value to a parameter."""
        self._params.setdefault(self._key(name), []).append(value)

    def replace(self, name: str, value: str | None) -> list[str]:
        """Replace all values of a parameter, returning the old values.

        Passing None removes the parameter.
        """
        old = self.remove(name)
        if value is not None:
            self.put(name, value)
        return old

    def get_all(self, name: str) -> list[str]:
        """All values of a parameter (empty list if absent)."""
        return list(self._params.get(self._key(name), []))

    def first(self, name: str) -> str | None:
        """First value of a parameter, or None."""
        values = self._params.get(self._key(name))
        return values[0] if values else None

    def remove(self, name: str) -> list[str]:
        """Remove a parameter, returning its values."""
        return self._params.pop(self._key(name), [])

    def clear(self) -> None:
        self._params.clear()

    def items(self) -> list[tuple[str, list[str]]]:
        return [(name, list(values)) for name, values in self._params.items()]

    @property
    def language(self) -> str | None:
        """LANGUAGE parameter."""
        return self.first(self.LANGUAGE)

    @language.setter
    def language(self, language: str | None) -> None:
        self.replace(self.LANGUAGE, language)

    @property
    def value(self) -> ICalDataType | None:
        """VALUE parameter (the property's data type)."""
        value = self.first(self.VALUE)
        return None if value is None else ICalDataType.get(value)

    @value.setter
    def value(self, data_type: ICalDataType | None) -> None:
        self.replace(self.VALUE, None if data_type is None else str(data_type))

    def copy(self) -> "ICalParameters":
        copied = ICalParameters()
        for name, values in self._params.items():
            copied._params[name] = list(values)
        return copied

    def __iter__(self) -> Iterator[tuple[str, list[str]]]:
        return iter(self.items())

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._params

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ICalParameters):
            return NotImplemented
        return self._params == other._params

    def __repr__(self) -> str:
        return f"ICalParameters({self._params!r})"
