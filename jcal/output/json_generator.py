"""Low-level JSON token emitter used by the jCal writers."""

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from jcal.exceptions import WriterStateError


class _ContainerKind(Enum):
    ARRAY = "array"
    OBJECT = "object"


@dataclass
class _Container:
    kind: _ContainerKind
    count: int = 0
    awaiting_value: bool = False


class JsonGenerator:
    """Writes JSON tokens to a text sink as they are produced.

    Commas between sibling values and colons after field names are inserted
    automatically. Raw text (whitespace) can be written between tokens.
    The sink is never closed by the generator.
    """

    # Separates consecutive values at the root level
    ROOT_SEPARATOR = " "

    def __init__(self, sink: TextIO):
        self._sink = sink
        self._containers: list[_Container] = []
        self._root_values = 0

    @property
    def depth(self) -> int:
        """Number of open arrays and objects."""
        return len(self._containers)

    def _before_value(self) -> None:
        if not self._containers:
            if self._root_values:
                self._sink.write(self.ROOT_SEPARATOR)
            self._root_values += 1
            return

        container = self._containers[-1]
        if container.kind is _ContainerKind.OBJECT:
            if not container.awaiting_value:
                raise WriterStateError("Write a field name before an object value.")
            container.awaiting_value = False
            return

        if container.count:
            self._sink.write(",")
        container.count += 1

    def _pop(self, kind: _ContainerKind) -> None:
        if not self._containers or self._containers[-1].kind is not kind:
            raise WriterStateError(f"No open {kind.value} to close.")
        container = self._containers.pop()
        if container.awaiting_value:
            raise WriterStateError("Object field is missing its value.")

    def write_start_array(self) -> None:
        self._before_value()
        self._sink.write("[")
        self._containers.append(_Container(_ContainerKind.ARRAY))

    def write_end_array(self) -> None:
        self._pop(_ContainerKind.ARRAY)
        self._sink.write("]")

    def write_start_object(self) -> None:
        self._before_value()
        self._sink.write("{")
        self._containers.append(_Container(_ContainerKind.OBJECT))

    def write_end_object(self) -> None:
        self._pop(_ContainerKind.OBJECT)
        self._sink.write("}")

    def write_field_name(self, name: str) -> None:
        if not self._containers or self._containers[-1].kind is not _ContainerKind.OBJECT:
            raise WriterStateError("Field names can only be written inside an object.")
        container = self._containers[-1]
        if container.awaiting_value:
            raise WriterStateError("Previous field is missing its value.")
        if container.count:
            self._sink.write(",")
        container.count += 1
        container.awaiting_value = True
        self._sink.write(json.dumps(name, ensure_ascii=False))
        self._sink.write(":")

    def write_string(self, value: str) -> None:
        self._before_value()
        self._sink.write(json.dumps(value, ensure_ascii=False))

    def write_number(self, value: int | float) -> None:
        """Write a number; NaN and infinities are written as strings."""
        if isinstance(value, float) and not math.isfinite(value):
            # JSON has no literal for these
            self.write_string(json.dumps(value))
            return
        self._before_value()
        self._sink.write(json.dumps(value))

    def write_boolean(self, value: bool) -> None:
        self._before_value()
        self._sink.write("true" if value else "false")

    def write_null(self) -> None:
        self._before_value()
        self._sink.write("null")

    def write_raw(self, text: str) -> None:
        self._sink.write(text)

    def flush(self) -> None:
        flush = getattr(self._sink, "flush", None)
        if flush is not None:
            flush()
