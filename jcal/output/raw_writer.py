"""Streaming writer for iCalendar JSON data (jCal, RFC 7265)."""

import logging
from dataclasses import dataclass
from typing import TextIO

from jcal.exceptions import WriterStateError
from jcal.models.parameters import ICalParameters
from jcal.models.values import JCalValue, JsonValue, JsonValueKind
from jcal.output.json_generator import JsonGenerator

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """Bookkeeping for one open component.

    A component is written as ``[name, [properties...], [subcomponents...]]``.
    The properties array is only closed, and the sub-components array only
    opened, once we know there is a sub-component (or the component ends).
    """

    props_closed: bool = False
    subcomponents_opened: bool = False


class JCalRawWriter:
    """Writes components and properties to a jCal data stream.

    Calls must be nested: start a component, write its properties, write
    any sub-components, then end it. Output is produced incrementally.

    Usage:
        with JCalRawWriter(sink) as writer:
            writer.write_start_component("vcalendar")
            writer.write_property("version", JCalValue.single("2.0", ICalDataType.TEXT))
            writer.write_end_component()
    """

    NEWLINE = "\n"
    INDENT = "  "

    def __init__(self, sink: TextIO, wrap_in_array: bool = False):
        """Create a raw writer.

        Args:
            sink: Text stream the JSON is written to
            wrap_in_array: If True, wrap everything in an outer array (useful
                when writing more than one iCalendar object)
        """
        self._sink = sink
        self._wrap_in_array = wrap_in_array
        self._stack: list[_Frame] = []
        self._generator: JsonGenerator | None = None
        self._pretty_print = False
        self._component_ended = False
        self._stream_closed = False
        self._closed = False

    @property
    def wrap_in_array(self) -> bool:
        return self._wrap_in_array

    @property
    def pretty_print(self) -> bool:
        """Whether the JSON is pretty-printed (defaults to False)."""
        return self._pretty_print

    @pretty_print.setter
    def pretty_print(self, pretty_print: bool) -> None:
        self._pretty_print = pretty_print

    def set_pretty_print(self, pretty_print: bool) -> None:
        self._pretty_print = pretty_print

    @property
    def depth(self) -> int:
        """Number of open components."""
        return len(self._stack)

    def _init(self) -> JsonGenerator:
        generator = JsonGenerator(self._sink)
        if self._wrap_in_array:
            generator.write_start_array()
            generator.write_raw(self._indent(0))
        self._generator = generator
        return generator

    def _indent(self, depth: int) -> str:
        if not self._pretty_print:
            return ""
        return self.NEWLINE + self.INDENT * depth

    def write_start_component(self, component_name: str) -> None:
        """Write the beginning of a new component array.

        Args:
            component_name: Component name (e.g. "vevent")

        Raises:
            WriterStateError: If the JSON stream has already been closed
        """
        if self._stream_closed:
            raise WriterStateError("Cannot write to a closed JSON stream.")
        generator = self._generator or self._init()

        self._component_ended = False

        if self._stack:
            parent = self._stack[-1]
            if not parent.props_closed:
                generator.write_end_array()
                parent.props_closed = True
            if not parent.subcomponents_opened:
                generator.write_start_array()
                parent.subcomponents_opened = True

        generator.write_start_array()
        generator.write_raw(self._indent(len(self._stack)))
        generator.write_string(component_name)
        generator.write_start_array()  # properties

        self._stack.append(_Frame())
        logger.debug(f"Started component {component_name} at depth {len(self._stack)}")

    def write_end_component(self) -> None:
        """Close the current component array.

        Raises:
            WriterStateError: If no component is open
        """
        if not self._stack:
            raise WriterStateError('Call "write_start_component" first.')
        generator = self._generator
        frame = self._stack.pop()

        if not frame.props_closed:
            generator.write_end_array()
        if not frame.subcomponents_opened:
            generator.write_start_array()

        generator.write_end_array()  # sub-components
        generator.write_end_array()  # component

        self._component_ended = True
        logger.debug(f"Ended component at depth {len(self._stack) + 1}")

    def write_property(
        self,
        property_name: str,
        value: JCalValue,
        parameters: ICalParameters | None = None,
    ) -> None:
        """Write a property to the current component.

        Args:
            property_name: Property name (e.g. "version")
            value: Data type and value(s) of the property
            parameters: Property parameters; empty parameters are skipped

        Raises:
            WriterStateError: If no component is open, or if the last call
                was write_end_component
        """
        if not self._stack:
            raise WriterStateError('Call "write_start_component" first.')
        if self._component_ended:
            raise WriterStateError(
                'Cannot write a property after calling "write_end_component".'
            )
        generator = self._generator

        generator.write_start_array()
        generator.write_raw(self._indent(len(self._stack)))
        generator.write_string(property_name)

        generator.write_start_object()
        for name, values in parameters or ():
            if not values:
                continue
            generator.write_field_name(name.lower())
            if len(values) == 1:
                generator.write_string(values[0])
            else:
                generator.write_start_array()
                for param_value in values:
                    generator.write_string(param_value)
                generator.write_end_array()
        generator.write_end_object()

        data_type = value.data_type
        generator.write_string("unknown" if data_type is None else str(data_type).lower())

        for json_value in value.values:
            self._write_value(json_value)

        generator.write_end_array()

    def _write_value(self, json_value: JsonValue) -> None:
        generator = self._generator

        if json_value.kind is JsonValueKind.NULL:
            generator.write_null()
        elif json_value.kind is JsonValueKind.SCALAR:
            value = json_value.value
            if isinstance(value, bool):
                generator.write_boolean(value)
            elif isinstance(value, (int, float)):
                generator.write_number(value)
            else:
                generator.write_string(str(value))
        elif json_value.kind is JsonValueKind.ARRAY:
            generator.write_start_array()
            for element in json_value.array:
                self._write_value(element)
            generator.write_end_array()
        elif json_value.kind is JsonValueKind.OBJECT:
            generator.write_start_object()
            for key, element in json_value.object.items():
                generator.write_field_name(key)
                self._write_value(element)
            generator.write_end_object()

    def close_json_stream(self) -> None:
        """Finish the JSON document so that it is syntactically correct.

        Any components still open are ended. No more data can be written
        afterwards. The sink is left open.
        """
        if self._generator is None or self._stream_closed:
            return

        while self._stack:
            self.write_end_component()

        if self._wrap_in_array:
            self._generator.write_raw(self._indent(0))
            self._generator.write_end_array()

        self._stream_closed = True
        self._generator.flush()

    def close(self) -> None:
        """Finish the JSON document and close the sink."""
        if self._closed:
            return
        self._closed = True
        try:
            self.close_json_stream()
        finally:
            self._sink.close()

    def __enter__(self) -> "JCalRawWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
        elif not self._closed:
            # Leave the partial document as is; just release the sink
            self._closed = True
            self._sink.close()
