"""jCal writer for icalendar components and typed property objects."""

import logging
from typing import Any, TextIO

from icalendar import Component

from jcal.models.parameters import ICalParameters
from jcal.models.properties import ICalProperty
from jcal.models.values import JCalValue
from jcal.models.version import ICalVersion
from jcal.output.ical_values import to_jcal_value
from jcal.output.raw_writer import JCalRawWriter

logger = logging.getLogger(__name__)


class JCalWriter:
    """Writes iCalendar objects to a jCal data stream.

    Wraps a JCalRawWriter. Whole ``icalendar`` component trees are written
    with ``write``; components can also be built by hand with
    ``start_component`` / ``write_property`` / ``end_component``.
    """

    def __init__(
        self,
        sink: TextIO,
        wrap_in_array: bool = False,
        pretty_print: bool = False,
        version: ICalVersion = ICalVersion.V2_0,
    ):
        self._raw = JCalRawWriter(sink, wrap_in_array=wrap_in_array)
        self._raw.pretty_print = pretty_print
        self.version = version
        self.components_written = 0

    @property
    def raw_writer(self) -> JCalRawWriter:
        return self._raw

    @property
    def pretty_print(self) -> bool:
        return self._raw.pretty_print

    @pretty_print.setter
    def pretty_print(self, pretty_print: bool) -> None:
        self._raw.pretty_print = pretty_print

    def write(self, component: Component) -> None:
        """Write an icalendar component and all of its sub-components."""
        self._raw.write_start_component(component.name.lower())
        for name, value in component.items():
            values = value if isinstance(value, list) else [value]
            for item in values:
                self._write_ical_property(name, item)
        for subcomponent in component.subcomponents:
            self.write(subcomponent)
        self._raw.write_end_component()

        if self._raw.depth == 0:
            self.components_written += 1
            logger.debug(f"Wrote {component.name} to jCal stream")

    def _write_ical_property(self, name: str, value: Any) -> None:
        parameters = ICalParameters()
        for param_name, param_value in (getattr(value, "params", None) or {}).items():
            if isinstance(param_value, (list, tuple)):
                for item in param_value:
                    parameters.put(param_name, str(item))
            else:
                parameters.put(param_name, str(param_value))

        jcal_value = to_jcal_value(value)

        # VALUE names the data type, which jCal writes in its own slot
        data_type = parameters.value
        if data_type is not None:
            parameters.remove(ICalParameters.VALUE)
            jcal_value = JCalValue(data_type, jcal_value.values)

        self._raw.write_property(name.lower(), jcal_value, parameters)

    def start_component(self, component_name: str) -> None:
        self._raw.write_start_component(component_name.lower())

    def end_component(self) -> None:
        self._raw.write_end_component()
        if self._raw.depth == 0:
            self.components_written += 1

    def write_property(self, prop: ICalProperty) -> None:
        """Write a typed property to the component currently open."""
        prop.write_jcal(self._raw, self.version)

    def close_json_stream(self) -> None:
        self._raw.close_json_stream()

    def close(self) -> None:
        self._raw.close()

    def __enter__(self) -> "JCalWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._raw.__exit__(exc_type, exc, tb)
