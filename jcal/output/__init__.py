"""Output layer: jCal writers."""

from jcal.output.jcal_writer import JCalWriter
from jcal.output.json_generator import JsonGenerator
from jcal.output.raw_writer import JCalRawWriter

__all__ = [
    "JCalRawWriter",
    "JCalWriter",
    "JsonGenerator",
]
