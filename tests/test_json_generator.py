"""Tests for the JSON token generator."""

import json

import pytest

from jcal.exceptions import WriterStateError
from jcal.output.json_generator import JsonGenerator


def test_separators(sink):
    """Test commas between values and colons after field names."""
    generator = JsonGenerator(sink)
    generator.write_start_array()
    generator.write_string("a")
    generator.write_number(1)
    generator.write_start_object()
    generator.write_field_name("k")
    generator.write_boolean(False)
    generator.write_field_name("n")
    generator.write_null()
    generator.write_end_object()
    generator.write_end_array()

    assert sink.getvalue() == '["a",1,{"k":false,"n":null}]'
    assert json.loads(sink.getvalue()) == ["a", 1, {"k": False, "n": None}]


def test_raw_text_written_after_bracket(sink):
    """Test that raw text follows the bracket it is written after."""
    generator = JsonGenerator(sink)
    generator.write_start_array()
    generator.write_start_array()
    generator.write_raw("\n  ")
    generator.write_string("a")
    generator.write_end_array()
    generator.write_start_array()
    generator.write_raw("\n  ")
    generator.write_string("b")
    generator.write_end_array()
    generator.write_end_array()

    assert sink.getvalue() == '[[\n  "a"],[\n  "b"]]'


def test_non_finite_numbers(sink):
    """Test that NaN and infinities are quoted."""
    generator = JsonGenerator(sink)
    generator.write_start_array()
    generator.write_number(float("nan"))
    generator.write_number(float("-inf"))
    generator.write_number(2.5)
    generator.write_end_array()

    assert sink.getvalue() == '["NaN","-Infinity",2.5]'


def test_depth(sink):
    """Test depth tracking."""
    generator = JsonGenerator(sink)
    assert generator.depth == 0
    generator.write_start_array()
    generator.write_start_object()
    assert generator.depth == 2


def test_mismatched_end(sink):
    """Test closing an array while an object is open."""
    generator = JsonGenerator(sink)
    generator.write_start_object()
    with pytest.raises(WriterStateError):
        generator.write_end_array()


def test_end_without_start(sink):
    """Test closing when nothing is open."""
    generator = JsonGenerator(sink)
    with pytest.raises(WriterStateError):
        generator.write_end_object()


def test_field_name_outside_object(sink):
    """Test that field names need an open object."""
    generator = JsonGenerator(sink)
    generator.write_start_array()
    with pytest.raises(WriterStateError):
        generator.write_field_name("k")


def test_object_value_without_field_name(sink):
    """Test that object values need a field name."""
    generator = JsonGenerator(sink)
    generator.write_start_object()
    with pytest.raises(WriterStateError):
        generator.write_string("v")


def test_object_closed_with_pending_field(sink):
    """Test closing an object whose last field has no value."""
    generator = JsonGenerator(sink)
    generator.write_start_object()
    generator.write_field_name("k")
    with pytest.raises(WriterStateError):
        generator.write_end_object()
