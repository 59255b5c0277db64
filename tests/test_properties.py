"""Tests for typed property classes."""

import pytest

from jcal.models.data_type import ICalDataType
from jcal.models.parameters import ICalParameters
from jcal.models.properties import Categories, Status, TextProperty
from jcal.models.version import ICalVersion
from jcal.output.raw_writer import JCalRawWriter


def write_single(sink, prop, version=ICalVersion.V2_0) -> str:
    """Write one property inside a vevent and return the JSON."""
    writer = JCalRawWriter(sink)
    writer.write_start_component("vevent")
    prop.write_jcal(writer, version)
    writer.close_json_stream()
    return sink.getvalue()


def test_status_write_text_needs_action():
    """Test NEEDS-ACTION spelling per version."""
    status = Status.needs_action()

    assert status.to_text(ICalVersion.V1_0) == "NEEDS ACTION"
    assert status.to_text(ICalVersion.V2_0_DEPRECATED) == "NEEDS-ACTION"
    assert status.to_text(ICalVersion.V2_0) == "NEEDS-ACTION"


def test_status_parse_text_needs_action_with_space():
    """Test that the 1.0 spelling is only recognised under 1.0."""
    assert Status.parse_text("NEEDS ACTION", ICalVersion.V1_0).is_needs_action()
    assert not Status.parse_text("NEEDS ACTION", ICalVersion.V2_0_DEPRECATED).is_needs_action()
    assert not Status.parse_text("NEEDS ACTION", ICalVersion.V2_0).is_needs_action()


@pytest.mark.parametrize("version", list(ICalVersion))
def test_status_parse_text_needs_action_with_hyphen(version):
    """Test that the 2.0 spelling is recognised under every version."""
    assert Status.parse_text("NEEDS-ACTION", version).is_needs_action()


def test_status_factories_and_predicates():
    """Test status keyword helpers."""
    assert Status.completed().is_completed()
    assert Status.in_progress().value == "IN-PROGRESS"
    assert Status.cancelled().is_cancelled()
    assert Status.tentative().is_tentative()
    assert Status.confirmed().is_confirmed()
    assert Status.draft().is_draft()
    assert Status.final().is_final()
    assert Status.accepted().is_accepted()
    assert Status.declined().is_declined()
    assert Status.delegated().is_delegated()
    assert Status.sent().is_sent()
    assert Status(value="confirmed").is_confirmed()
    assert not Status.confirmed().is_tentative()


def test_status_jcal(sink):
    """Test writing a status as jCal under 1.0."""
    output = write_single(sink, Status.needs_action(), ICalVersion.V1_0)
    assert output == '["vevent",[["status",{},"text","NEEDS ACTION"]],[]]'


def test_categories_jcal(sink):
    """Test that categories are written as sibling values."""
    categories = Categories(values=["WORK", "MEETING"])
    categories.set_language("en")

    assert categories.language == "en"
    output = write_single(sink, categories)
    assert output == '["vevent",[["categories",{"language":"en"},"text","WORK","MEETING"]],[]]'


def test_categories_empty():
    """Test a categories property with no values."""
    categories = Categories()
    assert categories.values == []
    assert categories.to_jcal_value().to_python() == []


def test_text_property_value_parameter_sets_data_type(sink):
    """Test that VALUE becomes the data type and is not written as a parameter."""
    prop = TextProperty(
        name="X-HOMEPAGE",
        value="https://example.com",
        parameters=ICalParameters({"VALUE": "URI"}),
    )

    output = write_single(sink, prop)
    assert output == '["vevent",[["x-homepage",{},"uri","https://example.com"]],[]]'
    # the property itself is unchanged
    assert prop.parameters.value is ICalDataType.URI


def test_version_from_string():
    """Test version lookup."""
    assert ICalVersion.from_string("1.0") is ICalVersion.V1_0
    assert ICalVersion.from_string("2.0") is ICalVersion.V2_0
    assert ICalVersion.from_string("v2_0_deprecated") is ICalVersion.V2_0_DEPRECATED
    assert ICalVersion.V2_0_DEPRECATED.version == "2.0"
    with pytest.raises(ValueError):
        ICalVersion.from_string("3.0")


def test_versions_are_distinct():
    """Test that both 2.0 members exist and share a VERSION value."""
    assert len(ICalVersion) == 3
    assert ICalVersion("2.0-deprecated") is ICalVersion.V2_0_DEPRECATED
    assert ICalVersion("2.0") is ICalVersion.V2_0
    assert ICalVersion.V2_0.version == ICalVersion.V2_0_DEPRECATED.version == "2.0"
