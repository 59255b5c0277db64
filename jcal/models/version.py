"""iCalendar version enumeration."""

from enum import Enum


class ICalVersion(Enum):
    """iCalendar versions that affect how property values are written.

    V2_0_DEPRECATED is the 2.0 version string with the deprecated 1.0-era
    syntax still accepted by some producers.
    """

    V1_0 = "1.0"
    V2_0_DEPRECATED = "2.0-deprecated"
    V2_0 = "2.0"

    @property
    def version(self) -> str:
        """Value of the VERSION property for this version."""
        return "1.0" if self is ICalVersion.V1_0 else "2.0"

    @classmethod
    def from_string(cls, value: str) -> "ICalVersion":
        """Look up a version by VERSION property value or enum name."""
        normalized = value.strip().upper().replace(".", "_").replace("-", "_")
        for member in cls:
            if normalized in (member.name, member.name[1:]):
                return member
        raise ValueError(f"Unknown iCalendar version: {value}")
