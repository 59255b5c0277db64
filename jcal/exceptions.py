"""Exception hierarchy for jCal operations."""


class JCalError(Exception):
    """Base exception for jCal operations."""

    pass


class WriterStateError(JCalError):
    """Writer method called out of order (e.g. property before component)."""

    pass


class IngestionError(JCalError):
    """Error while reading calendar input."""

    pass


class ConversionError(JCalError):
    """Property value cannot be represented in jCal."""

    pass


class UnsupportedFormatError(JCalError):
    """File format not supported."""

    pass
