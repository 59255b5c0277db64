"""Typed iCalendar property classes that render themselves as jCal."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, Field

from jcal.models.data_type import ICalDataType
from jcal.models.parameters import ICalParameters
from jcal.models.values import JCalValue
from jcal.models.version import ICalVersion

if TYPE_CHECKING:
    from jcal.output.raw_writer import JCalRawWriter


class ICalProperty(BaseModel, ABC):
    """Base class for iCalendar properties.

    Subclasses hold already-validated data and convert it into a JCalValue;
    the writer takes care of the JSON structure.
    """

    parameters: ICalParameters = Field(default_factory=ICalParameters)

    class Config:
        """Pydantic config."""

        arbitrary_types_allowed = True

    @abstractmethod
    def get_name(self) -> str:
        """Property name in lowercase (e.g. "categories")."""

    @abstractmethod
    def to_jcal_value(self, version: ICalVersion = ICalVersion.V2_0) -> JCalValue:
        """Convert the property value into a jCal value."""

    def write_jcal(
        self, writer: "JCalRawWriter", version: ICalVersion = ICalVersion.V2_0
    ) -> None:
        """Write this property to the component currently open on the writer.

        A VALUE parameter overrides the data type and is not written as a
        parameter, since jCal carries the data type in its own slot.
        """
        value = self.to_jcal_value(version)
        parameters = self.parameters.copy()
        data_type = parameters.value
        if data_type is not None:
            parameters.remove(ICalParameters.VALUE)
            value = JCalValue(data_type, value.values)
        writer.write_property(self.get_name(), value, parameters)


class TextProperty(ICalProperty):
    """A property holding a single text value (SUMMARY, UID, ...)."""

    name: str
    value: str | None = None

    def get_name(self) -> str:
        return self.name.lower()

    def to_jcal_value(self, version: ICalVersion = ICalVersion.V2_0) -> JCalValue:
        return JCalValue.single(self.value or "", ICalDataType.TEXT)


class Categories(ICalProperty):
    """Defines a list of "tags" or "keywords" that describe the component
    that the property belongs to (RFC 5545 p.81-2)."""

    values: list[str] = Field(default_factory=list)

    def get_name(self) -> str:
        return "categories"

    @property
    def language(self) -> str | None:
        """Language of the category names (LANGUAGE parameter)."""
        return self.parameters.language

    def set_language(self, language: str | None) -> None:
        self.parameters.language = language

    def to_jcal_value(self, version: ICalVersion = ICalVersion.V2_0) -> JCalValue:
        return JCalValue.multi(*self.values, data_type=ICalDataType.TEXT)


class Status(ICalProperty):
    """Overall status or confirmation of a component (RFC 5545 p.92-3)."""

    NEEDS_ACTION: ClassVar[str] = "NEEDS-ACTION"
    COMPLETED: ClassVar[str] = "COMPLETED"
    IN_PROGRESS: ClassVar[str] = "IN-PROGRESS"
    CANCELLED: ClassVar[str] = "CANCELLED"
    TENTATIVE: ClassVar[str] = "TENTATIVE"
    CONFIRMED: ClassVar[str] = "CONFIRMED"
    DRAFT: ClassVar[str] = "DRAFT"
    FINAL: ClassVar[str] = "FINAL"
    # vCal 1.0 only
    ACCEPTED: ClassVar[str] = "ACCEPTED"
    DECLINED: ClassVar[str] = "DECLINED"
    DELEGATED: ClassVar[str] = "DELEGATED"
    SENT: ClassVar[str] = "SENT"

    # 1.0 spells NEEDS-ACTION with a space
    V1_NEEDS_ACTION: ClassVar[str] = "NEEDS ACTION"

    value: str

    def get_name(self) -> str:
        return "status"

    @classmethod
    def needs_action(cls) -> "Status":
        return cls(value=cls.NEEDS_ACTION)

    @classmethod
    def completed(cls) -> "Status":
        return cls(value=cls.COMPLETED)

    @classmethod
    def in_progress(cls) -> "Status":
        return cls(value=cls.IN_PROGRESS)

    @classmethod
    def cancelled(cls) -> "Status":
        return cls(value=cls.CANCELLED)

    @classmethod
    def tentative(cls) -> "Status":
        return cls(value=cls.TENTATIVE)

    @classmethod
    def confirmed(cls) -> "Status":
        return cls(value=cls.CONFIRMED)

    @classmethod
    def draft(cls) -> "Status":
        return cls(value=cls.DRAFT)

    @classmethod
    def final(cls) -> "Status":
        return cls(value=cls.FINAL)

    @classmethod
    def accepted(cls) -> "Status":
        return cls(value=cls.ACCEPTED)

    @classmethod
    def declined(cls) -> "Status":
        return cls(value=cls.DECLINED)

    @classmethod
    def delegated(cls) -> "Status":
        return cls(value=cls.DELEGATED)

    @classmethod
    def sent(cls) -> "Status":
        return cls(value=cls.SENT)

    def _is(self, keyword: str) -> bool:
        return self.value.upper() == keyword

    def is_needs_action(self) -> bool:
        return self._is(self.NEEDS_ACTION)

    def is_completed(self) -> bool:
        return self._is(self.COMPLETED)

    def is_in_progress(self) -> bool:
        return self._is(self.IN_PROGRESS)

    def is_cancelled(self) -> bool:
        return self._is(self.CANCELLED)

    def is_tentative(self) -> bool:
        return self._is(self.TENTATIVE)

    def is_confirmed(self) -> bool:
        return self._is(self.CONFIRMED)

    def is_draft(self) -> bool:
        return self._is(self.DRAFT)

    def is_final(self) -> bool:
        return self._is(self.FINAL)

    def is_accepted(self) -> bool:
        return self._is(self.ACCEPTED)

    def is_declined(self) -> bool:
        return self._is(self.DECLINED)

    def is_delegated(self) -> bool:
        return self._is(self.DELEGATED)

    def is_sent(self) -> bool:
        return self._is(self.SENT)

    @classmethod
    def parse_text(cls, text: str, version: ICalVersion = ICalVersion.V2_0) -> "Status":
        """Parse a STATUS value as written by the given version."""
        text = text.strip()
        if version is ICalVersion.V1_0 and text.upper() == cls.V1_NEEDS_ACTION:
            return cls.needs_action()
        return cls(value=text)

    def to_text(self, version: ICalVersion = ICalVersion.V2_0) -> str:
        """STATUS value as it should be written for the given version."""
        if version is ICalVersion.V1_0 and self.is_needs_action():
            return self.V1_NEEDS_ACTION
        return self.value

    def to_jcal_value(self, version: ICalVersion = ICalVersion.V2_0) -> JCalValue:
        return JCalValue.single(self.to_text(version), ICalDataType.TEXT)
