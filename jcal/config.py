"""Configuration for the jCal tools."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from jcal.models.version import ICalVersion


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str) -> bool | None:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return None


class JCalConfig(BaseModel):
    """jCal configuration with Pydantic validation."""

    # Output
    pretty_print: bool = Field(default=False)
    wrap_in_array: bool = Field(default=True)
    version: ICalVersion = Field(default=ICalVersion.V2_0)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="jcal.log")

    @classmethod
    def from_env(cls) -> "JCalConfig":
        """Load configuration from environment variables and .env file."""
        # .env is looked up from the working directory
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Output
        for env_name, field_name in (
            ("JCAL_PRETTY_PRINT", "pretty_print"),
            ("JCAL_WRAP_IN_ARRAY", "wrap_in_array"),
        ):
            if env_name in os.environ:
                parsed = _parse_bool(os.environ[env_name])
                if parsed is not None:
                    config_dict[field_name] = parsed
        if "JCAL_VERSION" in os.environ:
            try:
                config_dict["version"] = ICalVersion.from_string(os.environ["JCAL_VERSION"])
            except ValueError:
                pass  # Keep default if invalid

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        return cls(**config_dict)
