"""Configuration for the days counter."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from dayscounter.exceptions import ConfigError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str) -> bool:
    """Parse an environment flag, raising ConfigError for unknown values."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean value: {value!r}")


class DaysCounterConfig(BaseModel):
    """Days counter configuration with Pydantic validation."""

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="dayscounter.log")

    # Calendar export
    export_filename: str = Field(default="event.ics")
    prodid: str = Field(default="-//DaysCounterApp//EN")
    uid_domain: str = Field(default="dayscounter")
    escape_text: bool = Field(default=True)

    # Display
    date_format: str = Field(default="%Y-%m-%d")

    @field_validator("export_filename")
    @classmethod
    def ensure_ics_suffix(cls, v: str) -> str:
        """Default export name must be an .ics file."""
        if not v.lower().endswith(".ics"):
            raise ValueError("export_filename must end with .ics")
        return v

    @classmethod
    def from_env(cls) -> "DaysCounterConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Logging
        if "DAYSCOUNTER_LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["DAYSCOUNTER_LOG_DIR"])
        if "DAYSCOUNTER_LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["DAYSCOUNTER_LOG_FILENAME"]

        # Calendar export
        if "DAYSCOUNTER_EXPORT_FILENAME" in os.environ:
            config_dict["export_filename"] = os.environ["DAYSCOUNTER_EXPORT_FILENAME"]
        if "DAYSCOUNTER_PRODID" in os.environ:
            config_dict["prodid"] = os.environ["DAYSCOUNTER_PRODID"]
        if "DAYSCOUNTER_UID_DOMAIN" in os.environ:
            config_dict["uid_domain"] = os.environ["DAYSCOUNTER_UID_DOMAIN"]
        if "DAYSCOUNTER_ESCAPE_TEXT" in os.environ:
            try:
                config_dict["escape_text"] = _parse_bool(
                    os.environ["DAYSCOUNTER_ESCAPE_TEXT"]
                )
            except ConfigError:
                pass  # Keep default if invalid

        # Display
        if "DAYSCOUNTER_DATE_FORMAT" in os.environ:
            config_dict["date_format"] = os.environ["DAYSCOUNTER_DATE_FORMAT"]

        return cls(**config_dict)
