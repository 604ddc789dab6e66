"""DateSettings — processing locale, display zone and relative-time defaults."""

from __future__ import annotations

import os
from datetime import UTC, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

from datefield.locale import LocaleData, get_locale


class DateSettings(BaseModel):
    """Configuration shared by every component built by :class:`DateService`.

    Attributes:
        locale:       Locale code used for names, styles and phrasing.
        timezone:     IANA zone that datetime values are displayed in.
                      All arithmetic stays in UTC.
        significance: Default promotion threshold for relative times.
        keep_time:    ``True`` to keep the time of day when parsing
                      (a datetime field), ``False`` for date-only fields.
    """

    model_config = ConfigDict(frozen=True)

    locale: str = "en_US"
    timezone: str = "UTC"
    significance: int = Field(default=2, ge=1)
    keep_time: bool = False

    @field_validator("locale")
    @classmethod
    def _known_locale(cls, v: str) -> str:
        return get_locale(v).code

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, v: str) -> str:
        if v == "UTC":
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise ValueError(f"unknown time zone '{v}'") from e
        return v

    @property
    def locale_data(self) -> LocaleData:
        return get_locale(self.locale)

    @property
    def zone(self) -> tzinfo:
        if self.timezone == "UTC":
            return UTC
        return ZoneInfo(self.timezone)

    @classmethod
    def from_env(cls) -> DateSettings:
        """Build settings from ``DATEFIELD_*`` environment variables."""
        return cls(
            locale=os.getenv("DATEFIELD_LOCALE", "en_US"),
            timezone=os.getenv("DATEFIELD_TIMEZONE", "UTC"),
            significance=os.getenv("DATEFIELD_SIGNIFICANCE", "2"),
            keep_time=os.getenv("DATEFIELD_KEEP_TIME", "").lower() in ("1", "true", "yes"),
        )
