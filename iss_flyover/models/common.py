from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

IPAddress = str


def _ensure_not_bool(value: Any) -> Any:
    # bool is an int subclass; pydantic would turn true/false into 1/0.
    if isinstance(value, bool):
        raise ValueError("booleans are not accepted as numbers")
    return value


class LookupStage(str, Enum):
    """Step of the flyover lookup chain that produced a result or an error."""

    ip = "ip"
    geolocation = "geolocation"
    overpass = "overpass"


class Coordinates(BaseModel):
    """Latitude/longitude resolved for an IP address.

    Values are trusted as returned by the geolocation provider; no range checks.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _reject_bool(cls, value: Any) -> Any:
        return _ensure_not_bool(value)


class OverpassWindow(BaseModel):
    """A predicted ISS pass above the local horizon."""

    model_config = ConfigDict(frozen=True)

    risetime: int
    duration: int

    @field_validator("risetime", "duration", mode="before")
    @classmethod
    def _reject_bool(cls, value: Any) -> Any:
        return _ensure_not_bool(value)

    @property
    def rise_at(self) -> datetime:
        """Start of the pass as a timezone-aware UTC datetime.

        Raises OverflowError/ValueError/OSError for epochs datetime can't represent.
        """
        return datetime.fromtimestamp(self.risetime, tz=timezone.utc)


OverpassList = list[OverpassWindow]
