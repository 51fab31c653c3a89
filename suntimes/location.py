"""
Observer location for solar event calculations.

A Location is an immutable value: name, coordinates, elevation and the
time zone used to turn UTC instants into local wall-clock time.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from suntimes.logger import logger


class InvalidLocationError(ValueError):
    """Raised when a Location is built from out-of-range or non-finite values."""


def _check_range(label: str, value: float, low: float, high: float) -> float:
    # float() would parse "12"; only real numbers are accepted
    if isinstance(value, (str, bytes)):
        raise InvalidLocationError(f"{label} must be a number, got {value!r}")
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidLocationError(f"{label} must be a number, got {value!r}") from e

    if not math.isfinite(value):
        raise InvalidLocationError(f"{label} must be finite, got {value}")
    if not low <= value <= high:
        raise InvalidLocationError(f"{label} must be within [{low}, {high}], got {value}")
    return value


@dataclass(frozen=True)
class Location:
    """
    Where the observer stands.

    Attributes:
        name: Free-text label (not used in computation)
        latitude: Degrees in [-90, 90], south negative
        longitude: Degrees in [-180, 180], west negative
        elevation: Meters above sea level, finite and >= 0
        time_zone: Any tzinfo; its utcoffset() gives the local offset
            in force at an instant (DST included)

    Raises:
        InvalidLocationError: If a coordinate is out of range or non-finite,
            or the elevation is negative
    """
    name: str
    latitude: float
    longitude: float
    elevation: float = 0.0
    time_zone: tzinfo = timezone.utc

    def __post_init__(self):
        # frozen dataclass: normalized values go through object.__setattr__
        object.__setattr__(self, "latitude", _check_range("latitude", self.latitude, -90.0, 90.0))
        object.__setattr__(self, "longitude", _check_range("longitude", self.longitude, -180.0, 180.0))
        object.__setattr__(self, "elevation", _check_range("elevation", self.elevation, 0.0, math.inf))

        if not isinstance(self.time_zone, tzinfo):
            raise InvalidLocationError(f"time_zone must be a tzinfo, got {type(self.time_zone).__name__}")

    @classmethod
    def from_time_zone_name(
        cls,
        name: str,
        latitude: float,
        longitude: float,
        elevation: float = 0.0,
        time_zone_name: str = "UTC",
    ) -> "Location":
        """
        Build a Location from an IANA time zone name.

        Example:
            Location.from_time_zone_name("Melbourne", -37.50, 145.01, 0, "Australia/Melbourne")
        """
        try:
            zone = ZoneInfo(time_zone_name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            logger.warning(f"Unknown time zone for location '{name}': {time_zone_name}")
            raise InvalidLocationError(f"Unknown time zone: {time_zone_name}") from e

        return cls(name=name, latitude=latitude, longitude=longitude, elevation=elevation, time_zone=zone)

    def utc_offset(self, instant: datetime) -> timedelta:
        """Offset from UTC of this location's time zone at the given instant."""
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        return instant.astimezone(self.time_zone).utcoffset()

    @property
    def time_zone_name(self) -> str:
        return getattr(self.time_zone, "key", None) or str(self.time_zone)
