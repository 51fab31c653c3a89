"""
Sunrise, sunset and twilight times for one calendar date at one location.

AstronomicalDay binds a date and a Location, asks SolarEventCalculator for
UTC fractional hours and turns them into aware datetimes in the location's
time zone. A missing event (polar day or night) is returned as None.

Not thread-safe: date and location are plain attributes. Use one instance
per session or serialize access.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from suntimes.calculator import GEOMETRIC_ZENITH, SolarEventCalculator, hours_from_meridian
from suntimes.location import Location
from suntimes.logger import logger


# Sun 6 degrees below the horizon
CIVIL_ZENITH = 96.0

# Sun 12 degrees below the horizon
NAUTICAL_ZENITH = 102.0

# Sun 18 degrees below the horizon
ASTRONOMICAL_ZENITH = 108.0


def to_utc_hour(timestamp: datetime) -> float:
    """
    Fractional UTC hour of an aware timestamp (inverse of date_from_utc_hour).

    Example:
        to_utc_hour(datetime(2024, 1, 1, 5, 45, tzinfo=timezone.utc))  # 5.75
    """
    utc = timestamp.astimezone(timezone.utc)
    return utc.hour + utc.minute / 60.0 + utc.second / 3600.0 + utc.microsecond / 3_600_000_000.0


@dataclass
class AstronomicalDay:
    """
    Solar events for a calendar date at a location.

    Attributes:
        calendar_date: Proleptic Gregorian date; time of day is irrelevant
        location: Observer location (shared, may be swapped between calls)
        calculator: Algorithm used for UTC event times
    """
    calendar_date: date
    location: Location
    calculator: SolarEventCalculator = field(default_factory=SolarEventCalculator)

    def set_date(self, year: int, month: int, day: int) -> None:
        """Replace the calendar date. Raises ValueError for impossible dates."""
        self.calendar_date = date(year, month, day)

    # ------------------------------------------------------------------
    # UTC fractional hours
    # ------------------------------------------------------------------

    def utc_sunrise(self, zenith: float, adjust_for_elevation: bool = False) -> Optional[float]:
        """UTC hour of the rising event at zenith, or None."""
        return self.calculator.utc_sunrise(self.calendar_date, self.location, zenith, adjust_for_elevation)

    def utc_sunset(self, zenith: float, adjust_for_elevation: bool = False) -> Optional[float]:
        """UTC hour of the setting event at zenith, or None."""
        return self.calculator.utc_sunset(self.calendar_date, self.location, zenith, adjust_for_elevation)

    # ------------------------------------------------------------------
    # Local timestamps
    # ------------------------------------------------------------------

    def sunrise(self) -> Optional[datetime]:
        """
        Sunrise, elevation adjusted.

        Uses the geometric zenith widened by refraction, solar radius and
        the horizon dip for the location's elevation.
        """
        return self.date_from_utc_hour(self.utc_sunrise(GEOMETRIC_ZENITH, adjust_for_elevation=True))

    def sunset(self) -> Optional[datetime]:
        """Sunset, elevation adjusted."""
        return self.date_from_utc_hour(self.utc_sunset(GEOMETRIC_ZENITH, adjust_for_elevation=True))

    def sea_level_sunrise(self) -> Optional[datetime]:
        """Sunrise as seen from sea level (elevation ignored)."""
        return self.date_from_utc_hour(self.utc_sunrise(GEOMETRIC_ZENITH))

    def sea_level_sunset(self) -> Optional[datetime]:
        """Sunset as seen from sea level (elevation ignored)."""
        return self.date_from_utc_hour(self.utc_sunset(GEOMETRIC_ZENITH))

    def begin_civil_twilight(self) -> Optional[datetime]:
        return self.date_from_utc_hour(self.utc_sunrise(CIVIL_ZENITH))

    def end_civil_twilight(self) -> Optional[datetime]:
        return self.date_from_utc_hour(self.utc_sunset(CIVIL_ZENITH))

    def begin_nautical_twilight(self) -> Optional[datetime]:
        return self.date_from_utc_hour(self.utc_sunrise(NAUTICAL_ZENITH))

    def end_nautical_twilight(self) -> Optional[datetime]:
        return self.date_from_utc_hour(self.utc_sunset(NAUTICAL_ZENITH))

    def begin_astronomical_twilight(self) -> Optional[datetime]:
        return self.date_from_utc_hour(self.utc_sunrise(ASTRONOMICAL_ZENITH))

    def end_astronomical_twilight(self) -> Optional[datetime]:
        return self.date_from_utc_hour(self.utc_sunset(ASTRONOMICAL_ZENITH))

    def sun_transit(self) -> Optional[datetime]:
        """Solar noon, taken as the midpoint between sea-level sunrise and sunset."""
        rise = self.sea_level_sunrise()
        set_ = self.sea_level_sunset()
        if rise is None or set_ is None:
            return None
        # UTC arithmetic: same-tzinfo subtraction ignores a DST change between the two
        rise_utc = rise.astimezone(timezone.utc)
        noon_utc = rise_utc + (set_.astimezone(timezone.utc) - rise_utc) / 2
        return noon_utc.astimezone(self.location.time_zone)

    def day_length(self) -> Optional[timedelta]:
        """Time between sunrise and sunset, or None when either is missing."""
        rise = self.sunrise()
        set_ = self.sunset()
        if rise is None or set_ is None:
            return None
        return set_.astimezone(timezone.utc) - rise.astimezone(timezone.utc)

    def events(self) -> dict[str, Optional[datetime]]:
        """All sunrise, sunset and twilight events keyed by name, dawn to dusk."""
        return {
            "begin_astronomical_twilight": self.begin_astronomical_twilight(),
            "begin_nautical_twilight": self.begin_nautical_twilight(),
            "begin_civil_twilight": self.begin_civil_twilight(),
            "sunrise": self.sunrise(),
            "sunset": self.sunset(),
            "end_civil_twilight": self.end_civil_twilight(),
            "end_nautical_twilight": self.end_nautical_twilight(),
            "end_astronomical_twilight": self.end_astronomical_twilight(),
        }

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def date_from_utc_hour(self, utc_hour: Optional[float]) -> Optional[datetime]:
        """
        Local timestamp for a UTC fractional hour of the calendar_date's solar day.

        The UTC day is picked from the local mean solar time
        (utc_hour + longitude / 15): east of Greenwich a morning event can
        fall on the previous UTC day (Melbourne sunrise is ~19:00 UTC), and
        west of it an evening event on the next one. Events stay in
        dawn-to-dusk order, so a twilight that ends after local midnight
        (Helsinki in June) is returned on the following local date.

        Zones far from their meridian (UTC+14 at 157W) put the whole solar
        day on another civil date; the result is then moved by whole days
        so the day's solar noon falls on calendar_date.

        Args:
            utc_hour: Fractional hour in [0, 24), or None

        Returns:
            Aware datetime in the location's time zone, or None if utc_hour is None
        """
        if utc_hour is None:
            return None

        start = self._utc_midnight()
        meridian_hours = hours_from_meridian(self.location.longitude)

        mean_solar = utc_hour + meridian_hours
        if mean_solar >= 24.0:
            start -= timedelta(days=1)
        elif mean_solar < 0.0:
            start += timedelta(days=1)

        day_shift = self._civil_day_shift()
        if day_shift:
            start += timedelta(days=day_shift)
            logger.debug(
                f"Shifted solar day by {day_shift:+d} day(s) onto "
                f"{self.calendar_date.isoformat()} for {self.location.name} ({self.location.time_zone_name})"
            )

        return (start + timedelta(hours=utc_hour)).astimezone(self.location.time_zone)

    def _utc_midnight(self) -> datetime:
        return datetime(
            self.calendar_date.year,
            self.calendar_date.month,
            self.calendar_date.day,
            tzinfo=timezone.utc,
        )

    def _civil_day_shift(self) -> int:
        """Whole days between calendar_date and the local date of its mean solar noon."""
        noon = self._utc_midnight() + timedelta(hours=12.0 - hours_from_meridian(self.location.longitude))
        return (self.calendar_date - noon.astimezone(self.location.time_zone).date()).days
