"""
Sunrise/sunset calculation based on the US Naval Observatory almanac.

Implements Kevin Boone's formulation of the USNO algorithm, with the zenith
adjusted for the observer's elevation. Every function here is pure: the
calculator carries only two read-only tuning constants, so one instance can
be shared between threads.

Algorithm (per event):
    1. Day of year from a closed-form Gregorian formula
    2. Approximate event time in days (6h for rise, 18h for set)
    3. Sun's mean anomaly -> true longitude -> right ascension
    4. Declination and cosine of the local hour angle at the given zenith
    5. Local hour angle -> local mean time -> UTC fractional hour

Times are fractional hours: 5:45 UTC is returned as 5.75. An event the sun
never reaches (polar day or night) is returned as None.
"""

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from suntimes.config import EARTH_RADIUS_KM, REFRACTION_ARC_MINUTES, SOLAR_RADIUS_ARC_MINUTES
from suntimes.location import Location
from suntimes.logger import logger


# ============================================================================
# Constants
# ============================================================================

# Zenith of a point-like sun on an airless horizon
GEOMETRIC_ZENITH = 90.0

# Degrees of longitude per hour of time difference
DEG_PER_HOUR = 360.0 / 24.0


class EventKind(str, Enum):
    """Which horizon crossing to compute."""
    RISE = "rise"
    SET = "set"

    @property
    def base_hour(self) -> float:
        """Assumed local hour of the event, used to seed the mean anomaly."""
        return 6.0 if self is EventKind.RISE else 18.0


# ============================================================================
# Degree-based trigonometry
# ============================================================================

def _sin_deg(deg: float) -> float:
    return math.sin(math.radians(deg))


def _cos_deg(deg: float) -> float:
    return math.cos(math.radians(deg))


def _tan_deg(deg: float) -> float:
    return math.tan(math.radians(deg))


def _asin_deg(x: float) -> float:
    return math.degrees(math.asin(x))


def _acos_deg(x: float) -> float:
    return math.degrees(math.acos(x))


# ============================================================================
# Algorithm steps
# ============================================================================

def day_of_year(year: int, month: int, day: int) -> int:
    """
    Day of the year, 1 January being day 1.

    Closed-form proleptic Gregorian formula, leap years included. Inputs are
    not validated: day=32 silently yields a meaningless number.
    """
    n1 = 275 * month // 9
    n2 = (month + 9) // 12
    n3 = 1 + (year - 4 * (year // 4) + 2) // 3
    return n1 - (n2 * n3) + day - 30


def hours_from_meridian(longitude: float) -> float:
    """Time difference from Greenwich in hours; west of it is negative."""
    return longitude / DEG_PER_HOUR


def approx_time_days(doy: int, offset_hours: float, kind: EventKind) -> float:
    """Approximate event time in days since midnight 1 January."""
    return doy + ((kind.base_hour - offset_hours) / 24)


def sun_mean_anomaly(approx_days: float) -> float:
    """Sun's mean anomaly in degrees."""
    return (0.9856 * approx_days) - 3.289


def sun_true_longitude(mean_anomaly: float) -> float:
    """Sun's true longitude in degrees, in [0, 360)."""
    l = mean_anomaly + (1.916 * _sin_deg(mean_anomaly)) + (0.020 * _sin_deg(2 * mean_anomaly)) + 282.634

    if l >= 360.0:
        l -= 360.0
    if l < 0:
        l += 360.0
    return l


def sun_right_ascension_hours(true_longitude: float) -> float:
    """
    Sun's right ascension in hours.

    atan() only returns (-90, 90); the result is moved into the same
    90-degree quadrant as the true longitude before converting to hours.
    """
    ra = math.degrees(math.atan(0.91764 * _tan_deg(true_longitude)))

    l_quadrant = math.floor(true_longitude / 90.0) * 90.0
    ra_quadrant = math.floor(ra / 90.0) * 90.0
    ra += l_quadrant - ra_quadrant

    return ra / DEG_PER_HOUR


def cos_local_hour_angle(true_longitude: float, latitude: float, zenith: float) -> float:
    """Cosine of the sun's local hour angle; outside [-1, 1] means no event."""
    sin_dec = 0.39782 * _sin_deg(true_longitude)
    cos_dec = _cos_deg(_asin_deg(sin_dec))

    return (_cos_deg(zenith) - (sin_dec * _sin_deg(latitude))) / (cos_dec * _cos_deg(latitude))


def local_mean_time(local_hour: float, ra_hours: float, approx_days: float) -> float:
    """Local mean time of the event in fractional hours (no time zone applied)."""
    return local_hour + ra_hours - (0.06571 * approx_days) - 6.622


def _normalize_hour(hour: float) -> float:
    while hour < 0.0:
        hour += 24.0
    while hour >= 24.0:
        hour -= 24.0
    return hour


# ============================================================================
# Calculator
# ============================================================================

@dataclass(frozen=True)
class SolarEventCalculator:
    """
    USNO sunrise/sunset calculator.

    Attributes:
        refraction_arc_minutes: Atmospheric refraction at the horizon.
            Defaults to 34.4788' (Reingold & Dershowitz average).
        solar_radius_arc_minutes: Apparent radius of the solar disk, 16'.
    """
    refraction_arc_minutes: float = REFRACTION_ARC_MINUTES
    solar_radius_arc_minutes: float = SOLAR_RADIUS_ARC_MINUTES

    @property
    def refraction(self) -> float:
        """Refraction in degrees."""
        return self.refraction_arc_minutes / 60.0

    @property
    def solar_radius(self) -> float:
        """Solar radius in degrees."""
        return self.solar_radius_arc_minutes / 60.0

    @staticmethod
    def elevation_adjustment(elevation_meters: float) -> float:
        """
        Horizon dip in degrees for an observer above sea level.

        From Calendrical Calculations (Reingold & Dershowitz):
            degrees(acos(R / (R + h))) with R the polar radius in km
        """
        return math.degrees(math.acos(EARTH_RADIUS_KM / (EARTH_RADIUS_KM + (elevation_meters / 1000))))

    def adjust_zenith(self, zenith: float, elevation_meters: float) -> float:
        """
        Add solar radius, refraction and horizon dip to the geometric zenith.

        Only the geometric zenith (exactly 90 degrees) is adjusted. Twilight
        zeniths are light-level thresholds and are returned unchanged.

        Example:
            calc.adjust_zenith(90.0, 0)    # 90.8413...
            calc.adjust_zenith(96.0, 500)  # 96.0
        """
        if zenith == GEOMETRIC_ZENITH:
            zenith += self.solar_radius + self.refraction + self.elevation_adjustment(elevation_meters)
        return zenith

    def compute_utc_event_hour(
        self,
        year: int,
        month: int,
        day: int,
        longitude: float,
        latitude: float,
        zenith: float,
        kind: EventKind,
    ) -> Optional[float]:
        """
        UTC time of a sunrise or sunset at the given zenith.

        Args:
            year: Four-digit year
            month: Month, 1-12
            day: Day of month, 1-31
            longitude: Degrees, west of Greenwich negative
            latitude: Degrees, south of the equator negative
            zenith: Sun's zenith at the event, in degrees (already adjusted)
            kind: EventKind.RISE or EventKind.SET

        Returns:
            Fractional UTC hour in [0, 24), or None if the sun never
            crosses this zenith on that date (polar day or night)
        """
        doy = day_of_year(year, month, day)
        offset_hours = hours_from_meridian(longitude)
        approx_days = approx_time_days(doy, offset_hours, kind)

        true_long = sun_true_longitude(sun_mean_anomaly(approx_days))
        ra_hours = sun_right_ascension_hours(true_long)
        cos_h = cos_local_hour_angle(true_long, latitude, zenith)

        if cos_h > 1 or cos_h < -1:
            logger.debug(
                f"No sun {kind.value} on {year:04d}-{month:02d}-{day:02d} "
                f"at lat={latitude}, lon={longitude}, zenith={zenith:.4f} (cos H={cos_h:.4f})"
            )
            return None

        if kind is EventKind.RISE:
            local_hour_angle = 360.0 - _acos_deg(cos_h)
        else:
            local_hour_angle = _acos_deg(cos_h)
        local_hour = local_hour_angle / DEG_PER_HOUR

        mean_time = local_mean_time(local_hour, ra_hours, approx_days)
        return _normalize_hour(mean_time - offset_hours)

    def utc_sunrise(
        self,
        calendar_date: date,
        location: Location,
        zenith: float,
        adjust_for_elevation: bool,
    ) -> Optional[float]:
        """
        UTC sunrise (or any rising event at the given zenith) for a date and location.

        The location's elevation widens the zenith only when
        adjust_for_elevation is set; refraction and solar radius are always
        applied to the geometric zenith.
        """
        return self._utc_event(calendar_date, location, zenith, adjust_for_elevation, EventKind.RISE)

    def utc_sunset(
        self,
        calendar_date: date,
        location: Location,
        zenith: float,
        adjust_for_elevation: bool,
    ) -> Optional[float]:
        """UTC sunset (or any setting event at the given zenith) for a date and location."""
        return self._utc_event(calendar_date, location, zenith, adjust_for_elevation, EventKind.SET)

    def _utc_event(self, calendar_date, location, zenith, adjust_for_elevation, kind):
        elevation = location.elevation if adjust_for_elevation else 0.0
        return self.compute_utc_event_hour(
            calendar_date.year,
            calendar_date.month,
            calendar_date.day,
            location.longitude,
            location.latitude,
            self.adjust_zenith(zenith, elevation),
            kind,
        )
