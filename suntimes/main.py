"""
HTTP API for sunrise, sunset and twilight times.

Each request builds its own AstronomicalDay, so the app holds no mutable
state and can run with any number of workers.
"""

from fastapi import FastAPI, HTTPException, APIRouter
from pydantic import BaseModel, Field
from contextlib import asynccontextmanager
import datetime as dt
from typing import Optional

from suntimes.astronomical_day import AstronomicalDay
from suntimes.calculator import SolarEventCalculator
from suntimes.config import (
    LOG_LEVEL,
    REFRACTION_ARC_MINUTES, SOLAR_RADIUS_ARC_MINUTES,
    DEFAULT_LOCATION_NAME, DEFAULT_LATITUDE, DEFAULT_LONGITUDE, DEFAULT_ELEVATION, DEFAULT_TIMEZONE,
)
from suntimes.location import InvalidLocationError, Location
from suntimes.logger import logger


# ============================================================================
# Shared calculator (immutable, safe across requests)
# ============================================================================

calculator = SolarEventCalculator(
    refraction_arc_minutes=REFRACTION_ARC_MINUTES,
    solar_radius_arc_minutes=SOLAR_RADIUS_ARC_MINUTES,
)


# ============================================================================
# FastAPI Lifespan
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    Logs configuration on startup and shutdown.
    """
    logger.info("SunTimes starting up")
    logger.info(
        f"Configuration: LOG_LEVEL={LOG_LEVEL}, "
        f"refraction={calculator.refraction_arc_minutes}', solar_radius={calculator.solar_radius_arc_minutes}'"
    )
    logger.info(
        f"Default location: {DEFAULT_LOCATION_NAME} "
        f"(lat={DEFAULT_LATITUDE}, lon={DEFAULT_LONGITUDE}, elev={DEFAULT_ELEVATION}m, tz={DEFAULT_TIMEZONE})"
    )

    yield

    logger.info("Shutdown complete")


# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="SunTimes API",
    lifespan=lifespan,
    redoc_url=None,
    docs_url="/docs"
)

sun_router = APIRouter(
    prefix="/sun",
    tags=["Solar Events"]
)


# ------------------------------------------------------------------

class SunTimesRequest(BaseModel):
    name: str = Field("", description="Free-text label for the location")
    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False, description="Latitude (-90 to 90), south negative")
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False, description="Longitude (-180 to 180), west negative")
    elevation: float = Field(0.0, ge=0, allow_inf_nan=False, description="Elevation in meters above sea level")
    timezone: str = Field("UTC", description="IANA time zone name, e.g. Australia/Melbourne")
    date: Optional[dt.date] = Field(None, description="Calendar date (default: today in the location's time zone)")


class LocationResponse(BaseModel):
    name: str
    latitude: float
    longitude: float
    elevation: float
    timezone: str


class SunTimesResponse(BaseModel):
    location: LocationResponse
    date: dt.date
    begin_astronomical_twilight: Optional[dt.datetime] = None
    begin_nautical_twilight: Optional[dt.datetime] = None
    begin_civil_twilight: Optional[dt.datetime] = None
    sunrise: Optional[dt.datetime] = None
    solar_noon: Optional[dt.datetime] = None
    sunset: Optional[dt.datetime] = None
    end_civil_twilight: Optional[dt.datetime] = None
    end_nautical_twilight: Optional[dt.datetime] = None
    end_astronomical_twilight: Optional[dt.datetime] = None
    day_length_seconds: Optional[float] = Field(None, description="Sunset minus sunrise; null if either is missing")


def build_response(location: Location, calendar_date: Optional[dt.date]) -> SunTimesResponse:
    """
    Compute every solar event for a location and date.

    Args:
        location: Validated observer location
        calendar_date: Date to compute; None means today in the location's time zone

    Returns:
        SunTimesResponse with null for events that do not occur
    """
    if calendar_date is None:
        calendar_date = dt.datetime.now(location.time_zone).date()

    day = AstronomicalDay(calendar_date=calendar_date, location=location, calculator=calculator)
    day_length = day.day_length()

    return SunTimesResponse(
        location=LocationResponse(
            name=location.name,
            latitude=location.latitude,
            longitude=location.longitude,
            elevation=location.elevation,
            timezone=location.time_zone_name,
        ),
        date=calendar_date,
        solar_noon=day.sun_transit(),
        day_length_seconds=day_length.total_seconds() if day_length is not None else None,
        **day.events(),
    )


# ------------------------------------------------------------------
# Solar events
# ------------------------------------------------------------------

@sun_router.post("/times", response_model=SunTimesResponse)
async def sun_times(req: SunTimesRequest):
    """
    Sunrise, sunset and twilight times for any location.

    Events the sun never reaches on that date (polar day or night) are null.
    """
    try:
        location = Location.from_time_zone_name(
            name=req.name,
            latitude=req.latitude,
            longitude=req.longitude,
            elevation=req.elevation,
            time_zone_name=req.timezone,
        )
        logger.info(
            f"Sun times request: lat={req.latitude}, lon={req.longitude}, "
            f"elev={req.elevation}, tz={req.timezone}, date={req.date}"
        )
        return build_response(location, req.date)

    except InvalidLocationError as e:
        logger.warning(f"Rejected sun times request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Failed to compute sun times", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@sun_router.get("/default", response_model=SunTimesResponse)
async def default_sun_times(date: Optional[dt.date] = None):
    """
    Sun times for the configured default location.

    Query:
        date: YYYY-MM-DD (default: today in the default location's time zone)
    """
    try:
        location = Location.from_time_zone_name(
            name=DEFAULT_LOCATION_NAME,
            latitude=DEFAULT_LATITUDE,
            longitude=DEFAULT_LONGITUDE,
            elevation=DEFAULT_ELEVATION,
            time_zone_name=DEFAULT_TIMEZONE,
        )
        return build_response(location, date)

    except InvalidLocationError as e:
        # Misconfigured DEFAULT_* environment, not a caller error
        logger.error(f"Invalid default location: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error("Failed to compute default sun times", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/health")
async def health():
    return {"status": "ok"}


# ============================================================================
# Register Routers
# ============================================================================

app.include_router(sun_router)
