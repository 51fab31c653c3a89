"""
Configuration management with environment variable support.

All settings can be overridden via environment variables.
Automatically loads .env file if present.
"""

import os
from pathlib import Path
from typing import Literal
from dotenv import load_dotenv

# Load .env file from project root (one level up from suntimes/)
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Logging configuration
LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = os.getenv("LOG_LEVEL", "INFO")

# Solar disk corrections applied to the geometric zenith (arc minutes)
REFRACTION_ARC_MINUTES: float = float(os.getenv("REFRACTION_ARC_MINUTES", "34.4788"))
SOLAR_RADIUS_ARC_MINUTES: float = float(os.getenv("SOLAR_RADIUS_ARC_MINUTES", "16.0"))

# Polar radius used by the horizon dip model
EARTH_RADIUS_KM: float = 6356.9

# Default observer (served by GET /sun/default)
DEFAULT_LOCATION_NAME: str = os.getenv("DEFAULT_LOCATION_NAME", "Melbourne")
DEFAULT_LATITUDE: float = float(os.getenv("DEFAULT_LATITUDE", "-37.50"))
DEFAULT_LONGITUDE: float = float(os.getenv("DEFAULT_LONGITUDE", "145.01"))
DEFAULT_ELEVATION: float = float(os.getenv("DEFAULT_ELEVATION", "0.0"))  # meters
DEFAULT_TIMEZONE: str = os.getenv("DEFAULT_TIMEZONE", "Australia/Melbourne")
