"""Tests for configuration management."""

import pytest
import os
from unittest.mock import patch


class TestConfigDefaults:
    """Tests for default configuration values."""

    def test_default_log_level(self):
        """Should default to INFO log level."""
        with patch.dict(os.environ, {}, clear=True):
            from importlib import reload
            import suntimes.config as config
            reload(config)
            assert config.LOG_LEVEL == "INFO"

    def test_default_solar_corrections(self):
        """Should default to 34.4788' refraction and 16' solar radius."""
        with patch.dict(os.environ, {}, clear=True):
            from importlib import reload
            import suntimes.config as config
            reload(config)
            assert config.REFRACTION_ARC_MINUTES == 34.4788
            assert config.SOLAR_RADIUS_ARC_MINUTES == 16.0

    def test_default_location_is_melbourne(self):
        """Should default to the Melbourne location."""
        with patch.dict(os.environ, {}, clear=True):
            from importlib import reload
            import suntimes.config as config
            reload(config)
            assert config.DEFAULT_LOCATION_NAME == "Melbourne"
            assert config.DEFAULT_LATITUDE == -37.50
            assert config.DEFAULT_LONGITUDE == 145.01
            assert config.DEFAULT_ELEVATION == 0.0
            assert config.DEFAULT_TIMEZONE == "Australia/Melbourne"


class TestConfigEnvironmentOverrides:
    """Tests for environment variable overrides."""

    def test_override_log_level(self):
        """Should override LOG_LEVEL from environment."""
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}, clear=True):
            from importlib import reload
            import suntimes.config as config
            reload(config)
            assert config.LOG_LEVEL == "DEBUG"

    def test_override_solar_corrections(self):
        """Should parse refraction and solar radius as floats."""
        env = {
            "REFRACTION_ARC_MINUTES": "34",
            "SOLAR_RADIUS_ARC_MINUTES": "16.293",
        }
        with patch.dict(os.environ, env, clear=True):
            from importlib import reload
            import suntimes.config as config
            reload(config)
            assert config.REFRACTION_ARC_MINUTES == 34.0
            assert config.SOLAR_RADIUS_ARC_MINUTES == 16.293

    def test_override_default_location(self):
        """Should override the default location from environment."""
        env = {
            "DEFAULT_LOCATION_NAME": "Tromso",
            "DEFAULT_LATITUDE": "69.6723",
            "DEFAULT_LONGITUDE": "19.0498",
            "DEFAULT_ELEVATION": "10",
            "DEFAULT_TIMEZONE": "Europe/Oslo",
        }
        with patch.dict(os.environ, env, clear=True):
            from importlib import reload
            import suntimes.config as config
            reload(config)
            assert config.DEFAULT_LOCATION_NAME == "Tromso"
            assert config.DEFAULT_LATITUDE == 69.6723
            assert config.DEFAULT_LONGITUDE == 19.0498
            assert config.DEFAULT_ELEVATION == 10.0
            assert config.DEFAULT_TIMEZONE == "Europe/Oslo"

    def test_invalid_number_raises(self):
        """Should fail loudly on a non-numeric latitude."""
        with patch.dict(os.environ, {"DEFAULT_LATITUDE": "south"}, clear=True):
            from importlib import reload
            import suntimes.config as config
            with pytest.raises(ValueError):
                reload(config)
        with patch.dict(os.environ, {}, clear=True):
            reload(config)


class TestConfigConstants:
    """Tests for hardcoded configuration constants."""

    def test_earth_radius(self):
        """Should use the polar radius for the horizon dip."""
        from suntimes.config import EARTH_RADIUS_KM
        assert EARTH_RADIUS_KM == 6356.9
