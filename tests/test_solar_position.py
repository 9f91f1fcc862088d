"""Tests for sun altitude and azimuth."""

import numpy as np
import pytest

from geosun.utils.constants import OBLIQUITY
from geosun.orbit import subsolar_latitude
from geosun.solar import (
    SolarPosition,
    hour_angle_from_local_time,
    sun_altitude,
    sun_azimuth,
    solar_position,
    sun_path,
)


def _azimuth_difference(a, b):
    """Smallest angle between two azimuths."""
    d = abs(a - b) % 360
    return min(d, 360 - d)


class TestHourAngle:
    """Tests for local time to hour angle conversion."""

    def test_noon(self):
        """Solar noon is hour angle 0."""
        assert hour_angle_from_local_time(12) == 0

    def test_morning_negative(self):
        """Morning hour angles are negative."""
        assert hour_angle_from_local_time(6) == -90
        assert hour_angle_from_local_time(18) == 90

    def test_extrapolates(self):
        """Times outside 0-24 extrapolate linearly."""
        assert hour_angle_from_local_time(25) == 195
        assert hour_angle_from_local_time(-1) == -195

    def test_array_input(self):
        """Test with array input."""
        h = hour_angle_from_local_time(np.array([0, 12, 24]))
        assert np.allclose(h, [-180, 0, 180])


class TestSunAltitude:
    """Tests for sun altitude."""

    def test_equinox_noon_at_40n(self):
        """Noon altitude is 90 - latitude at the equinox."""
        assert np.isclose(sun_altitude(40, 0, 0), 50)

    def test_overhead_sun(self):
        """Sun is at the zenith when latitude equals declination at noon."""
        assert np.isclose(sun_altitude(OBLIQUITY, OBLIQUITY, 0), 90)

    def test_below_horizon_clamped(self):
        """Midnight sun below the horizon reports exactly 0."""
        assert sun_altitude(40, 0, 180) == 0

    def test_horizon_clamp_grid(self):
        """Altitude is never negative, and exactly 0 whenever the sun is down."""
        lat, decl, h = np.meshgrid(
            np.linspace(-90, 90, 19),
            np.linspace(-OBLIQUITY, OBLIQUITY, 7),
            np.linspace(-180, 180, 25),
        )
        alt = sun_altitude(lat, decl, h)

        raw = (np.sin(np.radians(lat)) * np.sin(np.radians(decl))
               + np.cos(np.radians(lat)) * np.cos(np.radians(decl)) * np.cos(np.radians(h)))

        assert np.all(alt >= 0)
        assert np.all(alt[raw < 0] == 0)
        assert np.all(alt <= 90)

    def test_polar_night(self):
        """At 70N on the winter solstice the sun never rises."""
        decl = subsolar_latitude(356)
        hours = np.linspace(-180, 180, 361)
        assert np.all(sun_altitude(70, decl, hours) == 0)

    def test_polar_day(self):
        """At 80N on the summer solstice the sun never sets."""
        hours = np.linspace(-180, 180, 361)
        assert np.all(sun_altitude(80, OBLIQUITY, hours) > 0)

    def test_scalar_returns_float(self):
        """Scalar inputs give a Python float."""
        assert isinstance(sun_altitude(40, 10, 30), float)


class TestSunAzimuth:
    """Tests for sun azimuth."""

    def test_noon_due_south(self):
        """Sun is due south at noon north of the subsolar point."""
        assert _azimuth_difference(sun_azimuth(40, 0, 0), 180) < 0.01

    def test_noon_due_north(self):
        """Sun is due north at noon south of the subsolar point."""
        assert _azimuth_difference(sun_azimuth(10, OBLIQUITY, 0), 0) < 0.01
        assert _azimuth_difference(sun_azimuth(-30, 0, 0), 0) < 0.01

    def test_equinox_sunrise_east(self):
        """At the equator on the equinox the sun rises due east and sets due west."""
        assert np.isclose(sun_azimuth(0, 0, -90), 90, atol=1e-6)
        assert np.isclose(sun_azimuth(0, 0, 90), 270, atol=1e-6)

    def test_morning_in_east(self):
        """Morning azimuths are in the eastern half of the sky."""
        az = sun_azimuth(40, 10, -60)
        assert 0 < az < 180

    def test_afternoon_mirror(self):
        """Afternoon azimuth mirrors the morning azimuth."""
        for h in [15, 45, 75]:
            morning = sun_azimuth(40, 10, -h)
            afternoon = sun_azimuth(40, 10, h)
            assert np.isclose(morning + afternoon, 360)

    def test_zenith_guard(self):
        """Azimuth is 0 when the sun is at the zenith."""
        assert sun_azimuth(20, 20, 0) == 0

    def test_range(self):
        """Azimuth is always within [0, 360)."""
        lat, h = np.meshgrid(np.linspace(-80, 80, 17), np.linspace(-180, 180, 37))
        az = sun_azimuth(lat, 15, h)
        assert np.all(az >= 0)
        assert np.all(az < 360)

    def test_array_matches_scalar(self):
        """Vectorised results agree with scalar calls."""
        hours = np.array([-75.0, -30.0, 10.0, 60.0])
        az = sun_azimuth(35, -10, hours)
        for h, a in zip(hours, az):
            assert np.isclose(sun_azimuth(35, -10, h), a)


class TestSolarPosition:
    """Tests for the combined position helpers."""

    def test_solar_position(self):
        """SolarPosition bundles altitude and azimuth."""
        pos = solar_position(40, 0, 0)
        assert isinstance(pos, SolarPosition)
        assert np.isclose(pos.altitude_deg, 50)
        assert _azimuth_difference(pos.azimuth_deg, 180) < 0.01

    def test_solar_position_immutable(self):
        """SolarPosition is frozen."""
        pos = solar_position(40, 0, 0)
        with pytest.raises(AttributeError):
            pos.altitude_deg = 10

    def test_sun_path(self):
        """Sun path peaks at noon."""
        altitude, azimuth = sun_path(40, 0, [6, 9, 12, 15, 18])
        assert altitude.shape == (5,)
        assert azimuth.shape == (5,)
        assert np.argmax(altitude) == 2
        assert np.isclose(altitude[2], 50)

    def test_sun_path_symmetric(self):
        """Morning and afternoon altitudes match."""
        altitude, _ = sun_path(30, 15, [8, 16])
        assert np.isclose(altitude[0], altitude[1])
