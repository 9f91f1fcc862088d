"""
Integration tests for the end-to-end solar scene.

Runs the full chain from configuration to shadow and checks the
combined results against known cases.
"""

import json

import numpy as np
import pytest
import yaml

from geosun import SolarScene, SceneConfig
from geosun.orbit import Season
from geosun.utils.config import ObserverConfig


def _circular_difference(a, b):
    return abs((a - b + 180.0) % 360.0 - 180.0)


class TestSolarScene:
    """Tests for SolarScene construction and runs."""

    def test_beijing_summer_noon(self):
        """Noon sun near the solstice in Beijing."""
        result = SolarScene({
            "observer": {"name": "Beijing", "latitude": 39.9, "longitude": 116.4},
            "time": {"day_of_year": 173, "local_hour": 12.0},
        }).run()

        assert np.isclose(result.subsolar_latitude, 23.43, atol=0.01)
        assert np.isclose(result.sun.altitude_deg, 73.53, atol=0.01)
        assert _circular_difference(result.sun.azimuth_deg, 180.0) < 0.01
        assert result.sun_direction == "S"
        assert np.isclose(result.shadow.length, 0.2956, atol=0.001)
        assert _circular_difference(result.shadow.direction_deg, 0.0) < 0.01
        assert result.shadow_direction_label == "N"
        assert result.season is Season.SUMMER
        assert result.is_daytime
        assert result.day_length > 14

    def test_sun_position_3d(self):
        """Sun point lies at the configured distance above the ground."""
        result = SolarScene({"orbit": {"sun_distance": 5.0}}).run()
        x, y, z = result.sun_position_3d
        assert np.isclose(np.sqrt(x**2 + y**2 + z**2), 5.0)
        assert y > 0
        # Southern sun sits at positive z
        assert z > 0

    def test_earth_position_on_orbit(self):
        """Earth lies on the configured orbit."""
        result = SolarScene({"orbit": {"radius": 6.0}}).run()
        x, y, z = result.earth_position
        assert np.isclose(np.hypot(x, z), 6.0)
        assert y == 0

    def test_city_overrides_location(self):
        """A configured city replaces latitude and longitude."""
        scene = SolarScene({"observer": {"city": "sydney", "latitude": 0.0}})
        result = scene.run()
        assert result.latitude == -33.9
        assert result.longitude == 151.2
        assert result.config.observer.name == "Sydney"

    def test_unknown_city(self):
        """An unknown city raises KeyError."""
        with pytest.raises(KeyError):
            SolarScene({"observer": {"city": "Atlantis"}})

    def test_invalid_config_type(self):
        """Unsupported config types raise TypeError."""
        with pytest.raises(TypeError):
            SolarScene(42)

    def test_accepts_config_object(self):
        """SceneConfig instances are copied, not shared."""
        config = SceneConfig(observer=ObserverConfig(latitude=0.0))
        scene = SolarScene(config)
        assert scene.config == config
        assert scene.config is not config

    def test_city_leaves_caller_config_unchanged(self):
        """A city lookup fills the scene's copy only."""
        config = SceneConfig(observer=ObserverConfig(city="Sydney"))
        result = SolarScene(config).run()
        assert result.latitude == -33.9
        assert config.observer.latitude == 39.9
        assert config.observer.name == "Beijing"

    def test_validation_warning_logged(self, caplog):
        """Invalid settings are logged, not raised."""
        with caplog.at_level("WARNING"):
            SolarScene({"observer": {"latitude": 95.0}})
        assert "Latitude must be between" in caplog.text


class TestPolarScenes:
    """Tests for polar day and night."""

    def test_polar_night(self):
        """Arctic winter noon: sun below the horizon all day."""
        result = SolarScene({
            "observer": {"latitude": 70.0},
            "time": {"day_of_year": 356, "local_hour": 12.0},
        }).run()

        assert result.sun.altitude_deg == 0.0
        assert not result.shadow.is_finite
        assert result.display_shadow_length == 10.0
        assert result.sunrise_sunset is None
        assert result.day_length == 0.0
        assert not result.is_daytime
        assert result.to_dict()["shadow"]["length"] is None

    def test_polar_day(self):
        """Arctic summer midnight: sun still up."""
        result = SolarScene.quick(80.0, 173, 0.0)
        assert result.sun.altitude_deg > 0
        assert result.day_length == 24.0
        assert result.is_daytime
        assert result.sunrise_sunset is None

    def test_quick_keeps_infinite_shadow(self):
        """quick() applies no display limit."""
        result = SolarScene.quick(0.0, 80, 6.0)
        assert not result.shadow.is_finite
        assert result.display_shadow_length is None

    def test_non_positive_display_limit(self, caplog):
        """An invalid display limit is logged and the shadow left unbounded."""
        with caplog.at_level("WARNING"):
            scene = SolarScene({
                "observer": {"latitude": 70.0},
                "time": {"day_of_year": 356},
                "shadow": {"display_limit": 0},
            })
        assert "display limit must be positive" in caplog.text
        result = scene.run()
        assert not result.shadow.is_finite
        assert result.display_shadow_length is None

    def test_non_positive_display_limit_finite_shadow(self):
        """A finite shadow is reported at full length."""
        result = SolarScene({"shadow": {"display_limit": -5.0}}).run()
        assert result.display_shadow_length == result.shadow.length


class TestSceneOutput:
    """Tests for saving scene results."""

    def test_to_dict_sections(self):
        """Result dictionary has all sections."""
        data = SolarScene().run().to_dict()
        for key in ("scene", "observer", "time", "orbit", "sun", "shadow", "daylight"):
            assert key in data
        assert data["time"]["date"] == "Jun 22"
        assert data["orbit"]["season"] == Season.SUMMER.value

    def test_save_json(self, tmp_path):
        """JSON output contains metadata and results."""
        scene = SolarScene()
        path = scene.save_result(scene.run(), tmp_path / "result.json", format="json")
        with open(path) as f:
            document = json.load(f)
        assert document["metadata"]["software"] == "geosun"
        assert np.isclose(document["results"]["sun"]["altitude"], 73.53, atol=0.01)

    def test_save_yaml_polar_night(self, tmp_path):
        """YAML output handles a missing shadow."""
        scene = SolarScene({"observer": {"latitude": 70.0}, "time": {"day_of_year": 356}})
        path = scene.save_result(scene.run(), tmp_path / "result.yaml", format="yaml")
        with open(path) as f:
            document = yaml.safe_load(f)
        assert document["results"]["shadow"]["length"] is None
        assert document["results"]["daylight"]["sunrise"] is None

    def test_save_unsupported_format(self, tmp_path):
        """Unknown formats raise ValueError."""
        scene = SolarScene()
        with pytest.raises(ValueError):
            scene.save_result(scene.run(), tmp_path / "result.csv", format="csv")
