"""
Configuration file support for geosun scenes.

Provides YAML and JSON loading and validation of the inputs for an
end-to-end sun/shadow scene. The engine constants (obliquity, compass
sectors) are not configurable; only the scenario is.

Usage
-----
>>> from geosun.utils.config import load_config, SceneConfig
>>> config = load_config("beijing_solstice.yaml")
>>> print(config.observer.latitude)
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, List, Optional, Any, Union

import yaml

from geosun.utils.constants import ORBIT_RADIUS

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "yaml")


@dataclass
class ObserverConfig:
    """Observer location."""

    name: str = "Beijing"
    latitude: float = 39.9  # deg, north positive
    longitude: float = 116.4  # deg, east positive
    city: Optional[str] = None  # If set, overrides latitude/longitude


@dataclass
class TimeConfig:
    """Date and local solar time."""

    day_of_year: int = 173  # Near the summer solstice
    local_hour: float = 12.0  # Local solar time, 12 = noon


@dataclass
class ShadowConfig:
    """Shadow-casting object."""

    object_height: float = 1.0
    display_limit: Optional[float] = 10.0  # None or <= 0 keeps infinite shadows


@dataclass
class OrbitConfig:
    """Scene scale for orbital and sky positions."""

    radius: float = ORBIT_RADIUS
    sun_distance: float = 5.0


@dataclass
class OutputConfig:
    """Output configuration."""

    format: str = "json"  # json, yaml
    path: Optional[str] = None


@dataclass
class SceneConfig:
    """Complete scene configuration."""

    name: str = "unnamed_scene"
    description: str = ""

    observer: ObserverConfig = field(default_factory=ObserverConfig)
    time: TimeConfig = field(default_factory=TimeConfig)
    shadow: ShadowConfig = field(default_factory=ShadowConfig)
    orbit: OrbitConfig = field(default_factory=OrbitConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SceneConfig":
        """Create configuration from a (possibly partial) dictionary."""
        return _dict_to_config(data)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "SceneConfig":
        """Load configuration from a YAML file."""
        with open(path) as f:
            return _dict_to_config(yaml.safe_load(f) or {})

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "SceneConfig":
        """Load configuration from a JSON file."""
        with open(path) as f:
            return _dict_to_config(json.load(f))

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        with open(path, 'w') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_json(self, path: Union[str, Path], indent: int = 2) -> None:
        """Save configuration to JSON file."""
        path = Path(path)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=indent)

    def validate(self) -> List[str]:
        """Validate configuration parameters.

        Returns:
            List of validation error messages (empty if valid)
        """
        return validate_config(self)


def _dict_to_config(data: Dict[str, Any]) -> SceneConfig:
    """Convert dictionary to SceneConfig."""
    config = SceneConfig(
        name=data.get('name', 'unnamed_scene'),
        description=data.get('description', ''),
    )

    if 'observer' in data:
        config.observer = ObserverConfig(**data['observer'])
    if 'time' in data:
        config.time = TimeConfig(**data['time'])
    if 'shadow' in data:
        config.shadow = ShadowConfig(**data['shadow'])
    if 'orbit' in data:
        config.orbit = OrbitConfig(**data['orbit'])
    if 'output' in data:
        config.output = OutputConfig(**data['output'])

    return config


def load_config(path: Union[str, Path]) -> SceneConfig:
    """
    Load scene configuration from YAML or JSON file.

    Parameters
    ----------
    path : str or Path
        Path to configuration file (.yaml, .yml, or .json)

    Returns
    -------
    config : SceneConfig
        Loaded configuration

    Raises
    ------
    FileNotFoundError
        If configuration file doesn't exist
    ValueError
        If file format is not supported
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in ('.yaml', '.yml'):
        config = SceneConfig.from_yaml(path)
    elif suffix == '.json':
        config = SceneConfig.from_json(path)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Use .yaml, .yml, or .json")

    logger.info(f"Loaded scene configuration '{config.name}' from {path}")
    return config


def create_default_config(path: Union[str, Path] = "scene_config.yaml") -> SceneConfig:
    """
    Create and save a default configuration file.

    Parameters
    ----------
    path : str or Path
        Output path for configuration file

    Returns
    -------
    config : SceneConfig
        Default configuration
    """
    config = SceneConfig(
        name="default_scene",
        description="Noon shadow in Beijing near the summer solstice",
    )

    path = Path(path)
    if path.suffix.lower() in ('.yaml', '.yml'):
        config.to_yaml(path)
    else:
        config.to_json(path)

    logger.info(f"Saved default configuration to {path}")
    return config


def validate_config(config: SceneConfig) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Parameters
    ----------
    config : SceneConfig
        Configuration to validate

    Returns
    -------
    issues : list of str
        List of validation issues (empty if valid)
    """
    issues = []

    # Observer validation
    if not -90 <= config.observer.latitude <= 90:
        issues.append("Latitude must be between -90 and 90 degrees")
    if not -180 <= config.observer.longitude <= 180:
        issues.append("Longitude must be between -180 and 180 degrees")

    # Time validation
    if not 1 <= config.time.day_of_year <= 365:
        issues.append("Day of year must be between 1 and 365")
    if not 0 <= config.time.local_hour <= 24:
        issues.append("Local hour must be between 0 and 24")

    # Shadow validation
    if config.shadow.object_height <= 0:
        issues.append("Object height must be positive")
    if config.shadow.display_limit is not None and config.shadow.display_limit <= 0:
        issues.append("Shadow display limit must be positive")

    # Scene scale validation
    if config.orbit.radius <= 0:
        issues.append("Orbit radius must be positive")
    if config.orbit.sun_distance <= 0:
        issues.append("Sun distance must be positive")

    # Output validation
    if config.output.format not in OUTPUT_FORMATS:
        issues.append(f"Output format must be one of {', '.join(OUTPUT_FORMATS)}")

    return issues
