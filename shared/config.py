"""Compiler configuration: defaults, validation, and JSON loading."""
import json
from typing import NamedTuple

from layout.constants import CURVE_SEGMENT_COUNT, ARC_SUBSEGMENT_COUNT
from walls.constants import (
    DOOR_MATCH_TOLERANCE, MERGE_EPSILON, PROJECTION_MIN, PROJECTION_MAX,
)
from scene.constants import LIGHT_COLOR, LIGHT_ALPHA, DOOR_STATES, DEFAULT_DOOR_STATE


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class CompilerConfig(NamedTuple):
    door_match_tolerance: float = DOOR_MATCH_TOLERANCE
    merge_epsilon: float = MERGE_EPSILON
    curve_segment_count: int = CURVE_SEGMENT_COUNT
    arc_subsegment_count: int = ARC_SUBSEGMENT_COUNT
    generate_walls: bool = True
    skip_outdoor_walls: bool = True
    projection_min: float = PROJECTION_MIN
    projection_max: float = PROJECTION_MAX
    door_state: str = DEFAULT_DOOR_STATE
    light_color: str = LIGHT_COLOR
    light_alpha: float = LIGHT_ALPHA

    def validate(self) -> "CompilerConfig":
        """Return self, or raise ValueError naming the first bad field."""
        for name in ("door_match_tolerance", "merge_epsilon", "projection_min",
                     "projection_max", "light_alpha"):
            if not _is_number(getattr(self, name)):
                raise ValueError(f"{name} must be a number, got {getattr(self, name)!r}")
        for name in ("curve_segment_count", "arc_subsegment_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        for name in ("generate_walls", "skip_outdoor_walls"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false, got {getattr(self, name)!r}")
        if not isinstance(self.light_color, str):
            raise ValueError(f"light_color must be a string, got {self.light_color!r}")
        if self.door_match_tolerance <= 0:
            raise ValueError(f"door_match_tolerance must be > 0, got {self.door_match_tolerance}")
        if self.merge_epsilon < 0:
            raise ValueError(f"merge_epsilon must be >= 0, got {self.merge_epsilon}")
        if self.curve_segment_count < 3:
            raise ValueError(f"curve_segment_count must be >= 3, got {self.curve_segment_count}")
        if self.arc_subsegment_count < 1:
            raise ValueError(f"arc_subsegment_count must be >= 1, got {self.arc_subsegment_count}")
        if self.projection_min > self.projection_max:
            raise ValueError(
                f"projection_min {self.projection_min} > projection_max {self.projection_max}")
        if self.door_state not in DOOR_STATES:
            raise ValueError(f"door_state must be one of {DOOR_STATES}, got {self.door_state!r}")
        if not 0.0 <= self.light_alpha <= 1.0:
            raise ValueError(f"light_alpha must be in [0, 1], got {self.light_alpha}")
        return self


# camelCase keys of the external configuration block
_KEYS = {
    "doorMatchTolerance": "door_match_tolerance",
    "mergeEpsilon": "merge_epsilon",
    "curveSegmentCount": "curve_segment_count",
    "arcSubsegmentCount": "arc_subsegment_count",
    "generateWalls": "generate_walls",
    "skipOutdoorWalls": "skip_outdoor_walls",
    "projectionMin": "projection_min",
    "projectionMax": "projection_max",
    "doorState": "door_state",
    "lightColor": "light_color",
    "lightAlpha": "light_alpha",
}


def config_from_dict(data: dict) -> CompilerConfig:
    """Build a validated config from a camelCase (or snake_case) dict."""
    fields = {}
    for key, value in data.items():
        name = _KEYS.get(key, key)
        if name not in CompilerConfig._fields:
            raise ValueError(f"Unknown configuration key: {key!r}")
        fields[name] = value
    return CompilerConfig(**fields).validate()


def load_config(path: str) -> CompilerConfig:
    """Read a JSON configuration block from *path*."""
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: configuration must be a JSON object")
    return config_from_dict(data)
