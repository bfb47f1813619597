"""Shared types, geometry, SVG helpers, and compiler configuration."""

from .types import (
    Point, Edge, Rect, Circle, Ellipse, Polygon, PathShape, Line, Primitive,
    LayoutDocument, ShapeRecord, DoorSegment, WallSegment, LightPlacement,
    RoomMeta, NotePlacement, JournalEntry, Transform, SceneOutput,
)
from .geometry import (
    GeometryError,
    lerp, dist, perp_distance, project_param, point_on_segment,
    closed_edges, ellipse_poly, mean_point, max_distance, loop_length, is_closed_loop,
)
from .svg import local_tag, parse_number, parse_points, parse_view_box, make_scene_transform
from .config import CompilerConfig, config_from_dict, load_config
