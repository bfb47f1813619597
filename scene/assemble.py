"""Compile a layout into scene records: walls, lights, notes, and journals.

Shapes and doors are normalized in native layout space; everything emitted
here is in output canvas space. Walls are split after transforming so the
door-match tolerance is in canvas units.
"""
import logging
from typing import Optional

from shared.types import (
    LayoutDocument, ShapeRecord, DoorSegment, WallSegment, LightPlacement,
    NotePlacement, JournalEntry, RoomMeta, Transform, SceneOutput,
)
from shared.svg import make_scene_transform
from shared.config import CompilerConfig
from layout.parse import parse_layout
from layout.shapes import normalize_shapes
from layout.doors import extract_doors, transform_doors
from walls.split import split_wall, dedupe_collinear
from scene.rooms import bind_rooms, journal_html
from scene.constants import LIGHT_DIM_FACTOR, LIGHT_BRIGHT_FACTOR, UNKNOWN_ROOM_LABEL

logger = logging.getLogger(__name__)


def build_walls(shapes: list[ShapeRecord], doors: list[DoorSegment],
                transform: Transform, cfg: CompilerConfig) -> list[WallSegment]:
    """Door segments first, then every wall-bearing shape edge split around doors.

    Edges shared by adjacent rooms are emitted once.
    """
    if not cfg.generate_walls:
        return []
    out_doors = transform_doors(doors, transform)
    walls = [WallSegment(d.edge, True, cfg.door_state) for d in out_doors]
    pieces = []
    for shape in shapes:
        if shape.outdoor and cfg.skip_outdoor_walls:
            continue
        for edge in shape.edges:
            pieces.extend(split_wall(transform.apply_edge(edge), out_doors,
                                     cfg.door_match_tolerance, cfg.merge_epsilon,
                                     cfg.projection_min, cfg.projection_max))
    walls.extend(WallSegment(p) for p in dedupe_collinear(pieces, eps=cfg.merge_epsilon))
    return walls


def build_lights(shapes: list[ShapeRecord], transform: Transform,
                 cfg: CompilerConfig) -> list[LightPlacement]:
    """One ambient light per shape, centred on it and sized from its bounding radius."""
    lights = []
    for shape in shapes:
        x, y = transform.apply(*shape.centroid)
        r = transform.scale_length(shape.bounding_radius)
        lights.append(LightPlacement(x, y, r * LIGHT_DIM_FACTOR, r * LIGHT_BRIGHT_FACTOR,
                                     cfg.light_color, cfg.light_alpha))
    return lights


def build_notes(shapes: list[ShapeRecord], bound: list[Optional[RoomMeta]],
                transform: Transform) -> tuple[list[NotePlacement], list[JournalEntry]]:
    """Note placement and journal payload for every shape that has a room."""
    notes, journals = [], []
    for shape, room in zip(shapes, bound):
        if room is None:
            continue
        x, y = transform.apply(*shape.centroid)
        label = room.name or UNKNOWN_ROOM_LABEL
        notes.append(NotePlacement(x, y, room.id, label))
        journals.append(JournalEntry(room.id, label, journal_html(room)))
    return notes, journals


def compile_layout(doc: LayoutDocument, rooms: list[RoomMeta],
                   width: float, height: float,
                   offset: tuple[float, float] = (0.0, 0.0),
                   cfg: CompilerConfig = CompilerConfig()) -> SceneOutput:
    """Compile a parsed layout onto a width x height canvas placed at *offset*."""
    cfg.validate()
    transform = make_scene_transform(doc.view_box, width, height, offset)
    shapes = normalize_shapes(doc.shapes, cfg)
    skipped = len(doc.shapes) - len(shapes)
    if skipped:
        logger.debug("Skipped %d degenerate shape(s)", skipped)
    doors = extract_doors(doc.lines)
    logger.debug("Found %d door segment(s)", len(doors))

    walls = build_walls(shapes, doors, transform, cfg)
    lights = build_lights(shapes, transform, cfg)
    notes, journals = build_notes(shapes, bind_rooms(shapes, rooms), transform)

    n_doors = sum(1 for w in walls if w.is_door)
    if not cfg.generate_walls:
        logger.info("Wall generation disabled, skipping walls.")
    logger.info("Placed %d wall segments + %d doors, %d lights, and %d notes.",
                len(walls) - n_doors, n_doors, len(lights), len(notes))
    return SceneOutput(tuple(walls), tuple(lights), tuple(notes), tuple(journals))


def compile_scene(svg_text: str, rooms: list[RoomMeta],
                  width: float, height: float,
                  offset: tuple[float, float] = (0.0, 0.0),
                  cfg: CompilerConfig = CompilerConfig()) -> SceneOutput:
    """Parse SVG text and compile it. Raises LayoutError for a non-SVG layout."""
    return compile_layout(parse_layout(svg_text), rooms, width, height, offset, cfg)
