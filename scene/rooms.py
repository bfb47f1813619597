"""Room binding (normalized shapes to room metadata) and journal content."""
import html
import json
from typing import Optional

from shared.types import RoomMeta, ShapeRecord
from scene.constants import DEFAULT_ROOM_SIZE, UNKNOWN_ROOM_LABEL


# ============================================================
# Metadata loading
# ============================================================
def _str_tuple(value) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)


def room_meta_from_dict(data: dict) -> RoomMeta:
    """RoomMeta from a layout-source room entry (camelCase keys)."""
    rid = data.get("id")
    return RoomMeta(
        id=None if rid is None else str(rid),
        name=data.get("name") or "",
        purpose=data.get("purpose") or "",
        approximate_size=data.get("approximateSize") or data.get("size"),
        read_aloud=data.get("readAloud"),
        atmosphere=data.get("atmosphere"),
        features=_str_tuple(data.get("features")),
        hazards=_str_tuple(data.get("hazards")),
        interactables=_str_tuple(data.get("interactables")),
    )


def rooms_from_json(data) -> list[RoomMeta]:
    """Room list from a bare JSON list or an outline object with a 'rooms' key."""
    if isinstance(data, dict):
        data = data.get("rooms") or []
    if not isinstance(data, list):
        raise ValueError("Room metadata must be a list or an object with a 'rooms' list")
    return [room_meta_from_dict(r) for r in data]


def load_rooms(path: str) -> list[RoomMeta]:
    with open(path) as f:
        return rooms_from_json(json.load(f))


# ============================================================
# Binding
# ============================================================
def bind_rooms(shapes: list[ShapeRecord], rooms: list[RoomMeta]) -> list[Optional[RoomMeta]]:
    """Room for each shape (aligned with *shapes*), or None if none is left.

    Pass 1 binds shapes whose id matches a room id exactly. Pass 2 hands the
    remaining shapes, in order, the first rooms not yet consumed.
    """
    by_id: dict[str, int] = {}
    for i, r in enumerate(rooms):
        if r.id is not None:
            by_id.setdefault(r.id, i)

    bound: list[Optional[int]] = [None] * len(shapes)
    consumed = set()
    for s_i, shape in enumerate(shapes):
        if shape.id is not None and shape.id in by_id:
            bound[s_i] = by_id[shape.id]
            consumed.add(by_id[shape.id])

    free = (i for i in range(len(rooms)) if i not in consumed)
    for s_i in range(len(shapes)):
        if bound[s_i] is None:
            bound[s_i] = next(free, None)

    return [None if i is None else rooms[i] for i in bound]


# ============================================================
# Journal content
# ============================================================
def _items(values) -> str:
    return "".join(f"<li>{html.escape(v)}</li>" for v in values)


def journal_html(room: RoomMeta) -> str:
    """Journal page HTML for one room."""
    esc = html.escape
    name = room.name or UNKNOWN_ROOM_LABEL
    size = room.approximate_size or DEFAULT_ROOM_SIZE
    parts = [
        f"<h2>{esc(name)}</h2>",
        f"<p><em>{esc(size)} room — {esc(room.purpose)}</em></p>",
    ]
    if room.read_aloud:
        parts.append(
            '<blockquote style="border-left:4px solid #c9a44a;padding:8px 12px;'
            'background:#2a2520;color:#e8d5b5;font-style:italic;margin:12px 0;">\n'
            f"<strong>Read Aloud:</strong><br>{esc(room.read_aloud)}\n</blockquote>")
    if room.atmosphere:
        parts.append(f'<p style="color:#a89070;font-style:italic;">{esc(room.atmosphere)}</p>')
    if room.features:
        parts.append(f"<h3>Notable Features</h3><ul>{_items(room.features)}</ul>")
    if room.hazards:
        parts.append(f'<h3>Hazards</h3><ul style="color:#cc4444;">{_items(room.hazards)}</ul>')
    if room.interactables:
        parts.append(f"<h3>Investigate</h3><ul>{_items(room.interactables)}</ul>")
    # Plain outlines carry only a purpose
    if not (room.read_aloud or room.features or room.hazards or room.interactables):
        parts.append(f"<p><strong>Purpose:</strong> {esc(room.purpose)}</p>")
    return "\n".join(parts)
