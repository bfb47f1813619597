"""Tests for layout/parse.py and shared/svg.py."""
import logging
import pytest
from shared.types import Rect, Circle, PathShape, Polygon, Line, LayoutDocument
from shared.svg import (
    local_tag, parse_number, parse_points, parse_view_box, make_scene_transform,
)
from layout.parse import parse_layout, LayoutError
from layout.constants import DEFAULT_NATIVE_SIZE


# ============================================================
# Attribute helpers
# ============================================================

class TestSvgHelpers:
    def test_local_tag(self):
        assert local_tag("{http://www.w3.org/2000/svg}rect") == "rect"
        assert local_tag("rect") == "rect"

    @pytest.mark.parametrize("raw,expected", [
        ("12.5", 12.5), (" 3 ", 3.0), (None, 0.0), ("", 0.0), ("10px", 0.0),
    ])
    def test_parse_number(self, raw, expected):
        assert parse_number(raw) == expected

    def test_parse_points_ignores_odd_trailing_value(self):
        assert parse_points("0,0 10,0 10,10 5") == [(0, 0), (10, 0), (10, 10)]

    @pytest.mark.parametrize("raw,expected", [
        ("0 0 100 50", (0, 0, 100, 50)),
        ("-10,-10,200,200", (-10, -10, 200, 200)),
        (None, None), ("", None), ("0 0 100", None),
        ("0 0 a 100", None), ("0 0 0 100", None),
    ])
    def test_parse_view_box(self, raw, expected):
        assert parse_view_box(raw) == expected


class TestMakeSceneTransform:
    def test_scales_view_box_to_canvas(self):
        tf = make_scene_transform((0, 0, 100, 50), 1000, 1000)
        assert (tf.scale_x, tf.scale_y) == (10, 20)
        assert tf.apply(100, 50) == (1000, 1000)

    def test_default_native_size(self):
        tf = make_scene_transform(None, 2000, 500)
        assert tf.apply(1000, 1000) == (2000, 500)

    def test_native_size_default_and_override(self):
        assert make_scene_transform(None, 1000, 1000).scale_x == 1000 / DEFAULT_NATIVE_SIZE
        assert make_scene_transform(None, 1000, 1000, native_size=500).scale_x == 2

    def test_view_box_origin_lands_on_offset(self):
        tf = make_scene_transform((10, 20, 100, 100), 1000, 1000, offset=(50, 60))
        assert tf.apply(10, 20) == pytest.approx((50, 60))
        assert tf.apply(110, 120) == pytest.approx((1050, 1060))

    def test_scale_length_uses_larger_axis(self):
        tf = make_scene_transform((0, 0, 100, 50), 1000, 1000)
        assert tf.scale_length(2) == 40


# ============================================================
# Layout parsing
# ============================================================

class TestParseLayout:
    def test_returns_document(self, layout_doc):
        assert isinstance(layout_doc, LayoutDocument)
        assert layout_doc.view_box == (0, 0, 100, 100)

    def test_shapes_and_lines(self, layout_doc):
        assert len(layout_doc.shapes) == 4
        assert layout_doc.lines == (Line(40, 15, 40, 25),)

    def test_attributes(self, layout_doc):
        r1, r2, circle, path = layout_doc.shapes
        assert r1 == Rect(10, 10, 30, 20, "1", False)
        assert r2.room_id == "2"
        assert circle == Circle(50, 70, 10, None, True)
        assert path == PathShape("M10,40 L30,40 L30,60 Z")

    def test_kind_grouped_order(self):
        doc = parse_layout(
            '<svg><path d="M0,0 L1,0 L1,1 Z"/><polygon points="0,0 1,0 1,1"/>'
            '<circle cx="0" cy="0" r="1"/><rect x="0" y="0" width="1" height="1"/></svg>')
        assert [type(s) for s in doc.shapes] == [Rect, Circle, Polygon, PathShape]

    def test_document_order_within_kind(self):
        doc = parse_layout('<svg><rect width="1" height="1" data-room-id="a"/>'
                           '<g><rect width="1" height="1" data-room-id="b"/></g>'
                           '<rect width="1" height="1" data-room-id="c"/></svg>')
        assert [s.room_id for s in doc.shapes] == ["a", "b", "c"]

    def test_missing_attributes_read_as_zero(self):
        doc = parse_layout('<svg><rect x="5"/><line x2="3"/></svg>')
        assert doc.shapes == (Rect(5, 0, 0, 0),)
        assert doc.lines == (Line(0, 0, 3, 0),)

    def test_outdoor_only_when_true(self):
        doc = parse_layout('<svg><circle r="1" data-outdoor="false"/>'
                           '<circle r="1" data-outdoor="true"/></svg>')
        assert [s.outdoor for s in doc.shapes] == [False, True]

    def test_empty_room_id_is_none(self):
        doc = parse_layout('<svg><circle r="1" data-room-id=""/></svg>')
        assert doc.shapes[0].room_id is None

    def test_elements_without_geometry_skipped(self):
        doc = parse_layout('<svg><polygon/><path/><path d=""/></svg>')
        assert doc.shapes == ()

    def test_no_namespace_and_no_view_box(self):
        doc = parse_layout('<svg><rect width="2" height="2"/></svg>')
        assert doc.view_box is None

    def test_unusable_view_box_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="layout.parse"):
            doc = parse_layout('<svg viewBox="0 0 0 0"/>')
        assert doc.view_box is None
        assert "viewBox" in caplog.text


class TestParseErrors:
    def test_non_svg_root(self):
        with pytest.raises(LayoutError, match="expected <svg>"):
            parse_layout("<html><rect/></html>")

    def test_malformed_xml(self):
        with pytest.raises(LayoutError):
            parse_layout("<svg><rect></svg>")

    def test_layout_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_layout("not xml at all")
