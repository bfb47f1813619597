"""Tests for layout/shapes.py shape normalization."""
import math
import pytest
from shared.types import Rect, Circle, Ellipse, Polygon, PathShape, Line, Edge
from shared.geometry import is_closed_loop, loop_length
from shared.config import CompilerConfig
from layout.shapes import normalize_shape, normalize_shapes


class TestRect:
    def test_four_edges_perimeter_40(self):
        rec = normalize_shape(Rect(0, 0, 10, 10))
        assert len(rec.edges) == 4
        assert loop_length(rec.edges) == pytest.approx(40)

    def test_clockwise_from_top_left(self):
        rec = normalize_shape(Rect(1, 2, 4, 3))
        assert rec.edges == (
            Edge(1, 2, 5, 2), Edge(5, 2, 5, 5), Edge(5, 5, 1, 5), Edge(1, 5, 1, 2),
        )
        assert is_closed_loop(rec.edges)

    def test_centroid_and_radius(self):
        rec = normalize_shape(Rect(10, 10, 30, 20))
        assert rec.kind == "rect"
        assert rec.centroid == (25, 20)
        assert rec.bounding_radius == 15

    @pytest.mark.parametrize("w,h", [(0, 10), (10, 0), (0, 0)])
    def test_zero_size_dropped(self, w, h):
        assert normalize_shape(Rect(0, 0, w, h)) is None

    def test_negative_size_radius_positive(self):
        rec = normalize_shape(Rect(10, 10, -4, -6))
        assert rec.centroid == (8, 7)
        assert rec.bounding_radius == 3
        assert loop_length(rec.edges) == pytest.approx(20)

    def test_id_and_outdoor_carried(self):
        rec = normalize_shape(Rect(0, 0, 1, 1, room_id="7", outdoor=True))
        assert rec.id == "7"
        assert rec.outdoor is True


class TestCircleEllipse:
    @pytest.mark.parametrize("r", [50, 120, 1000])
    def test_perimeter_within_one_percent(self, r):
        rec = normalize_shape(Circle(0, 0, r))
        assert len(rec.edges) == 24
        assert loop_length(rec.edges) == pytest.approx(2 * math.pi * r, rel=0.01)

    def test_loop_closes_exactly(self):
        rec = normalize_shape(Circle(3, 4, 50))
        assert rec.edges[-1].end == rec.edges[0].start
        assert is_closed_loop(rec.edges, eps=0)

    def test_circle_record(self):
        rec = normalize_shape(Circle(3, 4, 50))
        assert rec.kind == "circle"
        assert rec.centroid == (3, 4)
        assert rec.bounding_radius == 50

    def test_ellipse_radius_is_larger_axis(self):
        rec = normalize_shape(Ellipse(0, 0, 20, 35))
        assert rec.kind == "ellipse"
        assert rec.bounding_radius == 35

    def test_negative_radius_positive(self):
        assert normalize_shape(Circle(0, 0, -5)).bounding_radius == 5
        assert normalize_shape(Ellipse(0, 0, -8, 3)).bounding_radius == 8

    def test_segment_count_from_config(self):
        rec = normalize_shape(Circle(0, 0, 10), CompilerConfig(curve_segment_count=12))
        assert len(rec.edges) == 12

    def test_zero_radius_dropped(self):
        assert normalize_shape(Circle(0, 0, 0)) is None
        assert normalize_shape(Ellipse(0, 0, 5, 0)) is None
        assert normalize_shape(Ellipse(0, 0, 0, 5)) is None


class TestPolygon:
    def test_square(self):
        rec = normalize_shape(Polygon(((0, 0), (10, 0), (10, 10), (0, 10))))
        assert rec.kind == "polygon"
        assert len(rec.edges) == 4
        assert is_closed_loop(rec.edges)
        assert rec.centroid == pytest.approx((5, 5))
        assert rec.bounding_radius == pytest.approx(math.sqrt(50))

    def test_vertex_mean_centroid(self):
        # mean of vertices, not area centroid
        rec = normalize_shape(Polygon(((0, 0), (6, 0), (6, 3), (0, 3), (0, 1.5))))
        assert rec.centroid == pytest.approx((2.4, 1.5))

    def test_fewer_than_three_points_dropped(self):
        assert normalize_shape(Polygon(((0, 0), (1, 1)))) is None


class TestPath:
    def test_triangle(self):
        rec = normalize_shape(PathShape("M0,0 L10,0 L10,10 Z"))
        assert rec.kind == "path"
        assert len(rec.edges) == 3
        assert rec.edges[2].end == (0, 0)

    def test_centroid_is_mean_of_edge_midpoints(self):
        rec = normalize_shape(PathShape("M0,0 L10,0 L10,10 Z"))
        # midpoints (5,0), (10,5), (5,5)
        assert rec.centroid == pytest.approx((20/3, 10/3))
        assert rec.bounding_radius == pytest.approx(math.hypot(20/3, 10/3))

    def test_arc_steps_from_config(self):
        rec = normalize_shape(PathShape("M0,0 A5,5 0 0 1 10,0 Z"),
                              CompilerConfig(arc_subsegment_count=3))
        assert len(rec.edges) == 4

    def test_no_edges_dropped(self):
        assert normalize_shape(PathShape("M5,5")) is None


class TestDispatch:
    def test_rejects_non_shape(self):
        with pytest.raises(TypeError):
            normalize_shape(Line(0, 0, 1, 1))

    def test_normalize_shapes_keeps_order_and_drops_degenerate(self):
        recs = normalize_shapes([
            Circle(0, 0, 5), Rect(0, 0, 0, 5), PathShape("M0,0 L1,0 L1,1 Z"),
        ])
        assert [r.kind for r in recs] == ["circle", "path"]
