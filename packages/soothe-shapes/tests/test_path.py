"""Tests for Path measurement, trimming and transforms."""

import math

import pytest
from soothe_shapes import Path, rect


def _close(a, b, tol=1e-9):
    return abs(a[0] - b[0]) < tol and abs(a[1] - b[1]) < tol


class TestMeasure:
    def test_open_length(self):
        p = Path.of([(0, 0), (3, 4), (3, 10)])
        assert p.length == pytest.approx(11.0)

    def test_closed_length_includes_closing_segment(self):
        assert rect(0, 0, 10, 10).length == pytest.approx(40.0)

    def test_bounds(self):
        assert Path.of([(2, 5), (-1, 3), (4, -2)]).bounds == (-1.0, -2.0, 4.0, 5.0)

    def test_empty(self):
        p = Path.empty()
        assert p.is_empty
        assert p.length == 0.0
        assert p.bounds == (0.0, 0.0, 0.0, 0.0)
        with pytest.raises(ValueError):
            p.point_at(0.5)

    def test_point_at(self):
        square = rect(0, 0, 10, 10)
        assert _close(square.point_at(0.0), (0, 0))
        assert _close(square.point_at(0.5), (10, 10))
        assert _close(square.point_at(0.125), (5, 0))


class TestTrim:
    def test_first_quarter_of_square(self):
        part = rect(0, 0, 10, 10).trim(0.0, 0.25)
        assert not part.closed
        assert part.length == pytest.approx(10.0)
        assert _close(part.points[0], (0, 0))
        assert _close(part.points[-1], (10, 0))

    def test_trim_across_corner(self):
        part = rect(0, 0, 10, 10).trim(0.125, 0.375)
        assert [tuple(round(v, 9) for v in p) for p in part.points] == [
            (5.0, 0.0),
            (10.0, 0.0),
            (10.0, 5.0),
        ]

    def test_trim_between_corners_has_no_repeated_points(self):
        part = rect(0, 0, 10, 10).trim(0.25, 0.75)
        assert [tuple(round(v, 9) for v in p) for p in part.points] == [
            (10.0, 0.0),
            (10.0, 10.0),
            (0.0, 10.0),
        ]
        assert all(a != b for a, b in zip(part.points, part.points[1:]))

    def test_trim_reaches_closing_segment(self):
        part = rect(0, 0, 10, 10).trim(0.75, 1.0)
        assert part.length == pytest.approx(10.0)
        assert _close(part.points[-1], (0, 0))

    def test_full_trim_keeps_length(self):
        square = rect(0, 0, 10, 10)
        assert square.trim(0.0, 1.0).length == pytest.approx(square.length)

    @pytest.mark.parametrize("start,end", [(0.0, 0.0), (0.6, 0.4), (0.5, 0.5)])
    def test_empty_when_end_not_after_start(self, start, end):
        assert rect(0, 0, 10, 10).trim(start, end).is_empty

    def test_fractions_are_clamped(self):
        square = rect(0, 0, 10, 10)
        assert square.trim(-1.0, 2.0).length == pytest.approx(40.0)

    def test_length_grows_with_end(self):
        square = rect(0, 0, 10, 10)
        lengths = [square.trim(0.0, i / 20).length for i in range(21)]
        assert lengths == sorted(lengths)
        for i, length in enumerate(lengths):
            assert length == pytest.approx(40.0 * i / 20)

    def test_tiny_trim_has_two_points(self):
        part = Path.of([(0, 0), (100, 0)]).trim(0.5, 0.5 + 1e-12)
        assert len(part.points) == 2


class TestTransforms:
    def test_translate(self):
        p = Path.of([(0, 0), (1, 2)], closed=True).translate(3, -1)
        assert p.points == ((3.0, -1.0), (4.0, 1.0))
        assert p.closed

    def test_scale_about_origin(self):
        p = Path.of([(2, 2)]).scale(2, origin=(1, 1))
        assert p.points == ((3.0, 3.0),)

    def test_rotate_is_clockwise_on_screen(self):
        """Positive degrees turn 3 o'clock toward 6 o'clock (y down)."""
        p = Path.of([(1, 0)]).rotate(90)
        assert _close(p.points[0], (0, 1))

    def test_rotate_about_center(self):
        p = Path.of([(2, 1)]).rotate(180, origin=(1, 1))
        assert _close(p.points[0], (0, 1))

    def test_zero_rotation_returns_same_path(self):
        p = Path.of([(1, 2)])
        assert p.rotate(0) is p

    def test_transforms_do_not_mutate(self):
        p = Path.of([(1, 1)])
        p.translate(5, 5)
        p.rotate(45)
        assert p.points == ((1.0, 1.0),)

    def test_rotate_preserves_length(self):
        square = rect(0, 0, 10, 10)
        assert square.rotate(33, (5, 5)).length == pytest.approx(square.length)
        assert math.isclose(square.scale(2).length, 80.0)
