"""Tests for line and circle tracing."""

import pytest

from gridtrace import Config, TraceSignal, trace_circle, trace_line


@pytest.mark.parametrize("point", [(0, 0), (3, -2), (-7, 11)])
def test_line_to_same_point_is_single_point(point):
    assert trace_line(point, point) == [point]


def test_line_shallow_slope_matches_bresenham_steps():
    assert trace_line((0, 0), (4, 1)) == [(0, 0), (1, 0), (2, 0), (3, 1), (4, 1)]


def test_line_diagonal():
    assert trace_line((0, 0), (3, 3)) == [(0, 0), (1, 1), (2, 2), (3, 3)]


def test_line_steep_and_reversed_directions():
    # Halving -dy toward zero keeps the first step vertical here
    assert trace_line((0, 0), (1, 3)) == [(0, 0), (0, 1), (1, 2), (1, 3)]
    assert trace_line((4, 1), (0, 0)) == [(4, 1), (3, 1), (2, 1), (1, 0), (0, 0)]
    assert trace_line((0, 0), (0, -3)) == [(0, 0), (0, -1), (0, -2), (0, -3)]


def test_line_endpoints_included():
    line = trace_line((2, 5), (-6, 1))
    assert line[0] == (2, 5)
    assert line[-1] == (-6, 1)


def test_line_visitor_sees_every_point_in_order():
    seen = []
    line = trace_line((0, 0), (5, 2), seen.append)
    assert seen == line


def test_line_stop_excludes_stopping_point():
    def stop_at_two(point):
        return TraceSignal.STOP if point[0] == 2 else TraceSignal.CONTINUE

    assert trace_line((0, 0), (5, 0), stop_at_two) == [(0, 0), (1, 0)]


def test_line_special_signal_behaves_like_continue():
    line = trace_line((0, 0), (4, 1), lambda p: TraceSignal.SPECIAL)
    assert line == trace_line((0, 0), (4, 1))


@pytest.mark.parametrize("radius", [0, -5])
def test_circle_non_positive_radius_is_empty(radius):
    calls = []
    assert trace_circle((3, 3), radius, calls.append) == []
    assert calls == []


def test_circle_radius_one_hugs_the_center():
    points = set(trace_circle((0, 0), 1))
    assert {(1, 0), (0, 1), (-1, 0), (0, -1)} <= points
    assert all(max(abs(x), abs(y)) == 1 for x, y in points)


def test_circle_starts_at_angle_zero_and_stays_on_ring():
    points = trace_circle((10, 10), 5)
    assert points[0] == (15, 10)
    for x, y in points:
        distance = ((x - 10) ** 2 + (y - 10) ** 2) ** 0.5
        assert 4 <= distance <= 6


@pytest.mark.parametrize("radius", [1, 2, 3, 7, 12])
def test_circle_has_no_duplicates(radius):
    points = trace_circle((0, 0), radius)
    assert len(points) == len(set(points))


def test_circle_stop_aborts_generation():
    seen = []

    def stop_after_three(point):
        seen.append(point)
        return TraceSignal.STOP if len(seen) == 3 else None

    points = trace_circle((0, 0), 4, stop_after_three)
    assert len(points) == 2
    assert points == seen[:2]


def test_circle_sample_density_follows_config(monkeypatch):
    dense = trace_circle((0, 0), 6)
    monkeypatch.setattr(Config, "CIRCLE_SAMPLES_PER_RADIUS", 1)
    sparse = trace_circle((0, 0), 6)
    assert len(sparse) <= 6
    assert len(sparse) < len(dense)
