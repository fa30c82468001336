"""Tests for field-of-view ray casting."""

from gridtrace import Config, TraceSignal, trace_fov, trace_line


def test_center_is_offered_first():
    calls = []
    trace_fov((4, 4), 3, calls.append)
    assert calls[0] == (4, 4)


def test_stop_on_center_casts_no_rays():
    calls = []

    def stop_everything(point):
        calls.append(point)
        return TraceSignal.STOP

    assert trace_fov((1, 1), 5, stop_everything) == []
    assert calls == [(1, 1)]


def test_zero_radius_sees_only_center():
    assert trace_fov((2, 3), 0) == [(2, 3)]


def test_open_field_reaches_ray_endpoints_without_duplicates():
    points = trace_fov((0, 0), 4)
    assert points[0] == (0, 0)
    assert len(points) == len(set(points))
    for endpoint in [(4, 0), (0, 4), (-4, 0), (0, -4)]:
        assert endpoint in points
    # Every ray is a subset of the result
    assert set(trace_line((0, 0), (4, 0))) <= set(points)


def test_each_new_point_offered_once_when_nothing_blocks():
    calls = []
    points = trace_fov((0, 0), 6, calls.append)
    assert calls == points


def test_occluder_blocks_cells_behind_it():
    blocked = {(1, 0)}
    offers = []

    def visitor(point):
        offers.append(point)
        return TraceSignal.STOP if point in blocked else TraceSignal.CONTINUE

    points = trace_fov((0, 0), 3, visitor)
    # The occluder is offered but not recorded, so later rays re-offer it
    assert (1, 0) not in points
    assert offers.count((1, 0)) > 1
    assert (2, 0) not in points
    assert (3, 0) not in points
    # Rays in other directions are unaffected
    assert (-3, 0) in points
    assert (0, 3) in points


def test_ray_density_follows_config(monkeypatch):
    dense = trace_fov((0, 0), 8)
    monkeypatch.setattr(Config, "FOV_RAYS_PER_RADIUS", 1)
    sparse = trace_fov((0, 0), 8)
    assert len(sparse) < len(dense)
    assert set(sparse) <= set(dense)
