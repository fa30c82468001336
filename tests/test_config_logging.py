"""Tests for configuration and debug output."""

import contextlib
import io

import pytest

from gridtrace import Cell, Config, Grid, find_path
from gridtrace.logging_utils import (
    LOG_TAG_ERROR,
    LOG_TAG_SUCCESS,
    LOG_TAG_TRACE,
    Color,
    colored,
)
from gridtrace.tracer import trace_fov


def test_config_defaults_validate():
    Config.validate()
    assert "FOV Rays / Radius" in Config.display()


@pytest.mark.parametrize(
    "attribute,value",
    [
        ("FOV_RAYS_PER_RADIUS", 0),
        ("CIRCLE_SAMPLES_PER_RADIUS", -1),
        ("DEFAULT_FOV_RADIUS", -3),
    ],
)
def test_config_validate_rejects_bad_values(monkeypatch, attribute, value):
    monkeypatch.setattr(Config, attribute, value)
    with pytest.raises(ValueError):
        Config.validate()


def test_colored_respects_no_color(monkeypatch):
    monkeypatch.setenv("GRIDTRACE_NO_COLOR", "1")
    assert colored("plain", Color.RED) == "plain"

    monkeypatch.delenv("GRIDTRACE_NO_COLOR")
    wrapped = colored("tinted", Color.GREEN, bold=True)
    assert wrapped.startswith(Color.BOLD.value + Color.GREEN.value)
    assert wrapped.endswith(Color.RESET.value)


def test_library_is_quiet_by_default(monkeypatch):
    monkeypatch.delenv("DEBUG_PATH", raising=False)
    monkeypatch.delenv("DEBUG_FOV", raising=False)

    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        find_path(Grid(4, 4), (0, 0), (3, 3))
        trace_fov((0, 0), 3)
    assert buf.getvalue() == ""


def test_debug_switches_print_tagged_lines(monkeypatch):
    monkeypatch.setenv("GRIDTRACE_NO_COLOR", "1")
    monkeypatch.setenv("DEBUG_PATH", "true")
    monkeypatch.setenv("DEBUG_FOV", "1")

    blocked = Grid(3, 1)
    blocked.set(1, 0, Cell(solid=True))

    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        find_path(Grid(3, 3), (0, 0), (2, 2))
        find_path(blocked, (0, 0), (2, 0))
        trace_fov((0, 0), 2)
    out = buf.getvalue()

    assert f"{LOG_TAG_SUCCESS} [Path] (0, 0) -> (2, 2): 4 steps" in out
    assert f"{LOG_TAG_ERROR} [Path] (0, 0) -> (2, 0): unreachable" in out
    assert f"{LOG_TAG_TRACE} [FOV] origin=(0, 0) radius=2 rays=48" in out
