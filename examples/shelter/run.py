"""
Shelter walkthrough

Builds a walled shelter with a few interior partitions, walks an explorer
along an A* route and prints what it has seen after every few steps.

Run: uv run python examples/shelter/run.py
"""

from gridtrace import (
    Config,
    Rect,
    TileKind,
    generate_shelter,
    make_tile,
    render_ascii_window,
    trace_path,
)
from gridtrace.logging_utils import log_info, log_success

GRID_WIDTH = 30
GRID_HEIGHT = 14
REPORT_EVERY = 6


def build_shelter():
    """Hall with two partitions, each with a doorway."""
    grid = generate_shelter(GRID_WIDTH, GRID_HEIGHT)
    wall = make_tile(TileKind.WALL)

    grid.fill_rect(Rect(x=10, y=1, width=1, height=GRID_HEIGHT - 2), wall)
    grid.fill_rect(Rect(x=20, y=1, width=1, height=GRID_HEIGHT - 2), wall)
    grid.set(10, 4, make_tile(TileKind.CLOSED_DOOR))
    grid.set(20, 9, make_tile(TileKind.OPEN_DOOR))

    grid.hide_all()
    return grid


def main() -> None:
    Config.validate()
    print(Config.display())

    grid = build_shelter()
    start, goal = (2, 2), (27, 11)
    route = trace_path(grid, start, goal)
    if not route:
        print("No route through the shelter")
        return

    log_info(f"Route from {start} to {goal}: {len(route) - 1} steps")
    for step, position in enumerate(route):
        grid.update_fov(position, Config.DEFAULT_FOV_RADIUS)
        if step % REPORT_EVERY == 0 or position == goal:
            print(f"\nStep {step} at {position}")
            print(render_ascii_window(grid))

    log_success("Explorer reached the far room")


if __name__ == "__main__":
    main()
