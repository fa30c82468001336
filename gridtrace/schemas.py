"""
Pydantic schemas for gridtrace value types.

Everything that crosses the Grid Store boundary is defined here.

Design Philosophy:
- Cells are values: the store hands out deep copies and keeps its own
- The payload is opaque to the engine; ``Glyph`` is only the default
- Plain ``(x, y)`` tuples for coordinates so callers never need a wrapper
"""

from __future__ import annotations

from typing import Any, Iterator, Tuple

from pydantic import BaseModel, ConfigDict, Field


# Coordinates are plain integer pairs. Validity is always grid-relative, so no
# bounds are attached to the type itself.
Coordinate = Tuple[int, int]

RGB = Tuple[int, int, int]


class Glyph(BaseModel):
    """Character cell drawn by a render surface.

    The engine never inspects glyphs. They exist so a freshly created cell has a
    sensible payload that a text renderer (see ``render_ascii_window``) can print.
    """

    character: str = Field(" ", description="Single character drawn for the cell")
    front_color: RGB = Field((192, 192, 192), description="Foreground color (light gray)")
    back_color: RGB = Field((0, 0, 0), description="Background color (black)")


class Cell(BaseModel):
    """Per-coordinate state owned by a ``Grid``.

    ``solid`` blocks both movement and sight. ``visible`` records whether the cell
    is currently observed. ``payload`` is whatever the consumer renders; it must
    survive copies unchanged, so copies are always deep.
    """

    # Payloads may be arbitrary consumer objects (sprites, dicts, glyphs...).
    model_config = ConfigDict(arbitrary_types_allowed=True)

    visible: bool = Field(False, description="Currently observed")
    solid: bool = Field(False, description="Blocks movement and line of sight")
    payload: Any = Field(default_factory=Glyph, description="Opaque render payload")

    def copy_cell(self) -> "Cell":
        """Return an independent deep copy (no shared payload references)."""
        return self.model_copy(deep=True)


class Rect(BaseModel):
    """Axis-aligned rectangle of grid cells anchored at its top-left corner."""

    x: int
    y: int
    width: int
    height: int

    def points(self) -> Iterator[Coordinate]:
        """Yield every coordinate covered by the rectangle, row by row.

        Non-positive width or height covers nothing.
        """
        for dy in range(max(self.height, 0)):
            for dx in range(max(self.width, 0)):
                yield self.x + dx, self.y + dy
