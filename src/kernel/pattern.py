import logging
import math
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from .seed_digest import digest_byte

log = logging.getLogger(__name__)

WIDTH = 500
HEIGHT = 500
MAX_SHAPES = 1000
GRID_SPACING = math.sqrt((WIDTH * HEIGHT) / MAX_SHAPES)

SHAPE_STROKE_WIDTH = 2
OVERLAY_STROKE_WIDTH = 1


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"


@dataclass(frozen=True)
class GridCell:
    x: float
    y: float


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    radius: float
    color: Color

    @property
    def center(self):
        return (self.cx, self.cy)

    @property
    def size(self):
        return self.radius * 2


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned square; (x, y) is the top-left corner."""
    x: float
    y: float
    size: float
    color: Color

    @property
    def center(self):
        return (self.x + self.size / 2, self.y + self.size / 2)


@dataclass(frozen=True)
class LineSegment:
    x1: float
    y1: float
    x2: float
    y2: float
    size: int
    color: Color
    stroke_width: int = SHAPE_STROKE_WIDTH

    @property
    def center(self):
        return ((self.x1 + self.x2) / 2, (self.y1 + self.y2) / 2)


Shape = Union[Circle, Rectangle, LineSegment]


@dataclass(frozen=True)
class OverlayLine:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class DiagonalOverlay:
    color: Color
    lines: Tuple[OverlayLine, ...]
    stroke_width: int = OVERLAY_STROKE_WIDTH
    name = "diagonal"


@dataclass(frozen=True)
class GridOverlay:
    color: Color
    lines: Tuple[OverlayLine, ...]
    stroke_width: int = OVERLAY_STROKE_WIDTH
    name = "grid"


Overlay = Union[DiagonalOverlay, GridOverlay]


@dataclass(frozen=True)
class PatternPlan:
    width: int
    height: int
    background: Color
    shapes: Tuple[Shape, ...]
    overlay: Overlay


def background_color(digest: bytes) -> Color:
    # biased into the upper half so backgrounds stay bright
    r, g, b = (digest_byte(digest, i) % 128 + 128 for i in range(3))
    return Color(r, g, b)


def color_at(digest: bytes, index: int) -> Color:
    return Color(
        digest_byte(digest, index),
        digest_byte(digest, index + 1),
        digest_byte(digest, index + 2),
    )


def _steps(limit: float, spacing: float) -> Iterator[float]:
    # repeated addition, not i * spacing: the float drift is part of the layout
    v = 0.0
    while v < limit:
        yield v
        v += spacing


def grid_cells(width=WIDTH, height=HEIGHT, spacing=GRID_SPACING, limit=MAX_SHAPES) -> Iterator[GridCell]:
    """Candidate shape anchors in row-major order, at most `limit` of them."""
    produced = 0
    for y in _steps(height, spacing):
        for x in _steps(width, spacing):
            if produced >= limit:
                return
            yield GridCell(x, y)
            produced += 1


def _clamp(v: float, upper: float) -> float:
    return min(max(0, v), upper)


def derive_shape(digest: bytes, counter: int, cell: GridCell,
                 spacing=GRID_SPACING, width=WIDTH, height=HEIGHT) -> Shape:
    offset_x = (digest_byte(digest, counter) % spacing) - spacing / 2
    offset_y = (digest_byte(digest, counter + 1) % spacing) - spacing / 2
    x = _clamp(cell.x + offset_x, width)
    y = _clamp(cell.y + offset_y, height)

    size = abs(digest_byte(digest, counter + 2)) % 50 + 10
    color = color_at(digest, counter)
    kind = digest_byte(digest, counter + 3) % 3

    half = size / 2
    if kind == 0:
        return Circle(x, y, half, color)
    if kind == 1:
        return Rectangle(x - half, y - half, size, color)
    return LineSegment(x - half, y - half, x + half, y + half, size, color)


def derive_shapes(digest: bytes) -> Tuple[Shape, ...]:
    shapes = []
    for counter, cell in enumerate(grid_cells()):
        shape = derive_shape(digest, counter, cell)
        if log.isEnabledFor(logging.DEBUG):
            cx, cy = shape.center
            log.debug("Generating shape #%d: %s at (%.1f, %.1f) with size %d",
                      counter + 1, type(shape).__name__, cx, cy, shape.size)
        shapes.append(shape)
    log.debug("Finished generating shapes.")
    return tuple(shapes)


def derive_overlay(digest: bytes, counter: int, width=WIDTH, height=HEIGHT, spacing=GRID_SPACING) -> Overlay:
    color = color_at(digest, counter)
    if digest_byte(digest, 0) % 2 == 0:
        # endpoints run past the canvas on purpose; keep the arithmetic as is
        lines = tuple(OverlayLine(i, 0, i + width, height) for i in _steps(width, spacing))
        log.debug("Diagonal lines pattern added.")
        return DiagonalOverlay(color, lines)

    lines = []
    for i in _steps(width, spacing):
        lines.append(OverlayLine(i, 0, i, height))
        lines.append(OverlayLine(0, i, width, i))
    log.debug("Grid pattern added.")
    return GridOverlay(color, tuple(lines))


def plan_pattern(digest: bytes) -> PatternPlan:
    shapes = derive_shapes(digest)
    return PatternPlan(
        width=WIDTH,
        height=HEIGHT,
        background=background_color(digest),
        shapes=shapes,
        overlay=derive_overlay(digest, len(shapes)),
    )
