"""Geometry and colour helpers used to lay out the screens."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

Color = tuple[int, int, int, int]
Point = tuple[float, float]

SHOT_COUNT = 6
SHOT_BUTTON_SIZE = 50
SHOT_BUTTON_GAP = 20
SHOT_BUTTON_RISE = 150
RECORD_SLOT_SIZE = 40
RECORD_SLOT_GAP = 10


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Point) -> bool:
        """Whether the point lies inside; right and bottom edges are excluded."""
        px, py = point
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


def lerp_color(start: Color, end: Color, t: float) -> Color:
    """Blend two colours channel by channel, truncating each channel."""
    return tuple(int(a + t * (b - a)) for a, b in zip(start, end))  # type: ignore[return-value]


def gradient_strips(
    rect: Rect, start: Color, end: Color, horizontal: bool = True
) -> Iterator[tuple[Rect, Color]]:
    """Yield one-pixel strips that together paint a linear gradient over rect."""
    extent = rect.width if horizontal else rect.height
    step = 0
    while step < extent:
        color = lerp_color(start, end, step / extent)
        if horizontal:
            yield Rect(rect.x + step, rect.y, 1, rect.height), color
        else:
            yield Rect(rect.x, rect.y + step, rect.width, 1), color
        step += 1


def hover_rect(rect: Rect, hovered: bool, scale: float) -> Rect:
    """The rectangle to draw for a button, grown about its centre when hovered."""
    if not hovered:
        return rect
    width = rect.width * scale
    height = rect.height * scale
    return replace(
        rect,
        x=rect.x - (width - rect.width) / 2,
        y=rect.y - (height - rect.height) / 2,
        width=width,
        height=height,
    )


def center_text(
    rect: Rect, text_size: Point, offset_x: float = 0.0, offset_y: float = 0.0
) -> tuple[int, int]:
    """Top-left position that centres text of the given size inside rect."""
    text_w, text_h = text_size
    x = int(rect.x + (rect.width - text_w) / 2 + offset_x)
    y = int(rect.y + (rect.height - text_h) / 2 + offset_y)
    return x, y


def circular_mask(width: int, height: int) -> list[list[bool]]:
    """Rows of flags telling which pixels stay opaque in a circular crop."""
    cx, cy = width / 2.0, height / 2.0
    radius = int(width / 1.5)
    limit = radius * radius
    return [
        [(x - cx) ** 2 + (y - cy) ** 2 <= limit for x in range(width)]
        for y in range(height)
    ]


def shot_buttons(screen_width: int, screen_height: int) -> list[Rect]:
    """The row of shot buttons, centred near the bottom of the screen."""
    total = SHOT_COUNT * SHOT_BUTTON_SIZE + (SHOT_COUNT - 1) * SHOT_BUTTON_GAP
    start_x = int((screen_width - total) / 2)
    start_y = screen_height - SHOT_BUTTON_RISE
    pitch = SHOT_BUTTON_SIZE + SHOT_BUTTON_GAP
    return [
        Rect(start_x + i * pitch, start_y, SHOT_BUTTON_SIZE, SHOT_BUTTON_SIZE)
        for i in range(SHOT_COUNT)
    ]


def choice_record_slots(start_x: float, start_y: float) -> list[Rect]:
    """The boxes that show the choices made on each ball of an innings."""
    pitch = RECORD_SLOT_SIZE + RECORD_SLOT_GAP
    return [
        Rect(start_x + i * pitch, start_y, RECORD_SLOT_SIZE, RECORD_SLOT_SIZE)
        for i in range(SHOT_COUNT)
    ]