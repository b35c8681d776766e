"""Basic drawing primitives on numpy RGB frame buffers.

Buffers are ``(height, width, 3)`` uint8 arrays. Coordinates may be
floats and may fall outside the buffer; everything is clipped.
"""

from typing import Sequence, Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Point = Tuple[float, float]
Buffer = NDArray[np.uint8]


def new_buffer(width: int, height: int) -> Buffer:
    """Allocate a black buffer."""
    return np.zeros((height, width, 3), dtype=np.uint8)


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def draw_rect(
    buffer: Buffer,
    x: float,
    y: float,
    width: float,
    height: float,
    color: Color,
    filled: bool = True,
    thickness: int = 1,
) -> None:
    """Draw an axis-aligned rectangle.

    Args:
        buffer: Target buffer
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        filled: If True, fill rectangle; if False, draw outline only
        thickness: Outline thickness (when filled=False)
    """
    h, w = buffer.shape[:2]

    x1 = int(max(0, min(round(x), w)))
    y1 = int(max(0, min(round(y), h)))
    x2 = int(max(0, min(round(x + width), w)))
    y2 = int(max(0, min(round(y + height), h)))
    if x2 <= x1 or y2 <= y1:
        return

    if filled:
        buffer[y1:y2, x1:x2] = color
        return

    t = max(1, thickness)
    buffer[y1:min(y1 + t, y2), x1:x2] = color
    buffer[max(y2 - t, y1):y2, x1:x2] = color
    buffer[y1:y2, x1:min(x1 + t, x2)] = color
    buffer[y1:y2, max(x2 - t, x1):x2] = color


def _grid(buffer: Buffer) -> Tuple[NDArray, NDArray]:
    h, w = buffer.shape[:2]
    # Sample at pixel centres
    ys, xs = np.ogrid[:h, :w]
    return xs + 0.5, ys + 0.5


def draw_ellipse(
    buffer: Buffer,
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    color: Color,
    angle: float = 0.0,
    outline: Color | None = None,
    thickness: float = 1.5,
) -> None:
    """Draw a filled ellipse rotated by ``angle`` radians.

    If ``outline`` is given, a ring of that color and ``thickness``
    pixels is drawn along the edge.
    """
    if rx <= 0 or ry <= 0:
        return
    xs, ys = _grid(buffer)
    dx = xs - cx
    dy = ys - cy
    cos_a, sin_a = np.cos(angle), np.sin(angle)
    u = dx * cos_a + dy * sin_a
    v = -dx * sin_a + dy * cos_a

    if outline is not None:
        outer = (u / (rx + thickness / 2)) ** 2 + (v / (ry + thickness / 2)) ** 2 <= 1.0
        buffer[outer] = outline
        rx -= thickness / 2
        ry -= thickness / 2
        if rx <= 0 or ry <= 0:
            return
    inner = (u / rx) ** 2 + (v / ry) ** 2 <= 1.0
    buffer[inner] = color


def draw_circle(
    buffer: Buffer,
    cx: float,
    cy: float,
    radius: float,
    color: Color,
    outline: Color | None = None,
    thickness: float = 1.5,
) -> None:
    """Draw a filled circle, optionally outlined."""
    draw_ellipse(buffer, cx, cy, radius, radius, color,
                 outline=outline, thickness=thickness)


def draw_polygon(buffer: Buffer, points: Sequence[Point], color: Color) -> None:
    """Fill a convex polygon given its vertices in order."""
    if len(points) < 3:
        return
    xs, ys = _grid(buffer)
    # Orientation decides which side of each edge is inside
    area = 0.0
    for (x1, y1), (x2, y2) in zip(points, list(points[1:]) + [points[0]]):
        area += x1 * y2 - x2 * y1
    sign = 1.0 if area >= 0 else -1.0

    mask = np.ones(buffer.shape[:2], dtype=bool)
    for (x1, y1), (x2, y2) in zip(points, list(points[1:]) + [points[0]]):
        cross = (x2 - x1) * (ys - y1) - (y2 - y1) * (xs - x1)
        mask &= sign * cross >= 0
    buffer[mask] = color


def draw_hline(buffer: Buffer, y: float, color: Color, thickness: int = 1) -> None:
    """Draw a full-width horizontal line."""
    h = buffer.shape[0]
    y1 = int(max(0, min(round(y), h)))
    y2 = int(max(0, min(y1 + thickness, h)))
    buffer[y1:y2, :] = color
