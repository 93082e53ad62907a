"""
Raster output — draws a PatternPlan with Pillow and encodes it as PNG.
"""

import io

from PIL import Image, ImageDraw

from .pattern import Circle, LineSegment, PatternPlan, Rectangle


def _draw_shape(draw: ImageDraw.ImageDraw, shape):
    fill = shape.color.as_tuple()
    # Pillow box corners are inclusive; shrink by one so a box spans `size` pixels
    if isinstance(shape, Circle):
        r = shape.radius
        draw.ellipse([shape.cx - r, shape.cy - r, shape.cx + r - 1, shape.cy + r - 1], fill=fill)
    elif isinstance(shape, Rectangle):
        draw.rectangle([shape.x, shape.y, shape.x + shape.size - 1, shape.y + shape.size - 1], fill=fill)
    elif isinstance(shape, LineSegment):
        draw.line([shape.x1, shape.y1, shape.x2, shape.y2], fill=fill, width=shape.stroke_width)
    else:
        raise TypeError(f"unknown shape {shape!r}")


def draw_plan(plan: PatternPlan) -> Image.Image:
    img = Image.new("RGB", (plan.width, plan.height), plan.background.as_tuple())
    draw = ImageDraw.Draw(img)
    for shape in plan.shapes:
        _draw_shape(draw, shape)

    overlay = plan.overlay
    stroke = overlay.color.as_tuple()
    for ln in overlay.lines:
        draw.line([ln.x1, ln.y1, ln.x2, ln.y2], fill=stroke, width=overlay.stroke_width)
    return img


def render_png(plan: PatternPlan) -> bytes:
    buf = io.BytesIO()
    draw_plan(plan).save(buf, format="PNG")
    return buf.getvalue()
