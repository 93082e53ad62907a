from .pattern import Circle, LineSegment, PatternPlan, Rectangle

SVG_NS = "http://www.w3.org/2000/svg"


def _num(v) -> str:
    # fixed precision keeps the document byte-stable
    s = f"{float(v):.4f}".rstrip("0").rstrip(".")
    return "0" if s in ("", "-0") else s


def _shape_element(shape) -> str:
    fill = shape.color.css()
    if isinstance(shape, Circle):
        return f'<circle cx="{_num(shape.cx)}" cy="{_num(shape.cy)}" r="{_num(shape.radius)}" fill="{fill}"/>'
    if isinstance(shape, Rectangle):
        return (f'<rect x="{_num(shape.x)}" y="{_num(shape.y)}" '
                f'width="{_num(shape.size)}" height="{_num(shape.size)}" fill="{fill}"/>')
    if isinstance(shape, LineSegment):
        return (f'<line x1="{_num(shape.x1)}" y1="{_num(shape.y1)}" x2="{_num(shape.x2)}" y2="{_num(shape.y2)}" '
                f'stroke="{fill}" stroke-width="{shape.stroke_width}"/>')
    raise TypeError(f"unknown shape {shape!r}")


def render_svg(plan: PatternPlan) -> bytes:
    w, h = plan.width, plan.height
    parts = [
        f'<svg xmlns="{SVG_NS}" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
        f'<rect width="{w}" height="{h}" fill="{plan.background.css()}"/>',
    ]
    parts.extend(_shape_element(s) for s in plan.shapes)

    overlay = plan.overlay
    parts.append(f'<g class="{overlay.name}" stroke="{overlay.color.css()}" stroke-width="{overlay.stroke_width}">')
    for ln in overlay.lines:
        parts.append(f'<line x1="{_num(ln.x1)}" y1="{_num(ln.y1)}" x2="{_num(ln.x2)}" y2="{_num(ln.y2)}"/>')
    parts.append("</g>")
    parts.append("</svg>")
    return "\n".join(parts).encode("utf-8")
