"""Write SVG markup from element definitions."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 400.0,
    canvas_h: float = 400.0,
    title: str = "",
    description: str = "",
) -> str:
    """Generate SVG markup. An element's ``text`` key becomes its escaped text content."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{_fmt(canvas_w)}" height="{_fmt(canvas_h)}"'
        f' viewBox="0 0 {_fmt(canvas_w)} {_fmt(canvas_h)}" xmlns="http://www.w3.org/2000/svg"'
        f' role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k not in ("tag", "text")}
        attr_str = " ".join(f"{k}={quoteattr(str(v))}" for k, v in attrs.items())
        if "text" in elem:
            lines.append(f"  <{tag} {attr_str}>{escape(str(elem['text']))}</{tag}>")
        else:
            lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)


def _fmt(value: float) -> str:
    """200.0 → '200', 12.345 → '12.35'."""
    return f"{round(float(value), 2):g}"
