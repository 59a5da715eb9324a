"""Static SVG rendering of a Scene.

Draws, back to front: background wash, ground cloud, connectors, one blob per
node at its wobbled position (with highlight, label plate showing the node
kind, and a <title> hover tooltip carrying the full label), the frame, and a
small legend.  Output is a self-contained SVG document string.
"""

from __future__ import annotations

from html import escape

from json_toon.boundary import replace_lone_surrogates
from json_toon.layout.palette import INK, PRIMARY, SUCCESS
from json_toon.layout.scene import Connector, PlacedNode
from json_toon.result import Scene

__all__ = ["render_svg"]

FONT_FAMILY = "Inter, system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif"

GROUND_PATH = (
    "M120,410 C140,380 190,380 210,410 C240,372 300,372 320,410 "
    "C350,380 410,380 430,410 C460,372 520,372 540,410 "
    "C570,380 630,380 650,410 C680,372 740,372 760,410 "
    "C785,392 825,396 840,420 C860,452 845,478 805,482 "
    "L170,482 C120,476 98,450 120,410 Z"
)


def _text(value: str) -> str:
    return replace_lone_surrogates(escape(value), "&#x{:X};")


def _f(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _defs(width: int, height: int) -> list[str]:
    return [
        "<defs>",
        '<linearGradient id="bgGrad" x1="0" x2="1" y1="0" y2="1">',
        '<stop offset="0" stop-color="rgba(59,130,246,0.10)"/>',
        '<stop offset="1" stop-color="rgba(6,182,212,0.10)"/>',
        "</linearGradient>",
        '<filter id="softShadow" x="-20%" y="-20%" width="140%" height="140%">',
        '<feDropShadow dx="0" dy="8" stdDeviation="10" '
        'flood-color="rgba(15,23,42,0.18)"/>',
        "</filter>",
        '<filter id="toonOutline" x="-20%" y="-20%" width="140%" height="140%">',
        '<feMorphology in="SourceAlpha" operator="dilate" radius="2.2" '
        'result="dilated"/>',
        '<feColorMatrix in="dilated" type="matrix" '
        'values="0 0 0 0 0.05 0 0 0 0 0.10 0 0 0 0 0.18 0 0 0 0.9 0" '
        'result="outline"/>',
        '<feMerge><feMergeNode in="outline"/><feMergeNode in="SourceGraphic"/>'
        "</feMerge>",
        "</filter>",
        '<clipPath id="roundClip">',
        f'<rect x="28" y="28" width="{width - 56}" height="{height - 56}" '
        'rx="28" ry="28"/>',
        "</clipPath>",
        "</defs>",
    ]


def _background(width: int, height: int) -> list[str]:
    return [
        '<g clip-path="url(#roundClip)">',
        f'<rect x="0" y="0" width="{width}" height="{height}" fill="url(#bgGrad)"/>',
        '<circle cx="190" cy="110" r="110" fill="rgba(59,130,246,0.12)"/>',
        '<circle cx="740" cy="150" r="140" fill="rgba(6,182,212,0.12)"/>',
        '<circle cx="700" cy="450" r="180" fill="rgba(100,116,139,0.10)"/>',
        "</g>",
        f'<path d="{GROUND_PATH}" fill="rgba(255,255,255,0.80)" '
        'filter="url(#softShadow)"/>',
    ]


def _connector(curve: Connector) -> str:
    (x1, y1), (qx, qy), (x2, y2) = curve.start, curve.control, curve.end
    return (
        f'<path d="M {_f(x1)} {_f(y1)} Q {_f(qx)} {_f(qy)} {_f(x2)} {_f(y2)}" '
        'fill="none" stroke="rgba(15,23,42,0.20)" stroke-width="5" '
        'stroke-linecap="round" stroke-linejoin="round"/>'
    )


def _blob_path(x: float, y: float, r: float) -> str:
    return (
        f"M {_f(x)} {_f(y - r)} "
        f"C {_f(x + r * 0.85)} {_f(y - r * 0.92)}, {_f(x + r)} {_f(y - r * 0.25)}, "
        f"{_f(x + r)} {_f(y)} "
        f"C {_f(x + r)} {_f(y + r * 0.75)}, {_f(x + r * 0.45)} {_f(y + r)}, "
        f"{_f(x)} {_f(y + r)} "
        f"C {_f(x - r * 0.95)} {_f(y + r * 0.95)}, {_f(x - r)} {_f(y + r * 0.2)}, "
        f"{_f(x - r)} {_f(y)} "
        f"C {_f(x - r)} {_f(y - r * 0.8)}, {_f(x - r * 0.5)} {_f(y - r)}, "
        f"{_f(x)} {_f(y - r)} Z"
    )


def _bubble(node: PlacedNode) -> list[str]:
    r = node.size / 2
    x = node.rendered_x
    y = node.rendered_y
    plate_y = y + r * 0.35
    font_size = max(11.0, min(15.0, r * 0.22))

    return [
        '<g filter="url(#toonOutline)">',
        f'<path d="{_blob_path(x, y, r)}" fill="{escape(node.color)}" opacity="0.92"/>',
        f'<ellipse cx="{_f(x - r * 0.25)}" cy="{_f(y - r * 0.25)}" '
        f'rx="{_f(r * 0.35)}" ry="{_f(r * 0.24)}" fill="rgba(255,255,255,0.35)"/>',
        f'<rect x="{_f(x - r * 0.9)}" y="{_f(plate_y)}" width="{_f(r * 1.8)}" '
        f'height="{_f(max(26.0, r * 0.42))}" rx="12" fill="rgba(255,255,255,0.85)"/>',
        f'<text x="{_f(x)}" y="{_f(plate_y + max(18.0, r * 0.28))}" '
        f'text-anchor="middle" font-size="{_f(font_size)}" '
        f'font-family="{FONT_FAMILY}" fill="rgba(15,23,42,0.9)">'
        f"{escape(str(node.kind))}</text>",
        f"<title>{_text(node.label)}</title>",
        "</g>",
    ]


def _legend(height: int) -> list[str]:
    y = height - 8
    items = [("objects", PRIMARY, 48), ("arrays", SUCCESS, 148), ("connectors", INK, 240)]
    parts = []
    for text, color, x in items:
        parts.append(f'<circle cx="{x}" cy="{y - 4}" r="5" fill="{color}"/>')
        parts.append(
            f'<text x="{x + 10}" y="{y}" font-size="11" font-family="{FONT_FAMILY}" '
            f'fill="{INK}">{text}</text>'
        )
    return parts


def render_svg(scene: Scene) -> str:
    """Render ``scene`` as a standalone SVG document.

    Args:
        scene: The Scene returned by ``visualize()``.

    Returns:
        SVG markup.  Labels and titles are XML-escaped and unpaired surrogates
        become character references, so arbitrary JSON keys and strings are
        safe to embed and encode.
    """
    w, h = scene.width, scene.height
    svg = [
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {w} {h}" '
        f'width="{w}" height="{h}" role="img" '
        f'aria-label="{_text(scene.title)}">',
        f"<title>{_text(scene.title)}</title>",
    ]
    svg.extend(_defs(w, h))
    svg.extend(_background(w, h))

    # Draw connectors first so bubbles sit on top
    svg.extend(_connector(curve) for curve in scene.connectors)

    for node in scene.placed:
        svg.extend(_bubble(node))

    svg.append(
        f'<rect x="24" y="24" width="{w - 48}" height="{h - 48}" rx="28" '
        'fill="none" stroke="rgba(15,23,42,0.22)" stroke-width="5"/>'
    )
    svg.extend(_legend(h))
    svg.append("</svg>")
    return "\n".join(svg)
