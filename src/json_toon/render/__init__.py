"""render subpackage: static output formats for a Scene."""

from json_toon.render.svg import render_svg

__all__ = ["render_svg"]
