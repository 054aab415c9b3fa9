"""Parsers for icon source formats."""

from icon_pipeline.core.parsers.xml import XMLParser, parse_px_length, read_svg_size

__all__ = [
    "XMLParser",
    "parse_px_length",
    "read_svg_size",
]
