"""XML parsing utilities for SVG icons.

Wraps ElementTree with consistent error handling and reads the intrinsic
size of an SVG document from its root element.
"""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET

from icon_pipeline.core.utils.logging import get_logger

logger = get_logger(__name__)

# Unitless or px lengths only; %, em, mm etc. have no fixed pixel size.
_PX_LENGTH = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*(px)?\s*$")


class XMLParser:
    """Generic XML parser with error handling.

    Example:
        >>> parser = XMLParser()
        >>> root = parser.parse_bytes(b"<svg width='16' height='16'/>")
        >>> root.tag
        'svg'
    """

    def parse_bytes(self, data: bytes) -> ET.Element:
        """Parse XML from raw bytes.

        Args:
            data: XML document bytes (encoding taken from the prolog)

        Returns:
            Parsed root element

        Raises:
            ValueError: If XML is malformed
        """
        try:
            return ET.fromstring(data)
        except ET.ParseError as e:
            raise ValueError(f"Malformed XML: {e}") from e


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on tags."""
    return tag.rsplit("}", 1)[-1]


def parse_px_length(value: str | None) -> float | None:
    """Parse a unitless or ``px`` length; other units yield None."""
    if value is None:
        return None
    match = _PX_LENGTH.match(value)
    if not match:
        return None
    return float(match.group(1))


def _finite_size(width: float, height: float, source: str) -> tuple[float, float]:
    if not (math.isfinite(width) and math.isfinite(height)):
        raise ValueError(f"{source} size is not finite: {width} x {height}")
    return width, height


def read_svg_size(data: bytes) -> tuple[float | None, float | None]:
    """Read the intrinsic size of an SVG document.

    Uses the root ``width`` / ``height`` attributes when they are pixel
    lengths, otherwise falls back to the ``viewBox`` dimensions.

    Args:
        data: SVG document bytes

    Returns:
        (width, height); either may be None when it cannot be determined

    Raises:
        ValueError: If the document is malformed, its root is not ``<svg>``,
            or a declared size is not a finite number
    """
    root = XMLParser().parse_bytes(data)
    if local_name(root.tag) != "svg":
        raise ValueError(f"Root element is <{local_name(root.tag)}>, expected <svg>")

    width = parse_px_length(root.get("width"))
    height = parse_px_length(root.get("height"))
    if width is not None and height is not None:
        return _finite_size(width, height, "width/height")

    # Both from viewBox so the aspect ratio stays intact
    view_box = root.get("viewBox")
    if not view_box:
        return None, None
    parts = re.split(r"[\s,]+", view_box.strip())
    if len(parts) != 4:
        logger.debug(f"Ignoring viewBox without four values: {view_box!r}")
        return None, None
    try:
        vb_width, vb_height = float(parts[2]), float(parts[3])
    except ValueError:
        logger.debug(f"Ignoring non-numeric viewBox: {view_box!r}")
        return None, None
    _finite_size(vb_width, vb_height, "viewBox")
    if vb_width <= 0 or vb_height <= 0:
        return None, None
    return vb_width, vb_height
