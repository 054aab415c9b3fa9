"""Intrinsic size probing for icon assets."""

from __future__ import annotations

from io import BytesIO
import logging
import math

from PIL import Image

from icon_pipeline.core.assets.models import IconFormat
from icon_pipeline.core.parsers.xml import read_svg_size

logger = logging.getLogger(__name__)


def _png_size(content: bytes) -> tuple[float, float]:
    try:
        # open() only reads the header; no pixel data is decoded
        with Image.open(BytesIO(content)) as img:
            if img.format != "PNG":
                raise ValueError(f"Content is {img.format}, not PNG")
            w, h = img.size
    except (OSError, SyntaxError, Image.DecompressionBombError) as e:
        raise ValueError(f"Unreadable PNG: {e}") from e
    return float(w), float(h)


def probe_size(content: bytes, fmt: IconFormat) -> tuple[float | None, float | None]:
    """Determine an icon's intrinsic size in CSS pixels.

    Args:
        content: Raw file bytes
        fmt: Declared format of the file

    Returns:
        (width, height); None entries when the file declares no fixed size

    Raises:
        ValueError: If the content can't be parsed as the declared format
    """
    if fmt is IconFormat.PNG:
        return _png_size(content)
    return read_svg_size(content)


def format_px(value: float) -> str:
    """Render a pixel length in fixed-point notation without trailing zeros.

    Raises:
        ValueError: If the value is NaN or infinite

    Example:
        >>> format_px(24.0)
        '24px'
        >>> format_px(10.5)
        '10.5px'
        >>> format_px(1e-07)
        '0px'
    """
    if not math.isfinite(value):
        raise ValueError(f"Length is not finite: {value}")
    if value.is_integer():
        return f"{int(value)}px"
    return f"{value:.4f}".rstrip("0").rstrip(".") + "px"
