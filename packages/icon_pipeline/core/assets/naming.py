"""Logical name derivation for icon files."""

from __future__ import annotations

from pathlib import Path
import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def logical_name(filename: str) -> str:
    """Derive a CSS-safe logical name from a filename stem.

    The stem is lowercased and every run of characters outside ``[a-z0-9]``
    becomes a single hyphen. Leading and trailing hyphens are dropped.

    Args:
        filename: Source filename (with or without directory part)

    Returns:
        Normalized name, or an empty string if nothing usable remains

    Example:
        >>> logical_name("Icon One.svg")
        'icon-one'
        >>> logical_name("arrow_left@2x.png")
        'arrow-left-2x'
    """
    stem = Path(filename).stem
    return _NON_ALNUM.sub("-", stem.lower()).strip("-")


def css_class(name: str, prefix: str) -> str:
    """CSS class (without the leading dot) for a logical name."""
    return f"{prefix}{name}"


def css_selector(name: str, prefix: str) -> str:
    """Class selector for a logical name.

    A digit that would start the identifier, either first or right after a
    single leading hyphen, is hex-escaped, e.g. ``.\\31 0px`` or ``.-\\32 x``.
    """
    cls = css_class(name, prefix)
    if cls[:1].isdigit():
        return f".\\{ord(cls[0]):x} {cls[1:]}"
    if cls[:1] == "-" and cls[1:2].isdigit():
        return f".-\\{ord(cls[1]):x} {cls[2:]}"
    return f".{cls}"
