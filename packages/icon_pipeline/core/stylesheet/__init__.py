"""Stylesheet composition and rendering."""

from icon_pipeline.core.stylesheet.builder import StylesheetBuilder, data_uri
from icon_pipeline.core.stylesheet.models import StylesheetPlan, StyleRule
from icon_pipeline.core.stylesheet.renderer import RenderError, TemplateRenderer

__all__ = [
    "RenderError",
    "StyleRule",
    "StylesheetBuilder",
    "StylesheetPlan",
    "TemplateRenderer",
    "data_uri",
]
