"""Stylesheet composition.

Turns icon assets into rule blocks. Small assets are embedded as base64
data URIs; anything at or above the inlining threshold is copied next to
the stylesheet and referenced by relative URL.
"""

from __future__ import annotations

import base64
import logging

from icon_pipeline.core.assets.dimensions import format_px
from icon_pipeline.core.assets.models import IconAsset
from icon_pipeline.core.assets.naming import css_class, css_selector
from icon_pipeline.core.stylesheet.models import StylesheetPlan, StyleRule
from icon_pipeline.core.stylesheet.renderer import (
    PREVIEW_TEMPLATE,
    STYLESHEET_TEMPLATE,
    TemplateRenderer,
)

logger = logging.getLogger(__name__)


def data_uri(asset: IconAsset) -> str:
    """Encode an asset as a base64 data URI, e.g. ``data:image/png;base64,...``."""
    encoded = base64.b64encode(asset.content).decode("ascii")
    return f"data:{asset.mime_type};base64,{encoded}"


class StylesheetBuilder:
    """Composes and renders the icon stylesheet.

    Args:
        class_prefix: Prefix for every generated CSS class
        inline_threshold_bytes: Assets strictly smaller than this are inlined
        renderer: Template renderer (default templates if None)
    """

    def __init__(
        self,
        class_prefix: str = "icon-",
        inline_threshold_bytes: int = 8 * 1024,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.class_prefix = class_prefix
        self.inline_threshold_bytes = inline_threshold_bytes
        self.renderer = renderer or TemplateRenderer()

    def should_inline(self, asset: IconAsset) -> bool:
        return asset.size_bytes < self.inline_threshold_bytes

    def build_rule(self, asset: IconAsset) -> StyleRule:
        inlined = self.should_inline(asset)
        url = data_uri(asset) if inlined else asset.output_filename
        has_size = asset.width is not None and asset.height is not None

        logger.debug(
            f"{asset.filename}: {'inlined' if inlined else 'referenced'} "
            f"({asset.size_bytes} bytes, threshold {self.inline_threshold_bytes})"
        )
        return StyleRule(
            name=asset.name,
            class_name=css_class(asset.name, self.class_prefix),
            selector=css_selector(asset.name, self.class_prefix),
            url=url,
            inlined=inlined,
            width=format_px(asset.width) if has_size else None,
            height=format_px(asset.height) if has_size else None,
            source_filename=asset.filename,
        )

    def plan(self, assets: list[IconAsset]) -> StylesheetPlan:
        """Build rule blocks in logical-name order.

        Args:
            assets: Assets with unique logical names

        Returns:
            StylesheetPlan with rules and the assets to copy
        """
        ordered = sorted(assets, key=lambda a: a.name)
        rules = [self.build_rule(asset) for asset in ordered]
        copies = [asset for asset in ordered if not self.should_inline(asset)]
        return StylesheetPlan(rules=rules, copies=copies)

    def render_stylesheet(self, plan: StylesheetPlan) -> str:
        """Render the stylesheet text for a plan.

        Raises:
            RenderError: If the template fails to render
        """
        return self.renderer.render(
            STYLESHEET_TEMPLATE,
            {"rules": plan.rules, "icon_count": len(plan.rules)},
        )

    def render_preview(self, plan: StylesheetPlan, stylesheet_name: str) -> str:
        """Render the HTML preview page for a plan.

        Raises:
            RenderError: If the template fails to render
        """
        return self.renderer.render(
            PREVIEW_TEMPLATE,
            {
                "rules": plan.rules,
                "icon_count": len(plan.rules),
                "stylesheet_name": stylesheet_name,
            },
        )
