"""Icon assets: models, naming, discovery and size probing."""

from icon_pipeline.core.assets.dimensions import format_px, probe_size
from icon_pipeline.core.assets.discovery import DiscoveryResult, discover_icons
from icon_pipeline.core.assets.models import (
    IconAsset,
    IconFormat,
    PipelineWarning,
    RunSummary,
    WarningKind,
)
from icon_pipeline.core.assets.naming import css_class, css_selector, logical_name

__all__ = [
    # Models
    "IconAsset",
    "IconFormat",
    "PipelineWarning",
    "RunSummary",
    "WarningKind",
    # Discovery
    "DiscoveryResult",
    "discover_icons",
    # Naming
    "css_class",
    "css_selector",
    "logical_name",
    # Dimensions
    "format_px",
    "probe_size",
]
