"""Icon pipeline runner.

Example:
    >>> from pathlib import Path
    >>> from icon_pipeline.core.config import PipelineConfig
    >>> from icon_pipeline.core.pipeline import run
    >>>
    >>> summary = run(PipelineConfig(source_dir=Path("icons"), dest_dir=Path("dist")))
    >>> for warning in summary.warnings:
    ...     print(warning)
"""

from icon_pipeline.core.pipeline.runner import run

__all__ = [
    "run",
]
