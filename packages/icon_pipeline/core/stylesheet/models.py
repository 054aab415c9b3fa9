"""Stylesheet composition models."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict

from icon_pipeline.core.assets.models import IconAsset


class StyleRule(BaseModel):
    """One rule block of the generated stylesheet.

    Attributes:
        name: Logical icon name
        class_name: CSS class without the leading dot
        selector: Class selector as written in the stylesheet
        url: Data URI or path relative to the stylesheet
        inlined: True when ``url`` is a data URI
        width: CSS width declaration value (e.g. "24px"), if known
        height: CSS height declaration value, if known
        source_filename: File the rule was generated from
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    class_name: str
    selector: str
    url: str
    inlined: bool
    width: str | None = None
    height: str | None = None
    source_filename: str


@dataclass(frozen=True)
class StylesheetPlan:
    """Everything needed to write one run's output.

    Attributes:
        rules: Rule blocks in logical-name order
        copies: Assets to copy next to the stylesheet (not inlined)
    """

    rules: list[StyleRule] = field(default_factory=list)
    copies: list[IconAsset] = field(default_factory=list)

    @property
    def inlined_names(self) -> list[str]:
        return [r.name for r in self.rules if r.inlined]

    @property
    def referenced_names(self) -> list[str]:
        return [r.name for r in self.rules if not r.inlined]
