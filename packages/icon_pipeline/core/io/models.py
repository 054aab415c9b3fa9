"""Result types for filesystem writes."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class WriteResult(BaseModel):
    """Metadata about a completed atomic write."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(description="Final path of the written file")
    bytes_written: int = Field(ge=0, description="Size of the written content")
    content_sha256: str = Field(description="SHA256 hex digest of the written content")
