"""Run deadline tracking."""

from __future__ import annotations

from collections.abc import Callable
import time

from icon_pipeline.core.errors import PipelineTimeoutError


class Deadline:
    """Wall-clock budget for a run, checked at safe points.

    A deadline with ``timeout_seconds=None`` never expires.

    Example:
        >>> deadline = Deadline(30.0)
        >>> deadline.check("reading icons")  # raises PipelineTimeoutError once expired
    """

    def __init__(
        self,
        timeout_seconds: float | None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._timeout = timeout_seconds
        self._clock = clock
        self._started = clock()

    @property
    def elapsed(self) -> float:
        return self._clock() - self._started

    @property
    def expired(self) -> bool:
        return self._timeout is not None and self.elapsed > self._timeout

    def check(self, stage: str) -> None:
        """Raise if the budget is spent.

        Args:
            stage: What the run was doing, included in the error message

        Raises:
            PipelineTimeoutError: If the deadline has passed
        """
        if self.expired:
            raise PipelineTimeoutError(
                f"Run exceeded {self._timeout:g}s while {stage} ({self.elapsed:.2f}s elapsed)"
            )
