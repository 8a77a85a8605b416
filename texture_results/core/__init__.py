"""Base orchestrator for pipeline execution.

Provides timing and the common run() interface; subclasses supply the
pipeline body and the summary.

Usage:
    class MyOrchestrator(BaseOrchestrator):
        async def _run_pipeline(self):
            ...

        def _log_summary(self, elapsed):
            ...
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod


class BaseOrchestrator(ABC):
    """Abstract base class for pipeline orchestrators.

    Subclasses must implement:
    - _run_pipeline(): The actual pipeline logic
    - _log_summary(): Log final statistics
    """

    def __init__(self) -> None:
        self.start_time: float = 0.0

    async def run(self) -> None:
        """Run the pipeline."""
        self.start_time = time.time()

        await self._run_pipeline()

        elapsed = time.time() - self.start_time
        self._log_summary(elapsed)

    @abstractmethod
    async def _run_pipeline(self) -> None:
        """Execute the pipeline logic."""
        ...

    @abstractmethod
    def _log_summary(self, elapsed: float) -> None:
        """Log the final summary statistics.

        Args:
            elapsed: Total time elapsed in seconds.
        """
        ...
