"""Rich-based logging for the results pipeline."""

from __future__ import annotations

from texture_results.utils.pipeline_logger import BasePipelineLogger


class ResultsLogger(BasePipelineLogger):
    """Logger for result download runs.

    Extends BasePipelineLogger with pack headers, rate limit warnings and the
    end-of-run summary.
    """

    def __init__(self) -> None:
        super().__init__(__name__)

    def rate_limit(self, retry_after: float) -> None:
        """Log a rate limit warning with retry time."""
        self._logger.warning(f"Rate limited. Waiting {retry_after:.1f}s...")

    def pack_start(self, pack_name: str, channel_id: int) -> None:
        """Log the start of a results run for one pack."""
        self.console.print()
        self.console.rule(f"[bold cyan]{pack_name}[/bold cyan]", style="cyan")
        self.console.print(f"[dim]Results channel: {channel_id}[/dim]")

    def summary(
        self,
        messages: int = 0,
        downloaded: int = 0,
        skipped: int = 0,
        failed: int = 0,
        files_written: int = 0,
        contributions: int = 0,
        roles_granted: int = 0,
        elapsed: float = 0.0,
    ) -> None:
        """Print final run summary."""
        self.print_summary(
            "Results",
            elapsed=elapsed,
            stats={
                "Accepted submissions": messages,
                "Textures downloaded": downloaded,
                "Textures skipped": skipped,
                "Textures failed": failed,
                "Files written": files_written,
                "Contributions posted": contributions,
                "Roles granted": roles_granted,
            },
            style="cyan",
        )


logger = ResultsLogger()
