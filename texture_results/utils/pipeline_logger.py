"""Base pipeline logger with shared rich components.

- StructuredBlock: context manager for per-item key/value output
- BasePipelineLogger: standard log methods plus blocks and a summary panel
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Generator

from rich.panel import Panel
from rich.table import Table

from texture_results.utils.logging import console

if TYPE_CHECKING:
    from typing import Self

    from rich.console import Console


class StructuredBlock:
    """A context manager for displaying one item's key/value details.

    Usage:
        with logger.block("Texture #1234") as block:
            block.field("authors", 2)
            block.result("written to 6 paths")

    Output:
        Texture #1234
            authors: 2
            ✓ written to 6 paths
    """

    def __init__(self, title: str, parent: "BasePipelineLogger") -> None:
        self.title = title
        self.console = parent.console
        self._parent = parent

    def __enter__(self) -> "Self":
        self.console.print(f"\n[bold]{self.title}[/bold]")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        return None

    def field(self, key: str, value: Any, color: str | None = None) -> None:
        """Add a key-value field to the block."""
        if color:
            self.console.print(f"    [dim]{key}:[/dim] [{color}]{value}[/{color}]")
        else:
            self.console.print(f"    [dim]{key}:[/dim] {value}")

    def result(self, message: str, success: bool = True) -> None:
        """Show the final result of the block."""
        icon = "[green]✓[/green]" if success else "[red]✗[/red]"
        self.console.print(f"    {icon} {message}")

    def skip(self, reason: str) -> None:
        """Show that this block was skipped."""
        self.console.print(f"    [dim]Skipped: {reason}[/dim]")


class BasePipelineLogger(ABC):
    """Abstract base class for pipeline loggers.

    Plain messages go through Python logging (and therefore honour the
    configured level); blocks and summaries print straight
    to the shared console.
    """

    def __init__(self, logger_name: str | None = None) -> None:
        self.console: Console = console
        self._logger = logging.getLogger(logger_name or self.__class__.__module__)

    @contextmanager
    def block(self, title: str) -> Generator[StructuredBlock, None, None]:
        """Create a structured block for key-value style output."""
        block = StructuredBlock(title, self)
        with block:
            yield block

    # -------------------------------------------------------------------------
    # Standard Logging (goes through Python logging)
    # -------------------------------------------------------------------------

    def info(self, message: str) -> None:
        """Log an info message."""
        self._logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self._logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self._logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self._logger.debug(message)

    def success(self, message: str) -> None:
        """Log a success message with green checkmark."""
        self.console.print(f"[green]✓[/green] {message}")

    # -------------------------------------------------------------------------
    # Rich Output
    # -------------------------------------------------------------------------

    def print_summary(
        self,
        pipeline_name: str,
        *,
        elapsed: float,
        stats: dict[str, int | str],
        style: str = "cyan",
    ) -> None:
        """Print a summary panel of ``stats`` followed by the elapsed time."""
        table = Table.grid(padding=(0, 2))
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right", style="green")

        for label, value in stats.items():
            if isinstance(value, int):
                table.add_row(label, f"{value:,}")
            else:
                table.add_row(label, str(value))
        table.add_row("Time elapsed", f"{elapsed:.1f}s")

        self.console.print()
        self.console.print(
            Panel(
                table,
                title=f"[bold]{pipeline_name} Complete[/bold]",
                border_style=style,
                padding=(1, 2),
            )
        )

    @abstractmethod
    def summary(self, **kwargs: Any) -> None:
        """Print final summary. Implementation varies by pipeline."""
        ...
