"""Tests for texture_results.utils.pipeline_logger and the results logger."""

from __future__ import annotations

from io import StringIO
from typing import Any
from unittest.mock import MagicMock

from rich.console import Console

from texture_results.results.logger import ResultsLogger
from texture_results.utils.pipeline_logger import BasePipelineLogger, StructuredBlock


def _capture(logger: BasePipelineLogger) -> BasePipelineLogger:
    logger.console = Console(file=StringIO(), force_terminal=True, width=120)
    return logger


def _output(logger: BasePipelineLogger) -> str:
    logger.console.file.seek(0)
    return logger.console.file.read()


class ConcreteLogger(BasePipelineLogger):
    """Concrete implementation for testing the abstract base class."""

    def __init__(self) -> None:
        super().__init__("test_logger")
        _capture(self)

    def summary(self, **kwargs: Any) -> None:
        self.print_summary("Test", elapsed=0.0, stats={})


# ---------------------------------------------------------------------------
# TestStructuredBlock
# ---------------------------------------------------------------------------


class TestStructuredBlock:
    def test_prints_title_on_enter(self) -> None:
        logger = ConcreteLogger()

        with logger.block("Texture #12") as b:
            assert isinstance(b, StructuredBlock)

        assert "Texture #12" in _output(logger)

    def test_field_prints_key_value(self) -> None:
        logger = ConcreteLogger()

        with logger.block("Block") as b:
            b.field("authors", "111, 222")
            b.field("status", "ok", color="green")

        output = _output(logger)
        assert "authors:" in output
        assert "111, 222" in output
        assert "status:" in output

    def test_result_and_skip(self) -> None:
        logger = ConcreteLogger()

        with logger.block("Block") as b:
            b.result("written to 4 paths")
            b.result("download failed", success=False)
            b.skip("not found")

        output = _output(logger)
        assert "written to 4 paths" in output
        assert "download failed" in output
        assert "Skipped: not found" in output


# ---------------------------------------------------------------------------
# TestBasePipelineLogger
# ---------------------------------------------------------------------------


class TestBasePipelineLogger:
    def test_levels_delegate_to_python_logger(self) -> None:
        logger = ConcreteLogger()
        logger._logger = MagicMock()

        logger.info("i")
        logger.warning("w")
        logger.error("e")
        logger.debug("d")

        logger._logger.info.assert_called_once_with("i")
        logger._logger.warning.assert_called_once_with("w")
        logger._logger.error.assert_called_once_with("e")
        logger._logger.debug.assert_called_once_with("d")

    def test_success_prints_message(self) -> None:
        logger = ConcreteLogger()

        logger.success("done")

        assert "done" in _output(logger)

    def test_print_summary_includes_stats_and_elapsed(self) -> None:
        logger = ConcreteLogger()

        logger.print_summary("Results", elapsed=1.25, stats={"Files written": 1200})

        output = _output(logger)
        assert "Results Complete" in output
        assert "Files written" in output
        assert "1,200" in output
        assert "1.2s" in output


class TestResultsLogger:
    def test_rate_limit_warns(self) -> None:
        logger = ResultsLogger()
        logger._logger = MagicMock()

        logger.rate_limit(2.5)

        logger._logger.warning.assert_called_once_with("Rate limited. Waiting 2.5s...")

    def test_summary(self) -> None:
        logger = _capture(ResultsLogger())

        logger.summary(messages=3, downloaded=2, skipped=1, contributions=2, elapsed=0.5)

        output = _output(logger)
        assert "Accepted submissions" in output
        assert "Contributions posted" in output
        assert "Roles granted" in output

    def test_pack_start(self) -> None:
        logger = _capture(ResultsLogger())

        logger.pack_start("Faithful 32x", 555)

        output = _output(logger)
        assert "Faithful 32x" in output
        assert "555" in output
