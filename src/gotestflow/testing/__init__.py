"""Go test orchestration: phases, output filtering, coverage and result caching."""

from gotestflow.testing.cache import ResultCache
from gotestflow.testing.console_filter import RACE_BANNER, ConsoleFilter
from gotestflow.testing.coverage import ExactCoverage, average_coverage
from gotestflow.testing.models import CacheEntry, PhaseResult, StatusSummary, TestRun
from gotestflow.testing.orchestrator import Orchestrator
from gotestflow.testing.toolchain import GoToolchain

__all__ = [
    "CacheEntry",
    "ConsoleFilter",
    "ExactCoverage",
    "GoToolchain",
    "Orchestrator",
    "PhaseResult",
    "RACE_BANNER",
    "ResultCache",
    "StatusSummary",
    "TestRun",
    "average_coverage",
]
