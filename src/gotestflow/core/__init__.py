"""Core module exports."""

from gotestflow.core.errors import (
    CacheError,
    ConfigError,
    CoverageError,
    ErrorCode,
    GoTestFlowError,
    HarnessError,
    ModuleError,
    TestRunError,
)
from gotestflow.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from gotestflow.core.progress import console_line, spinner, status

__all__ = [
    # Errors
    "CacheError",
    "ConfigError",
    "CoverageError",
    "ErrorCode",
    "GoTestFlowError",
    "HarnessError",
    "ModuleError",
    "TestRunError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Output
    "console_line",
    "spinner",
    "status",
]
