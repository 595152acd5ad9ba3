"""gotestflow error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Module
- 7xxx: Test
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Module (3xxx)
    MODULE_GO_MOD_MISSING = 3001
    MODULE_NAME_MISSING = 3002

    # Test (7xxx)
    TEST_RUN_FAILED = 7001
    TEST_HARNESS_UNAVAILABLE = 7002
    TEST_COVERAGE_UNAVAILABLE = 7003
    TEST_CACHE_UNAVAILABLE = 7004


@dataclass(frozen=True, slots=True)
class GoTestFlowError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(GoTestFlowError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class ModuleError(GoTestFlowError):
    """The working directory is not a usable Go module."""

    @classmethod
    def go_mod_missing(cls, root: str) -> "ModuleError":
        return cls(
            code=ErrorCode.MODULE_GO_MOD_MISSING,
            message=f"go.mod not found in {root}",
            details={"root": root},
        )

    @classmethod
    def module_name_missing(cls, path: str) -> "ModuleError":
        return cls(
            code=ErrorCode.MODULE_NAME_MISSING,
            message=f"module name not found in {path}",
            details={"path": path},
        )


class TestRunError(GoTestFlowError):
    """A run finished with failing tests or analysis issues.

    The summary is the same text a successful run would return, so callers
    can print it either way.
    """

    __test__ = False

    @classmethod
    def failed(cls, summary: str) -> "TestRunError":
        return cls(
            code=ErrorCode.TEST_RUN_FAILED,
            message=summary,
            details={"summary": summary},
        )

    @property
    def summary(self) -> str:
        return self.message


class HarnessError(GoTestFlowError):
    """Cross-target harness is missing and could not be installed."""

    @classmethod
    def install_failed(cls, package: str, reason: str) -> "HarnessError":
        return cls(
            code=ErrorCode.TEST_HARNESS_UNAVAILABLE,
            message=f"go install {package} failed: {reason}",
            details={"package": package, "reason": reason},
        )


class CoverageError(GoTestFlowError):
    """Exact coverage could not be computed."""

    @classmethod
    def no_packages(cls) -> "CoverageError":
        return cls(code=ErrorCode.TEST_COVERAGE_UNAVAILABLE, message="no packages")

    @classmethod
    def no_data(cls) -> "CoverageError":
        return cls(
            code=ErrorCode.TEST_COVERAGE_UNAVAILABLE,
            message="no coverage data collected",
        )

    @classmethod
    def tool_failed(cls, reason: str) -> "CoverageError":
        return cls(
            code=ErrorCode.TEST_COVERAGE_UNAVAILABLE,
            message=f"cover tool failed: {reason}",
            details={"reason": reason},
        )

    @classmethod
    def total_missing(cls) -> "CoverageError":
        return cls(code=ErrorCode.TEST_COVERAGE_UNAVAILABLE, message="total not found")


class CacheError(GoTestFlowError):
    """Result cache key could not be derived from the repository."""

    @classmethod
    def key_unavailable(cls, path: str, reason: str) -> "CacheError":
        return cls(
            code=ErrorCode.TEST_CACHE_UNAVAILABLE,
            message=f"Cannot compute cache key for {path}: {reason}",
            details={"path": path, "reason": reason},
        )
