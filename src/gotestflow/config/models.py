"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (GOTESTFLOW__SECTION__KEY)
3. Module YAML (<module>/.gotestflow.yaml)
4. Global YAML (~/.config/gotestflow/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    GOTESTFLOW__<SECTION>__<KEY>=<VALUE>

Examples:
    GOTESTFLOW__LOGGING__LEVEL=DEBUG
    GOTESTFLOW__TESTING__TIMEOUT_SEC=120
    GOTESTFLOW__CROSS_TARGET__HARNESS=wasmbrowsertest
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        GOTESTFLOW__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. The CLI switches to DEBUG with -v.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class TestingConfig(BaseModel):
    """Test run configuration.

    Env vars:
        GOTESTFLOW__TESTING__TIMEOUT_SEC: Per-process go test timeout
        GOTESTFLOW__TESTING__SLOW_THRESHOLD_SEC: Slow-test report threshold
        GOTESTFLOW__TESTING__EXACT_COVERAGE: Merge per-package profiles
    """

    timeout_sec: int = Field(
        default=30,
        description="Value passed to go test -timeout. The process itself is killed "
        "10s later so go can print its own timeout panic first.",
    )
    slow_threshold_sec: float = Field(
        default=2.0,
        description="Report the slowest test when it takes at least this long.",
    )
    exact_coverage: bool = Field(
        default=True,
        description="Re-run each package with -coverprofile and merge the profiles. "
        "Slower than averaging per-package percentages but weighted by statements.",
    )
    integration_tag: str = Field(
        default="integration",
        description="Build tag added to vet, list and test when running all tests.",
    )

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"timeout_sec must be positive, got {v}")
        return v

    @field_validator("slow_threshold_sec")
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"slow_threshold_sec must not be negative, got {v}")
        return v


class CrossTargetConfig(BaseModel):
    """Cross-compiled (browser) test target.

    Env vars:
        GOTESTFLOW__CROSS_TARGET__GOOS: Target OS (default: js)
        GOTESTFLOW__CROSS_TARGET__GOARCH: Target architecture (default: wasm)
        GOTESTFLOW__CROSS_TARGET__HARNESS: go test -exec program
        GOTESTFLOW__CROSS_TARGET__INSTALL_PACKAGE: go install path for the harness
    """

    goos: str = "js"
    goarch: str = "wasm"
    harness: str = Field(
        default="wasmbrowsertest",
        description="Executable passed to go test -exec for the cross target.",
    )
    install_package: str = Field(
        default="github.com/tinywasm/wasmbrowsertest@latest",
        description="Installed with go install when the harness is not on PATH.",
    )


class CacheConfig(BaseModel):
    """Result cache configuration.

    Env vars:
        GOTESTFLOW__CACHE__DIR_NAME: Directory name under the system temp dir
    """

    dir_name: str = Field(
        default="gotest-cache",
        description="Cache directory, created under the system temp directory.",
    )


class GoTestFlowConfig(BaseModel):
    """Root configuration for gotestflow.

    All settings can be configured via:
    1. Environment variables: GOTESTFLOW__SECTION__KEY
    2. YAML config files (module or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    testing: TestingConfig = Field(default_factory=TestingConfig)
    cross_target: CrossTargetConfig = Field(default_factory=CrossTargetConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
