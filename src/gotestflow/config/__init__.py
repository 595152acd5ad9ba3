"""Config module exports."""

from gotestflow.config.loader import load_config
from gotestflow.config.models import (
    CacheConfig,
    CrossTargetConfig,
    GoTestFlowConfig,
    LoggingConfig,
    LogOutputConfig,
    TestingConfig,
)

__all__ = [
    "load_config",
    "GoTestFlowConfig",
    "CacheConfig",
    "CrossTargetConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "TestingConfig",
]
