"""External process execution."""

from gotestflow.runner.process import OutputCallback, ProcessResult, ProcessRunner

__all__ = ["OutputCallback", "ProcessResult", "ProcessRunner"]
