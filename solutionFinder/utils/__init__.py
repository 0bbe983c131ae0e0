"""Utilities for the solution finder."""

from .logging_utils import (
    log_error,
    log_tool_call,
    log_tool_result,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "log_tool_call",
    "log_tool_result",
    "log_error",
]
