"""Logging utilities for the solution finder server.

stdout carries MCP protocol frames, so console output goes to stderr.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

LOGGER_NAME = "solutionFinder"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_dir: Optional[Union[str, Path]] = "logs",
) -> logging.Logger:
    """Setup logging configuration for the solution finder.

    Args:
        level: Console logging level (default: INFO)
        log_dir: Directory for the session log file, or None/"" for console only

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)  # Capture all child logs, handlers filter
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    log_file = None
    if log_dir:
        logs_path = Path(log_dir)
        logs_path.mkdir(parents=True, exist_ok=True)
        log_file = logs_path / f"solution_finder_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)

    logger.info("=" * 80)
    logger.info("Solution finder session started")
    logger.info(f"Log file: {log_file or 'disabled'}")
    logger.info("=" * 80)

    return logger


def log_tool_call(logger: logging.Logger, tool_name: str, args: Dict[str, Any]) -> None:
    """Log tool invocation.

    Args:
        logger: Logger instance
        tool_name: Name of the tool being called
        args: Tool arguments
    """
    logger.info(f"Tool call: {tool_name}")
    logger.debug(f"  Arguments: {json.dumps(args, ensure_ascii=False, default=str)}")


def log_tool_result(
    logger: logging.Logger,
    tool_name: str,
    result: Any,
    success: bool = True,
    max_length: int = 500,
) -> None:
    """Log tool execution result, truncating long previews.

    Args:
        logger: Logger instance
        tool_name: Name of the tool
        result: Tool execution result
        success: Whether the tool executed successfully
        max_length: Preview length before truncation
    """
    status = "✓ Success" if success else "✗ Failed"
    logger.info(f"Tool result: {tool_name} - {status}")

    result_str = str(result)
    if len(result_str) > max_length:
        result_str = result_str[:max_length] + "... (truncated)"
    logger.debug(f"  Result: {result_str}")


def log_error(logger: logging.Logger, error: Exception, context: str = "") -> None:
    """Log error with context.

    Args:
        logger: Logger instance
        error: Exception instance
        context: Additional context about where the error occurred
    """
    logger.error(f"Error occurred: {type(error).__name__}: {str(error)}")
    if context:
        logger.error(f"  Context: {context}")
    logger.debug("Full traceback:", exc_info=error)

