"""
Structured logging framework for uuidv7-kit.

Provides structlog configuration with console output for development and
JSON output for production.
"""

import logging
import os
import sys
import time
from typing import Any

import structlog


def configure_logging(
    *,
    json_output: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Configure structured logging for the application.

    Logs go to stderr so identifiers printed on stdout stay pipeable.

    Args:
        json_output: If True, output JSON logs (for production).
                    If False, output human-readable console logs (for development).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level = getattr(logging, log_level.upper())

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
    logging.getLogger().setLevel(level)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.ExceptionRenderer(),
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)


def is_production() -> bool:
    """
    Determine if running in production environment.

    Checks ENVIRONMENT environment variable. Returns True if 'production', False otherwise.
    """
    return os.getenv("ENVIRONMENT", "development").lower() == "production"


class LogOperation:
    """Context manager for logging operations with automatic timing."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger,
        operation: str,
        **context: Any,
    ):
        """
        Initialize operation logger.

        Args:
            logger: Structured logger instance
            operation: Operation name (e.g., "generate_many", "cli_encode")
            **context: Additional context to include in logs
        """
        self.logger = logger
        self.operation = operation
        self.context = context
        self.start_time: float = 0.0

    def __enter__(self) -> "LogOperation":
        self.start_time = time.perf_counter()
        self.logger.debug(
            f"{self.operation} started",
            operation=self.operation,
            **self.context,
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Complete operation logging with duration and environment-aware stack traces."""
        duration_ms = (time.perf_counter() - self.start_time) * 1000

        if exc_type is None:
            self.logger.info(
                f"{self.operation} completed",
                operation=self.operation,
                duration_ms=round(duration_ms, 2),
                **self.context,
            )
        else:
            # Stack traces only in development
            self.logger.error(
                f"{self.operation} failed",
                operation=self.operation,
                duration_ms=round(duration_ms, 2),
                error=str(exc_val),
                exc_info=not is_production(),
                **self.context,
            )
