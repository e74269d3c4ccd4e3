"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Structured logger that outputs one JSON object per record.

Design:
- JSON output (compatible with log aggregators)
- Wraps Python's logging module
- Contextual metadata (component, anchor, step, etc.)
- Type-safe events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="solver")
    >>> logger.info(
    ...     event=LogEvent.HULL_SOLVE_COMPLETED,
    ...     message="Hull built",
    ...     metadata={'point_count': 12, 'hull_size': 5}
    ... )

Output:
    {
        "timestamp": "2026-10-19T15:30:45.123456+00:00",
        "level": "INFO",
        "component": "solver",
        "event": "hull.solve.completed",
        "message": "Hull built",
        "metadata": {"point_count": 12, "hull_size": 5}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "solver", "stepper")
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: Optional[int] = logging.INFO,
        logger_name: Optional[str] = None,
        configure: bool = True
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "stepper")
            level: Logging level (default: INFO); None leaves the level alone
            logger_name: Custom logger name (default: giftwrap.<component>)
            configure: Attach a JSON stream handler if the logger has none
        """
        self.component = component
        self.logger_name = logger_name or f"giftwrap.{component}"
        self.logger = logging.getLogger(self.logger_name)
        if level is not None:
            self.logger.setLevel(level)

        # Configure JSON formatter if not already configured
        if configure and not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Internal log method with structured format.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR)
            event: Typed log event
            message: Human-readable message
            metadata: Additional context (anchor, step, etc.)
            exc_info: Exception for ERROR logs
        """
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(log_level, json.dumps(log_entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log DEBUG level message.

        Used for per-comparison stepper traces, which are too chatty for INFO.
        """
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context

        Example:
            >>> logger.info(
            ...     event=LogEvent.STEPPER_CREATED,
            ...     message="Stepper ready",
            ...     metadata={'point_count': 8, 'start': 3}
            ... )
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log WARNING level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
        """
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance (type and message are embedded)

        Example:
            >>> try:
            ...     HullStepper(points)
            ... except InsufficientPointsError as e:
            ...     logger.error(
            ...         event=LogEvent.INSUFFICIENT_POINTS,
            ...         message="Cannot start stepping",
            ...         exc_info=e,
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)

class JSONFormatter(logging.Formatter):
    """
    Formatter used by StructuredLogger handlers.

    The message built by StructuredLogger is already JSON, so it is passed
    through untouched.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Args:
        component: Component identifier
        level: Logging level (default: INFO)

    Returns:
        Configured StructuredLogger instance

    Example:
        >>> logger = create_logger("stepper", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)


def library_logger(component: str) -> StructuredLogger:
    """
    Logger for engine code that was not handed one.

    Neither sets a level nor attaches a handler, so output follows the
    application's own logging configuration (silent by default).

    Args:
        component: Component identifier

    Example:
        >>> _default_logger = library_logger("solver")
    """
    return StructuredLogger(component=component, level=None, configure=False)


# Library convention: no "No handlers could be found" fallback to stderr
logging.getLogger("giftwrap").addHandler(logging.NullHandler())
