"""
Structured Logging for the Hull Engine
======================================

Bounded Context: Observability

JSON-structured logging for the solver, stepper and session.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function (configures level and handler)
    library_logger: Unconfigured logger used as the engine default

Example:
    >>> from giftwrap_hull.logging import create_logger, LogEvent
    >>> logger = create_logger("solver")
    >>> logger.info(
    ...     event=LogEvent.HULL_SOLVE_COMPLETED,
    ...     message="Hull built",
    ...     metadata={'hull_size': 4}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger, library_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
    'library_logger',
]
