"""
Structured Logging
==================
structlog integration for planner run events.

Usage:
    from duty_rota.utils.structured_logging import get_structured_logger

    log = get_structured_logger("duty_rota.solver.planner")
    log.info("auto_assign_finished", slots=17, assigned=17)
"""
import logging

import structlog


def configure_structlog(json_output: bool = False) -> None:
    """
    Configure structlog for the application.

    Args:
        json_output: If True, output JSON logs (for production).
                    If False, use colored console output (for development).
    """
    if json_output:
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(),
            cache_logger_on_first_use=True,
        )
    else:
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="%H:%M:%S"),
                structlog.dev.ConsoleRenderer(colors=True),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(),
            cache_logger_on_first_use=True,
        )


def get_structured_logger(name: str):
    """Get a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """
    Bind context variables for all subsequent log calls.

    Args:
        **kwargs: Context values (e.g., month="2025-10")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()
