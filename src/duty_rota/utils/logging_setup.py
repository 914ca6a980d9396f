"""
Duty Rota Logging Infrastructure
================================
Multi-level logging with file rotation and function tracing.

Levels:
    TRACE (5): Function entry/exit with arguments
    DEBUG (10): Slot counts, per-candidate planner decisions
    INFO (20): Month changes, planner runs
    WARNING (30): Conflicts found on an assignment state
    ERROR (40): Exceptions
"""
import functools
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable, Optional


ROOT_LOGGER = "duty_rota"

# Custom TRACE level (below DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CONSOLE_FORMAT = "[%(asctime)s] %(levelname)-7s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = "logs/duty_rota.log",
) -> logging.Logger:
    """
    Attach a console handler and, optionally, a rotating file handler
    to the ``duty_rota`` logger. Calling it again replaces the handlers.

    Args:
        level: Minimum level for both handlers
        log_file: Path to log file (None = console only)

    Returns:
        The package root logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(TRACE)  # Handlers filter
    logger.handlers.clear()

    threshold = getattr(logging, level.upper(), logging.INFO)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(threshold)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path, maxBytes=1024 * 1024, backupCount=2, encoding="utf-8"
        )
        file_handler.setLevel(threshold)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {level.upper()}, file={log_file or 'disabled'}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, e.g. ``duty_rota.solver.planner``."""
    return logging.getLogger(name)


def _describe(value) -> str:
    if isinstance(value, (list, tuple)):
        return f"<{len(value)} items>"
    return repr(value)[:40]


def log_function_call(func: Callable) -> Callable:
    """
    Trace a core operation at TRACE level: arguments on entry, result
    size on exit, and the exception if one escapes.
    """
    logger = logging.getLogger(f"{ROOT_LOGGER}.trace.{func.__module__}")

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        name = func.__name__
        call_args = [_describe(a) for a in args] + [f"{k}={_describe(v)}" for k, v in kwargs.items()]
        logger.log(TRACE, f"→ {name}({', '.join(call_args)})")

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"✖ {name} raised: {type(e).__name__}: {e}")
            raise
        logger.log(TRACE, f"← {name} returned {_describe(result)}")
        return result

    return wrapper


def log_constraint(
    logger: logging.Logger,
    name: str,
    satisfied: bool,
    details: str = "",
    level: int = logging.DEBUG
):
    """
    Log a constraint check result.

    Satisfied checks go out at ``level``; violations always at WARNING.
    """
    status = "✓" if satisfied else "✗"
    msg = f"[{status}] {name}"
    if details:
        msg += f" — {details}"

    if satisfied:
        logger.log(level, msg)
    else:
        logger.warning(msg)
