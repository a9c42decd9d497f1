import structlog
import logging
import sys
from typing import Any, Dict, Optional
from .config import settings

def level_to_int(level: str) -> int:
    """
    Convert a level name ('info', 'WARNING', ...) to its numeric value.
    Unknown names fall back to WARNING.
    """
    value = logging.getLevelName(str(level).upper())
    if isinstance(value, int):
        return value
    return logging.WARNING

def env_processor(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Processor that stamps the configured environment on every event.
    Values bound explicitly (e.g. via bind_contextvars) win.
    """
    event_dict.setdefault("env", settings.ENV)
    return event_dict

def stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    """
    Logger factory bound to whatever sys.stderr is at call time.
    stdout is reserved for reports.
    """
    return structlog.PrintLogger(file=sys.stderr)

def setup_logging(level: Optional[str] = None):
    """Configure structlog. Can be called manually if needed to reconfigure."""
    processors = [
        structlog.contextvars.merge_contextvars,
        env_processor,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if sys.stderr.isatty():
        # In a terminal, use colorized output
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        # In CI/non-tty, use JSON
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_to_int(level or settings.LOG_LEVEL)),
        logger_factory=stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

# Automatically configure on import to ensure any loggers created later recognize the config
setup_logging()

# Export a default logger for convenience
logger = structlog.get_logger()
