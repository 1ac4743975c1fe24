"""Structlog configuration and logger setup.

The SDK never configures logging on import. Applications that want the
SDK's rendering call `configure_logging()` once at startup; otherwise the
SDK's structlog loggers follow whatever the host application configured.

Usage:
    from cumulus.logging import configure_logging, get_module_logger

    configure_logging(log_level="DEBUG")

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from cumulus.logging.formatters import mask_sensitive_data, truncate_large_values


def configure_logging(
    log_level: Optional[str] = None,
    json_output: Optional[bool] = None,
    extra_processors: Optional[List[Any]] = None,
) -> BoundLogger:
    """Configure structured logging for SDK consumers.

    Configures structlog with:
    - Context variable merging for invocation and correlation IDs
    - File/line/function callsite parameters
    - Masking of credentials and signatures, truncation of large values
    - Console rendering, or JSON when `json_output` is set

    Args:
        log_level: Log level name (DEBUG, INFO, WARNING, ...). Defaults to
            the LOG_LEVEL setting.
        json_output: Render JSON lines instead of console output. Defaults to
            the LOG_JSON setting.
        extra_processors: Processors inserted before the renderer.

    Returns:
        Configured logger instance
    """
    from cumulus.configuration import get_settings

    logging_settings = get_settings().logging
    effective_level = log_level or logging_settings.LOG_LEVEL
    use_json = json_output if json_output is not None else logging_settings.LOG_JSON

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        mask_sensitive_data(),
        truncate_large_values(),
    ]
    if extra_processors:
        processors.extend(extra_processors)

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger instance bound to a name.

    Args:
        name: Optional logger name. The calling module's name is used when
            omitted.

    Returns:
        Logger with `logger_name` bound
    """
    logger = structlog.get_logger()
    if name:
        return logger.bind(logger_name=name)

    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame else None
    module = inspect.getmodule(frame) if frame else None
    if module:
        return logger.bind(logger_name=module.__name__)
    return logger.bind(logger_name="unknown")


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with component context.

    Example:
        # In cumulus/services/dynamodb/handlers.py
        logger = get_module_logger()
        # context: {"component": "handlers",
        #           "module_path": "cumulus.services.dynamodb.handlers"}
    """
    logger = structlog.get_logger()
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame else None
    module = inspect.getmodule(frame) if frame else None
    if module:
        parts = module.__name__.split(".")
        return logger.bind(component=parts[-1], module_path=module.__name__)
    return logger.bind(component="unknown")
