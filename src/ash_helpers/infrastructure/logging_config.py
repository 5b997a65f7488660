"""
Logging Configuration - structlog rendering for the helpers' stdlib loggers

Modules log through ``logging.getLogger(__name__)``. The handlers installed
here format every record with ``structlog.stdlib.ProcessorFormatter``, so
plain stdlib records and ``structlog.get_logger()`` events go through the
same processor chain and come out either as console lines or JSON.

Part of the Ash Helpers library.

License: MIT
"""

import logging
import logging.config
import sys
import os
from typing import Any, Dict, List, Optional

import structlog

LOG_FORMATS = ("simple", "detailed", "json")

# Format names accepted from configuration that map onto LOG_FORMATS
_FORMAT_ALIASES = {"structured": "json"}


def _pre_chain(format_type: str) -> List[Any]:
    """Processors applied to records that did not come from structlog."""
    chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if format_type == "detailed":
        chain.append(
            structlog.processors.CallsiteParameterAdder(
                {
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                }
            )
        )
    return chain


def build_formatter(format_type: str = "simple") -> structlog.stdlib.ProcessorFormatter:
    """
    Build the formatter used by every handler.

    Args:
        format_type: 'simple' or 'detailed' console output, or 'json'

    Returns:
        ProcessorFormatter rendering records in the chosen format
    """
    if format_type == "json":
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=False)]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(format_type),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
    )


def _configure_structlog() -> None:
    """Route structlog loggers into stdlib so the handlers render them."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(
    level: str = "INFO",
    format_type: str = "simple",
    log_file: Optional[str] = None
) -> None:
    """
    Install root handlers that render through structlog.

    Args:
        level: Logging level
        format_type: 'simple', 'detailed' or 'json' ('structured' means 'json')
        log_file: Optional path of a rotating log file
    """
    format_type = _FORMAT_ALIASES.get(format_type, format_type)
    if format_type not in LOG_FORMATS:
        format_type = "simple"

    handlers: Dict[str, Dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "structlog",
            "stream": sys.stdout,
        }
    }

    if log_file:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "structlog",
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {"()": build_formatter, "format_type": format_type},
            },
            "handlers": handlers,
            "root": {"level": level, "handlers": list(handlers)},
        }
    )
    _configure_structlog()


def setup_logging(
    level: str = "INFO",
    format_type: str = "simple",
    log_file: Optional[str] = None
) -> None:
    """
    Setup logging for the helpers and the application around them.

    LOG_LEVEL, LOG_FORMAT and LOG_FILE override the arguments. With
    ENVIRONMENT=production the output is always JSON.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Format type ('simple', 'detailed', 'json')
        log_file: Optional log file path
    """
    log_level = os.getenv("LOG_LEVEL", level).upper()
    log_format = os.getenv("LOG_FORMAT", format_type).lower()
    log_file_path = os.getenv("LOG_FILE", log_file)

    if os.getenv("ENVIRONMENT", "development") == "production":
        setup_production_logging(log_level, log_file_path)
    else:
        setup_development_logging(log_level, log_format, log_file_path)


def setup_production_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Setup production logging with JSON lines.

    Args:
        level: Logging level
        log_file: Optional log file path
    """
    configure_logging(level, "json", log_file)
    logging.getLogger(__name__).info(
        "Production logging configured", extra={"file_logging": log_file is not None}
    )


def setup_development_logging(
    level: str = "DEBUG",
    format_type: str = "simple",
    log_file: Optional[str] = None
) -> None:
    """
    Setup development logging with readable console lines.

    Args:
        level: Logging level
        format_type: Format type ('simple', 'detailed', 'json')
        log_file: Optional log file path
    """
    configure_logging(level, format_type, log_file)
    logging.getLogger(__name__).debug(
        "Development logging configured", extra={"log_format": format_type}
    )
