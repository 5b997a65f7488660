"""
Infrastructure Components - Logging and request context

This module provides:
- structlog-rendered logging configuration
- Request binding for request-aware helpers

License: MIT
"""

from .logging_config import (
    setup_logging,
    setup_production_logging,
    setup_development_logging,
    configure_logging,
    build_formatter,
)
from .request_context import (
    bind_request_context,
    get_current_request,
    request_scope,
)

__all__ = [
    "setup_logging",
    "setup_production_logging",
    "setup_development_logging",
    "configure_logging",
    "build_formatter",
    "bind_request_context",
    "get_current_request",
    "request_scope",
]
