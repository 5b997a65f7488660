"""
Ash Helpers - Small static helpers for strings, collections, dates and URLs

This package provides:
- Text helpers: slugify, truncate, camelCase
- Collection helpers: array_flatten, array_key_exists_recursive
- Date helpers: format_date, carbon_date
- URL helpers: current_url, url_with_params
- Misc helpers: file_size_formatted, env_value, generate_random_string

License: MIT
"""

__version__ = "1.0.0"
__author__ = "Ash"

# Helper exports
from .utils.helpers import (
    slugify,
    truncate,
    camel_case,
    camelCase,
    array_flatten,
    array_key_exists_recursive,
    current_url,
    build_query,
    url_with_params,
    format_bytes,
    file_size_formatted,
    env_value,
    generate_random_string,
)
from .utils.dates import DEFAULT_DATE_FORMAT, parse_date, format_date, carbon_date

# Error exports
from .errors import HelpersError, DateParseError, RandomSourceError, RequestContextError

# Infrastructure exports
from .infrastructure.request_context import bind_request_context, request_scope
from .infrastructure.logging_config import setup_logging

# Configuration exports
from .config import HelpersConfig, ConfigManager, get_config, get_config_manager

__all__ = [
    # Text
    "slugify",
    "truncate",
    "camel_case",
    "camelCase",
    # Collections
    "array_flatten",
    "array_key_exists_recursive",
    # Dates
    "DEFAULT_DATE_FORMAT",
    "parse_date",
    "format_date",
    "carbon_date",
    # URLs
    "current_url",
    "build_query",
    "url_with_params",
    # Misc
    "format_bytes",
    "file_size_formatted",
    "env_value",
    "generate_random_string",
    # Errors
    "HelpersError",
    "DateParseError",
    "RandomSourceError",
    "RequestContextError",
    # Infrastructure
    "bind_request_context",
    "request_scope",
    "setup_logging",
    # Configuration
    "HelpersConfig",
    "ConfigManager",
    "get_config",
    "get_config_manager",
]
