"""
Utility Functions - The helper surface of the library

This module provides utility functions for:
- Slugging, truncating and camel-casing text
- Flattening and searching nested collections
- Parsing and formatting dates
- Building URLs and reading the current request URL
- File sizes, environment values and random strings

License: MIT
"""

from .helpers import (
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
from .dates import (
    DEFAULT_DATE_FORMAT,
    parse_date,
    render_php_format,
    format_date,
    carbon_date,
)

__all__ = [
    "slugify",
    "truncate",
    "camel_case",
    "camelCase",
    "array_flatten",
    "array_key_exists_recursive",
    "current_url",
    "build_query",
    "url_with_params",
    "format_bytes",
    "file_size_formatted",
    "env_value",
    "generate_random_string",
    "DEFAULT_DATE_FORMAT",
    "parse_date",
    "render_php_format",
    "format_date",
    "carbon_date",
]
