"""
Utility Helper Functions - String, array, URL, file and environment helpers

Part of the Ash Helpers library.

License: MIT
"""

import os
import re
import secrets
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Iterator, List, Optional, Tuple, Union
from urllib.parse import quote_plus

from ..errors import RequestContextError, RandomSourceError
from ..infrastructure.request_context import get_current_request

logger = logging.getLogger(__name__)

DEFAULT_TRUNCATE_LENGTH = 100
DEFAULT_TRUNCATE_SUFFIX = "..."
DEFAULT_RANDOM_STRING_LENGTH = 16

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]

_SLUG_EDGES = re.compile(r"^[^A-Za-z0-9-]+|[^A-Za-z0-9-]+$")
_SLUG_RUNS = re.compile(r"[^A-Za-z0-9-]+")
_WORD_START = re.compile(r"(^|[ \t\r\n\f\v])(\S)")

# Environment values that the framework's env() turns into Python values
_ENV_LITERALS = {
    "true": True,
    "(true)": True,
    "false": False,
    "(false)": False,
    "empty": "",
    "(empty)": "",
    "null": None,
    "(null)": None,
}

PathLike = Union[str, os.PathLike]


def slugify(text: str) -> str:
    """
    Convert a string into a URL-friendly slug.

    Runs of characters outside ``[A-Za-z0-9-]`` become a single hyphen;
    runs at either end of the text are dropped. Hyphens already present in
    the text are kept as they are.

    Args:
        text: Text to slugify

    Returns:
        Lowercase slug
    """
    if not text:
        return ""

    text = _SLUG_EDGES.sub("", text)
    return _SLUG_RUNS.sub("-", text).lower()


def truncate(
    text: str,
    length: int = DEFAULT_TRUNCATE_LENGTH,
    append: str = DEFAULT_TRUNCATE_SUFFIX,
) -> str:
    """
    Truncate text to a byte length and append a suffix.

    Length is measured in UTF-8 bytes. A character split by the cut is
    dropped rather than emitted half-encoded.

    Args:
        text: Text to truncate
        length: Maximum length in bytes
        append: Suffix added when the text is truncated

    Returns:
        Truncated text, or the input unchanged when it fits
    """
    encoded = text.encode("utf-8")
    if len(encoded) <= length:
        return text

    return encoded[: max(length, 0)].decode("utf-8", errors="ignore") + append


def camel_case(text: str) -> str:
    """
    Convert hyphen, underscore or space separated words to camelCase.

    Only the first letter of each word changes case; the rest of the word is
    left alone.

    Args:
        text: Text to convert

    Returns:
        camelCase text
    """
    spaced = text.replace("-", " ").replace("_", " ")
    capitalised = _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), spaced)
    joined = capitalised.replace(" ", "")
    return joined[:1].lower() + joined[1:]


# Framework-style name
camelCase = camel_case


def _is_collection(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _children(collection: Any) -> Iterator[Any]:
    if isinstance(collection, Mapping):
        return iter(collection.values())
    return iter(collection)


def array_flatten(collection: Any) -> List[Any]:
    """
    Flatten a nested collection into a list of its leaf values.

    Args:
        collection: Mapping, list or tuple, nested to any depth

    Returns:
        Leaf values in depth-first order
    """
    result = []
    for value in _children(collection):
        if _is_collection(value):
            result.extend(array_flatten(value))
        else:
            result.append(value)
    return result


def _has_key(key: Any, collection: Any) -> bool:
    if isinstance(collection, Mapping):
        return key in collection
    # Sequences are keyed by position
    if isinstance(key, int) and not isinstance(key, bool):
        return 0 <= key < len(collection)
    return False


def array_key_exists_recursive(key: Any, collection: Any) -> bool:
    """
    Check whether a key exists at any depth of a nested collection.

    Args:
        key: Mapping key or sequence index to look for
        collection: Mapping, list or tuple to search

    Returns:
        True if the key exists in the collection or any nested collection
    """
    if _has_key(key, collection):
        return True

    for element in _children(collection):
        if _is_collection(element) and array_key_exists_recursive(key, element):
            return True
    return False


def current_url(request=None) -> str:
    """
    Return the URL of the current request without its query string.

    Args:
        request: Request to use instead of the one bound to the context

    Returns:
        Absolute URL of the request

    Raises:
        RequestContextError: If no request is available
    """
    request = request if request is not None else get_current_request()
    if request is None:
        logger.debug("current_url() called with no bound request")
        raise RequestContextError("current_url() needs an active request")

    url = str(request.url.replace(query="", fragment=""))
    return url.rstrip("/")


def _query_scalar(value: Any) -> str:
    if value is True:
        return "1"
    if value is False:
        return "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _urlencode(text: str) -> str:
    # Same alphabet as PHP urlencode(): only letters, digits and "-_." stay literal
    return quote_plus(text, safe="").replace("~", "%7E")


def _query_pairs(params: Any, prefix: Optional[str] = None) -> Iterator[Tuple[str, str]]:
    items = params.items() if isinstance(params, Mapping) else enumerate(params)
    for key, value in items:
        name = f"{prefix}[{key}]" if prefix is not None else str(key)
        if value is None:
            continue
        if _is_collection(value):
            yield from _query_pairs(value, name)
        else:
            yield name, _query_scalar(value)


def build_query(params: Union[Mapping, list, tuple, None]) -> str:
    """
    Build a URL-encoded query string.

    Nested mappings and lists become ``key[sub]=value`` pairs, booleans
    become ``1``/``0``, whole floats lose their ``.0`` and ``None`` values
    are skipped.

    Args:
        params: Query parameters

    Returns:
        Query string without a leading ``?``
    """
    if not params:
        return ""

    return "&".join(
        f"{_urlencode(name)}={_urlencode(value)}" for name, value in _query_pairs(params)
    )


def url_with_params(url: str, params: Optional[Mapping] = None) -> str:
    """
    Construct a URL with query parameters.

    A ``?`` is always appended, even when there are no parameters.

    Args:
        url: Base URL
        params: Query parameters

    Returns:
        URL with the query string
    """
    return f"{url}?{build_query(params)}"


def format_bytes(size_bytes: int) -> str:
    """
    Format a byte count in human-readable form.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted size string, e.g. "1.50 KB"

    Raises:
        ValueError: If size_bytes is negative
    """
    if size_bytes < 0:
        raise ValueError("Size cannot be negative")

    # floor(log1024(size)) without floating point error at exact powers
    exponent = (size_bytes.bit_length() - 1) // 10 if size_bytes else 0
    exponent = min(exponent, len(SIZE_UNITS) - 1)

    return f"{size_bytes / 1024 ** exponent:.2f} {SIZE_UNITS[exponent]}"


def file_size_formatted(path: PathLike) -> str:
    """
    Format a file's size in human-readable form.

    Args:
        path: File path

    Returns:
        Formatted size string

    Raises:
        FileNotFoundError: If the path does not exist
        OSError: If the size cannot be read
    """
    try:
        size = Path(path).stat().st_size
    except OSError as e:
        logger.debug(f"Cannot read size of {path}: {e}")
        raise

    return format_bytes(size)


def _cast_env(value: str) -> Any:
    literal = value.lower()
    if literal in _ENV_LITERALS:
        return _ENV_LITERALS[literal]

    if len(value) > 1 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]

    return value


def env_value(
    key: str,
    default: Any = None,
    environ: Optional[Mapping] = None,
) -> Any:
    """
    Retrieve an environment variable's value.

    "true", "false", "empty" and "null" (optionally in parentheses) are
    turned into True, False, "" and None; surrounding quotes are removed.

    Args:
        key: Environment variable name
        default: Value (or zero-argument callable) used when the key is unset
        environ: Mapping to read from instead of ``os.environ``

    Returns:
        The variable's value or the default
    """
    source = os.environ if environ is None else environ
    if key not in source:
        return default() if callable(default) else default

    return _cast_env(source[key])


def generate_random_string(length: int = DEFAULT_RANDOM_STRING_LENGTH) -> str:
    """
    Generate a random hexadecimal string.

    ``length // 2`` random bytes are hex-encoded, so odd lengths produce one
    character less than requested.

    Args:
        length: Requested length of the string

    Returns:
        Hexadecimal string

    Raises:
        ValueError: If length is negative
        RandomSourceError: If no secure random source is available
    """
    if length < 0:
        raise ValueError("Length cannot be negative")

    try:
        return secrets.token_bytes(length // 2).hex()
    except NotImplementedError as e:
        logger.error(f"No secure random source available: {e}")
        raise RandomSourceError("No secure random source available") from e
