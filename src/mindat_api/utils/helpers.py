import logging
from typing import Any, Optional
from urllib.parse import urlsplit, parse_qs

logger = logging.getLogger(__name__)


def try_int(value: Any) -> Optional[int]:
    """
    Attempts to convert a value to an integer, returning None when it can't.

    Examples:
        >>> try_int("2")
        2
        >>> try_int("2.5") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def get_query_parameter(url: Optional[str], key: str) -> Optional[str]:
    """
    Extracts a single query parameter from an absolute URL.

    Relative or malformed URLs, and URLs without the parameter, yield None instead of raising.

    Examples:
        >>> get_query_parameter("https://api.mindat.org/v1/localities/?cursor=abc&page_size=10", "cursor")
        'abc'
        >>> get_query_parameter("?cursor=abc", "cursor") is None
        True
    """
    if not isinstance(url, str) or not url:
        return None
    try:
        parts = urlsplit(url)
        if not (parts.scheme and parts.netloc):
            return None
        values = parse_qs(parts.query, keep_blank_values=True).get(key)
    except ValueError as e:
        logger.debug("Could not parse the query component of '%s': %s", url, e)
        return None
    return values[0] if values else None
