from urllib.parse import urlparse, urljoin
import logging

logger = logging.getLogger(__name__)


def validate_url(url: str) -> bool:
    """
    Uses urlparse to determine whether the provided value is an absolute http(s) URL

    Args:
        url (str): The url string to validate
    Returns:
        True if the url is valid, and False Otherwise
    """
    try:
        result = urlparse(url)
        if result.scheme not in ("http", "https") or not result.netloc:
            raise ValueError("a scheme of http or https and a host are required")

        return True

    except (ValueError, AttributeError) as e:
        logger.warning(f"The value, '{url}' is not a valid URL: {e}")
    return False


def normalize_base_url(url: str) -> str:
    """
    Ensures the base URL ends with a single '/' so that relative endpoint paths are resolved
    below it: without it, 'https://api.mindat.org/v1' + 'countries/' would drop the 'v1' segment.

    Examples:
        >>> normalize_base_url("https://api.mindat.org/v1")
        'https://api.mindat.org/v1/'
    """
    return url.rstrip("/") + "/"


def join_url(base_url: str, path: str) -> str:
    """
    Resolves an endpoint path against the base URL. A leading '/' on the path is ignored so that
    '/countries/' and 'countries/' both resolve below the versioned root.

    Examples:
        >>> join_url("https://api.mindat.org/v1/", "/countries/1/")
        'https://api.mindat.org/v1/countries/1/'
    """
    return urljoin(normalize_base_url(base_url), path.lstrip("/"))


__all__ = ["validate_url", "normalize_base_url", "join_url"]
