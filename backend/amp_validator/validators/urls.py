"""URL helpers: AMP cache detection and format selection from a URL fragment."""

from urllib.parse import parse_qsl, urlsplit

from amp_validator.config import get_settings

# Documents served from the cache do not map back to an authored source.
CACHE_DOMAIN = "cdn.ampproject.org"

FORMAT_FRAGMENT_KEY = "development"


def is_known_cache_url(url: str) -> bool:
    """True only when the URL's host is exactly the AMP cache domain."""
    return urlsplit(url).hostname == CACHE_DOMAIN


def remove_fragment(url: str) -> str:
    """Return the URL without its '#fragment' part."""
    return url.split("#", 1)[0]


def select_format_from_url(url: str) -> str:
    """Pick the validation format from a '#development=<format>' fragment.

    'development=1' means the default AMP format; any other value is used
    as the format name. The last occurrence wins.
    """
    default_format = get_settings().DEFAULT_FORMAT
    selected = default_format
    fragment = urlsplit(url).fragment
    for key, value in parse_qsl(fragment, keep_blank_values=True):
        if key == FORMAT_FRAGMENT_KEY:
            selected = default_format if value == "1" else value
    return selected
