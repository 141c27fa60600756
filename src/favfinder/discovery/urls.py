# ABOUTME: URL helpers for favicon discovery: strict syntax checks and reference resolution.
# ABOUTME: resolve_url() turns relative icon references into absolute URLs against a base.

import re
from urllib.parse import SplitResult, urljoin, urlsplit

# ASCII control characters are never valid inside a URL.
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")
# A '%' must always introduce a two-digit hex escape.
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class InvalidURLError(ValueError):
    """Raised when a caller-supplied URL is syntactically invalid."""


def parse_url(url: str) -> SplitResult:
    """Parse a URL, rejecting strings that are not syntactically valid.

    urlsplit() accepts almost anything, so this adds the checks a strict
    parser would make: no control characters, well-formed percent
    escapes, a scheme before any leading colon and a numeric port.

    Raises:
        InvalidURLError: If the string cannot be a URL.
    """
    if _CONTROL_CHARS_RE.search(url.strip()):
        raise InvalidURLError(f"invalid character in URL: {url!r}")
    if _BAD_ESCAPE_RE.search(url):
        raise InvalidURLError(f"invalid escape in URL: {url!r}")
    if url.startswith(":"):
        raise InvalidURLError(f"missing protocol scheme: {url!r}")
    try:
        parts = urlsplit(url.strip())
        _ = parts.port  # raises ValueError for a non-numeric port
    except ValueError as exc:
        raise InvalidURLError(f"invalid URL {url!r}: {exc}") from exc
    return parts


def parse_base_url(url: str) -> str:
    """Validate a base URL and return it stripped of surrounding whitespace."""
    parse_url(url)
    return url.strip()


def resolve_url(url: str, base_url: str | None) -> str:
    """Resolve a possibly-relative URL against base_url.

    Empty input yields an empty string and input without a base is returned
    unchanged. A malformed reference resolves to "" so the caller drops it.
    Absolute references are returned as-is whatever the base.
    """
    if not url or not base_url:
        return url
    try:
        parse_url(url)
    except InvalidURLError:
        return ""
    return urljoin(base_url, url.strip())


def site_root(base_url: str | None) -> str | None:
    """Return "scheme://host/" for base_url, or None if it has no scheme and host."""
    if not base_url:
        return None
    parts = urlsplit(base_url)
    if not parts.scheme or not parts.netloc:
        return None
    return f"{parts.scheme}://{parts.netloc}/"


def is_absolute(url: str) -> bool:
    """Whether url has both a scheme and a host, i.e. can be fetched as-is."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc)
