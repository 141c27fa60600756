# ABOUTME: Fills in icon metadata the source did not declare.
# ABOUTME: Derives MIME type and file extension from the URL path, and dimensions from size tokens.

import posixpath
import re
from dataclasses import replace
from urllib.parse import urlsplit

from favfinder.discovery.types import Icon

# Extension -> MIME type for the image formats favicons come in.
_MIME_TYPES: dict[str, str] = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".jpe": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".svgz": "image/svg+xml",
    ".ico": "image/x-icon",
    ".cur": "image/x-icon",
    ".webp": "image/webp",
    ".avif": "image/avif",
    ".bmp": "image/bmp",
    ".tif": "image/tiff",
    ".tiff": "image/tiff",
}

# Non-standard spellings seen in the wild, mapped to their canonical form.
_MIME_ALIASES: dict[str, str] = {
    "image/jpg": "image/jpeg",
    "image/pjpeg": "image/jpeg",
    "image/ico": "image/x-icon",
    "image/icon": "image/x-icon",
    "image/svg": "image/svg+xml",
}

# "32x32", "192X192", "16×16" inside a sizes attribute.
_SIZE_TOKEN_RE = re.compile(r"^(\d+)[xX×](\d+)$")
# First "<digits>x<digits>" anywhere in a URL, e.g. "apple-touch-icon-180x180.png".
_URL_SIZE_RE = re.compile(r"(\d+)[xX×](\d+)")


def canonical_mime_type(mime_type: str | None) -> str:
    """Lower-case a MIME type, drop any parameters and map known aliases."""
    if not mime_type:
        return ""
    value = mime_type.split(";", 1)[0].strip().lower()
    return _MIME_ALIASES.get(value, value)


def file_ext(url: str) -> str:
    """Return the lower-cased extension of the URL's path, e.g. ".png", or ""."""
    try:
        path = urlsplit(url).path
    except ValueError:
        return ""
    return posixpath.splitext(path)[1].lower()


def mime_type_for_url(url: str) -> str:
    """Guess a MIME type from the extension of the URL's path. "" if unknown."""
    return _MIME_TYPES.get(file_ext(url), "")


def parse_size(token: str) -> tuple[int, int] | None:
    """Parse a single "WxH" token. Returns None for "any" or anything unparseable."""
    match = _SIZE_TOKEN_RE.match(token.strip())
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def parse_sizes(value: str | None) -> list[tuple[int, int]]:
    """Parse a space-separated sizes attribute into distinct (width, height) pairs.

    Order of first appearance is kept. Tokens such as "any" contribute nothing,
    so an attribute without a single usable token returns an empty list.
    """
    sizes: list[tuple[int, int]] = []
    for token in (value or "").split():
        size = parse_size(token)
        if size is not None and size not in sizes:
            sizes.append(size)
    return sizes


def extract_size_from_url(url: str) -> tuple[int, int] | None:
    """Find the first "WxH" size token in a URL."""
    match = _URL_SIZE_RE.search(url)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def infer_metadata(icon: Icon) -> Icon:
    """Return a copy of icon with MIME type, extension and size filled where unset.

    Each rule only applies while its field is still empty, so values declared
    by markup or manifests always win over guesses from the URL.
    """
    changes: dict[str, object] = {}

    mime_type = canonical_mime_type(icon.mime_type) or mime_type_for_url(icon.url)
    if mime_type != icon.mime_type:
        changes["mime_type"] = mime_type

    if not icon.file_ext:
        ext = file_ext(icon.url)
        if ext:
            changes["file_ext"] = ext

    if icon.width == 0 and icon.height == 0:
        size = extract_size_from_url(icon.url)
        if size is not None:
            changes["width"], changes["height"] = size

    return replace(icon, **changes) if changes else icon
