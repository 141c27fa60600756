# ABOUTME: Deterministic ordering of discovered icons.
# ABOUTME: Largest first, then by image format preference, then by URL.

from collections.abc import Iterable

from favfinder.discovery.types import Icon

# Format preference (higher = better).
_FORMAT_RANK: dict[str, int] = {
    "image/png": 10,
    "image/jpeg": 9,
    "image/svg+xml": 8,
    "image/svg": 8,
    "image/x-icon": 7,
    "image/vnd.microsoft.icon": 7,
}
_FORMAT_RANK_DEFAULT = 0


def format_rank(mime_type: str) -> int:
    """Priority of an image format: PNG > JPEG > SVG > ICO > anything else."""
    return _FORMAT_RANK.get(mime_type, _FORMAT_RANK_DEFAULT)


def rank_key(icon: Icon) -> tuple[int, int, str]:
    """Sort key: width descending, own format rank descending, URL ascending."""
    return (-icon.width, -format_rank(icon.mime_type), icon.url)


def compare_icons(a: Icon, b: Icon) -> int:
    """Three-way comparison matching rank_key: negative when a sorts before b."""
    key_a, key_b = rank_key(a), rank_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def rank_icons(icons: Iterable[Icon]) -> list[Icon]:
    """Return icons in ranked order."""
    return sorted(icons, key=rank_key)
