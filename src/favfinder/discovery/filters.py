# ABOUTME: Filters that accept, reject or rewrite icons after normalization.
# ABOUTME: Constructors return stateless callables; apply_filters runs a chain with short-circuit.

from collections.abc import Callable, Iterable

from favfinder.discovery.types import Icon

Filter = Callable[[Icon], Icon | None]
"""Return the (possibly modified) icon to keep it, or None to drop it."""

ICO_MIME_TYPES = ("image/x-icon", "image/vnd.microsoft.icon")


def only_mime_type(*mime_types: str) -> Filter:
    """Keep icons whose MIME type is one of mime_types, e.g. "image/png"."""
    allowed = frozenset(mime_types)

    def _filter(icon: Icon) -> Icon | None:
        return icon if icon.mime_type in allowed else None

    return _filter


def min_width(width: int) -> Filter:
    """Drop icons narrower than width."""

    def _filter(icon: Icon) -> Icon | None:
        return icon if icon.width >= width else None

    return _filter


def max_width(width: int) -> Filter:
    """Drop icons wider than width."""

    def _filter(icon: Icon) -> Icon | None:
        return icon if icon.width <= width else None

    return _filter


def min_height(height: int) -> Filter:
    """Drop icons shorter than height."""

    def _filter(icon: Icon) -> Icon | None:
        return icon if icon.height >= height else None

    return _filter


def max_height(height: int) -> Filter:
    """Drop icons taller than height."""

    def _filter(icon: Icon) -> Icon | None:
        return icon if icon.height <= height else None

    return _filter


def only_png() -> Filter:
    return only_mime_type("image/png")


def only_ico() -> Filter:
    return only_mime_type(*ICO_MIME_TYPES)


def only_square() -> Filter:
    """Drop non-square icons. Icons of unknown size are kept."""

    def _filter(icon: Icon) -> Icon | None:
        return icon if icon.is_square else None

    return _filter


def ignore_no_size() -> Filter:
    """Drop icons whose width or height is unknown."""

    def _filter(icon: Icon) -> Icon | None:
        return icon if icon.has_size else None

    return _filter


def apply_filters(icon: Icon, filters: Iterable[Filter]) -> Icon | None:
    """Run icon through filters in order, stopping at the first rejection."""
    current: Icon | None = icon
    for fn in filters:
        current = fn(current)
        if current is None:
            return None
    return current
