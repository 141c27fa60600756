# ABOUTME: Extraction of icon references from HTML markup.
# ABOUTME: Reads <link> icons, Open Graph / Twitter / tile images, and the manifest link.

import logging
from dataclasses import dataclass, field
from typing import IO, Any

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from favfinder.discovery.inference import canonical_mime_type, parse_sizes
from favfinder.discovery.types import Icon

logger = logging.getLogger(__name__)

PARSER = "html.parser"

LINK_SELECTOR = (
    'link[rel~="icon" i], link[rel~="apple-touch-icon" i],'
    'link[rel~="apple-touch-icon-precomposed" i], link[rel~="mask-icon" i],'
    'link[rel~="fluid-icon" i]'
)

MANIFEST_SELECTOR = 'link[rel~="manifest" i]'

# Meta keys (from either name= or property=) whose content is an image URL.
_OG_IMAGE_KEYS = frozenset({"og:image"})
_OG_IMAGE_ALIASES = frozenset({"og:image:url", "og:image:secure_url"})
_META_IMAGE_KEYS = frozenset({"twitter:image", "twitter:image:src", "msapplication-tileimage"})

# References that can never point at a retrievable icon.
_UNUSABLE_SCHEMES = ("data:", "javascript:", "mailto:")


class DocumentParseError(Exception):
    """Raised when markup cannot be read or parsed."""


@dataclass
class MarkupResult:
    """Icon references found in an HTML document."""

    icons: list[Icon] = field(default_factory=list)
    manifest_url: str | None = None


def parse_document(markup: bytes | str | IO[Any]) -> BeautifulSoup:
    """Parse raw markup (bytes, text or a readable stream) into a document.

    Raises:
        DocumentParseError: If the stream cannot be read or the parser rejects it.
    """
    if hasattr(markup, "read"):
        try:
            markup = markup.read()
        except (OSError, ValueError) as exc:
            raise DocumentParseError(f"Cannot read markup: {exc}") from exc
    if not isinstance(markup, (bytes, str)):
        raise DocumentParseError(f"Unsupported markup type: {type(markup).__name__}")
    try:
        return BeautifulSoup(markup, PARSER)
    except ParserRejectedMarkup as exc:
        raise DocumentParseError(f"Cannot parse markup: {exc}") from exc


def _usable(href: str) -> bool:
    return bool(href) and not href.lower().startswith(_UNUSABLE_SCHEMES)


def _attr(tag: Any, name: str) -> str:
    """Read a single-valued attribute as a stripped string."""
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return (value or "").strip()


def _to_int(value: str) -> int:
    try:
        return max(int(value.strip()), 0)
    except ValueError:
        return 0


def extract_link_icons(doc: BeautifulSoup) -> list[Icon]:
    """Return one icon per <link> icon element, one per size when sizes lists several.

    The href is left unresolved; the type attribute pre-populates the MIME type.
    """
    icons: list[Icon] = []
    for link in doc.select(LINK_SELECTOR):
        href = _attr(link, "href")
        if not _usable(href):
            continue
        mime_type = canonical_mime_type(_attr(link, "type"))
        sizes = parse_sizes(_attr(link, "sizes"))
        if not sizes:
            icons.append(Icon(url=href, mime_type=mime_type))
            continue
        for width, height in sizes:
            icons.append(Icon(url=href, mime_type=mime_type, width=width, height=height))
    return icons


def extract_meta_icons(doc: BeautifulSoup) -> list[Icon]:
    """Return icons referenced by Open Graph, Twitter and tile-image meta tags.

    og:image:width, og:image:height and og:image:type describe the most recent
    og:image, following the Open Graph structured property rules.
    """
    found: list[dict[str, Any]] = []
    current_og: dict[str, Any] | None = None

    for meta in doc.find_all("meta"):
        key = (_attr(meta, "property") or _attr(meta, "name")).lower()
        content = _attr(meta, "content")
        if not key or not content:
            continue

        if key in _OG_IMAGE_KEYS or (key in _OG_IMAGE_ALIASES and current_og is None):
            current_og = {"url": content}
            found.append(current_og)
        elif key in _META_IMAGE_KEYS:
            found.append({"url": content})
        elif current_og is not None and key == "og:image:width":
            current_og["width"] = _to_int(content)
        elif current_og is not None and key == "og:image:height":
            current_og["height"] = _to_int(content)
        elif current_og is not None and key == "og:image:type":
            current_og["mime_type"] = canonical_mime_type(content)

    return [Icon(**entry) for entry in found if _usable(entry["url"])]


def find_manifest_url(doc: BeautifulSoup) -> str | None:
    """Return the (unresolved) href of the first manifest link, if any."""
    for link in doc.select(MANIFEST_SELECTOR):
        href = _attr(link, "href")
        if _usable(href):
            return href
    return None


def extract_markup(doc: BeautifulSoup) -> MarkupResult:
    """Collect every icon reference in a parsed document.

    Link icons come first, then meta images. A document with none of these
    elements yields an empty result, never an error.
    """
    icons = extract_link_icons(doc) + extract_meta_icons(doc)
    manifest_url = find_manifest_url(doc)
    logger.debug("markup: %d icon reference(s), manifest=%s", len(icons), manifest_url)
    return MarkupResult(icons=icons, manifest_url=manifest_url)
