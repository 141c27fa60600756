# ABOUTME: Extraction of icons from JSON web-app manifests.
# ABOUTME: Expands each icons[] entry into one icon per declared size.

import json
import logging
from typing import Any

from favfinder.discovery.http import HttpClient, IconFetchError
from favfinder.discovery.inference import canonical_mime_type, parse_sizes
from favfinder.discovery.types import Icon, SourceResult

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_NAME = "manifest.json"


def parse_manifest_icons(data: Any) -> list[Icon]:
    """Parse the icons list of a decoded manifest.

    Each entry's src is kept as written; the Finder resolves it against the
    page's base URL like any other reference.
    A sizes value such as "192x192 512x512" produces one icon per size;
    a missing or "any" sizes value produces a single unknown-size icon.
    Entries that are not objects or have no src are skipped, as is a
    manifest whose icons member is not a list.
    """
    if not isinstance(data, dict):
        return []
    entries = data.get("icons")
    if not isinstance(entries, list):
        return []

    icons: list[Icon] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        src = entry.get("src")
        if not isinstance(src, str) or not src.strip():
            continue
        url = src.strip()

        raw_type = entry.get("type")
        mime_type = canonical_mime_type(raw_type if isinstance(raw_type, str) else "")
        raw_sizes = entry.get("sizes")
        sizes = parse_sizes(raw_sizes if isinstance(raw_sizes, str) else "")
        if not sizes:
            icons.append(Icon(url=url, mime_type=mime_type))
            continue
        for width, height in sizes:
            icons.append(Icon(url=url, mime_type=mime_type, width=width, height=height))
    return icons


def parse_manifest(content: bytes | str, manifest_url: str | None = None) -> list[Icon]:
    """Decode manifest JSON and return its icons. Invalid JSON yields no icons."""
    try:
        data = json.loads(content)
    except (ValueError, TypeError) as exc:
        logger.debug("Invalid manifest JSON from %s: %s", manifest_url, exc)
        return []
    return parse_manifest_icons(data)


def fetch_manifest(http_client: HttpClient, manifest_url: str) -> SourceResult:
    """Retrieve and parse a manifest, absorbing any failure into the result."""
    try:
        content = http_client.get(manifest_url)
    except IconFetchError as exc:
        return SourceResult(errors=[f"manifest: {exc}"])
    except Exception as exc:
        return SourceResult(errors=[f"manifest: {type(exc).__name__}: {exc}: {manifest_url}"])
    return SourceResult(icons=parse_manifest(content, manifest_url))
