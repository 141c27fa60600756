# ABOUTME: The favicon discovery pipeline: gather, normalize, deduplicate, filter, rank.
# ABOUTME: Finder combines markup, manifest and well-known sources into one ordered icon list.

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import IO, Any

from favfinder.discovery import filters as icon_filters
from favfinder.discovery.filters import Filter, apply_filters
from favfinder.discovery.hashing import icon_hash
from favfinder.discovery.html_parser import extract_markup, parse_document
from favfinder.discovery.http import FaviconHttpClient, HttpClient
from favfinder.discovery.inference import infer_metadata
from favfinder.discovery.manifest import DEFAULT_MANIFEST_NAME, fetch_manifest
from favfinder.discovery.ranking import rank_icons
from favfinder.discovery.types import Icon, SourceResult
from favfinder.discovery.urls import (
    is_absolute,
    parse_base_url,
    resolve_url,
    site_root,
)
from favfinder.discovery.well_known import find_well_known_icons


@dataclass
class FinderConfig:
    """Composable settings of a Finder."""

    filters: list[Filter] = field(default_factory=list)
    ignore_manifest: bool = False
    ignore_well_known: bool = False


def build_filters(
    filters: Iterable[Filter] = (),
    *,
    mime_types: Iterable[str] = (),
    min_width: int | None = None,
    max_width: int | None = None,
    min_height: int | None = None,
    max_height: int | None = None,
) -> list[Filter]:
    """Combine explicit filters with the convenience MIME-type and size bounds.

    Explicit filters run first, in the order given; the bounds follow.
    """
    chain = list(filters)
    allowed = tuple(mime_types)
    if allowed:
        chain.append(icon_filters.only_mime_type(*allowed))
    if min_width is not None:
        chain.append(icon_filters.min_width(min_width))
    if max_width is not None:
        chain.append(icon_filters.max_width(max_width))
    if min_height is not None:
        chain.append(icon_filters.min_height(min_height))
    if max_height is not None:
        chain.append(icon_filters.max_height(max_height))
    return chain


class Finder:
    """Discovers favicons for a web page.

    By default a Finder looks in the following places:

    - the HTML page itself: icons in <link> tags, Open Graph, Twitter and
      tile images
    - the web-app manifest linked from the page, or /manifest.json
    - the standard paths /favicon.ico and /apple-touch-icon.png

    Pass ignore_manifest and/or ignore_well_known to reduce the number of
    requests made to webservers. A Finder keeps no per-request state, so one
    instance can serve concurrent callers if its HttpClient can.
    """

    def __init__(
        self,
        *,
        http_client: HttpClient | None = None,
        logger: logging.Logger | None = None,
        filters: Iterable[Filter] = (),
        mime_types: Iterable[str] = (),
        min_width: int | None = None,
        max_width: int | None = None,
        min_height: int | None = None,
        max_height: int | None = None,
        ignore_manifest: bool = False,
        ignore_well_known: bool = False,
    ) -> None:
        self._log = logger or logging.getLogger(__name__)
        self._http = http_client or FaviconHttpClient(logger=self._log)
        self._config = FinderConfig(
            filters=build_filters(
                filters,
                mime_types=mime_types,
                min_width=min_width,
                max_width=max_width,
                min_height=min_height,
                max_height=max_height,
            ),
            ignore_manifest=ignore_manifest,
            ignore_well_known=ignore_well_known,
        )

    @property
    def config(self) -> FinderConfig:
        return self._config

    def find(self, url: str) -> list[Icon]:
        """Retrieve the page at url and find its favicons.

        Raises:
            InvalidURLError: If url is not a valid URL.
            IconFetchError: If the page cannot be retrieved.
            DocumentParseError: If the page cannot be parsed.
        """
        base_url = parse_base_url(url)
        content = self._http.get(base_url)
        self._log.debug("fetched page %s (%d bytes)", base_url, len(content))
        return self._discover(parse_document(content), base_url)

    def find_reader(
        self, markup: bytes | str | IO[Any], base_url: str | None = None
    ) -> list[Icon]:
        """Find favicons in already-retrieved HTML.

        Without base_url, relative references stay relative and neither the
        manifest fallback nor the well-known paths can be tried.

        Raises:
            InvalidURLError: If base_url is given but is not a valid URL.
            DocumentParseError: If the markup cannot be read or parsed.
        """
        if base_url is not None:
            base_url = parse_base_url(base_url)
        return self._discover(parse_document(markup), base_url)

    def _discover(self, doc: Any, base_url: str | None) -> list[Icon]:
        markup = extract_markup(doc)
        icons = list(markup.icons)

        if not self._config.ignore_manifest:
            icons.extend(self._manifest_icons(markup.manifest_url, base_url))

        if not self._config.ignore_well_known:
            result = find_well_known_icons(self._http, base_url)
            self._report(result)
            for icon in result.icons:
                self._log.debug("(well-known) %s", icon.url)
            icons.extend(result.icons)

        return self._post_process(icons, base_url)

    def _manifest_icons(self, manifest_ref: str | None, base_url: str | None) -> list[Icon]:
        """Fetch the linked manifest, or the conventional /manifest.json."""
        if manifest_ref:
            manifest_url = resolve_url(manifest_ref, base_url)
        else:
            root = site_root(base_url)
            manifest_url = root + DEFAULT_MANIFEST_NAME if root else ""

        if not is_absolute(manifest_url):
            if manifest_ref:
                self._log.debug("cannot retrieve manifest %r without a base URL", manifest_ref)
            return []

        result = fetch_manifest(self._http, manifest_url)
        self._report(result)
        if result.icons:
            self._log.debug("(manifest) %d icon(s) in %s", len(result.icons), manifest_url)
        return result.icons

    def _report(self, result: SourceResult) -> None:
        for error in result.errors:
            self._log.debug("skipped source: %s", error)

    def _post_process(self, icons: list[Icon], base_url: str | None) -> list[Icon]:
        """Normalize, deduplicate, filter and sort raw icons.

        Icons that end up without a URL or MIME type are dropped. When two
        icons share a hash, the later one wins.
        """
        tidied: dict[str, Icon] = {}
        for raw in icons:
            icon = infer_metadata(replace(raw, url=resolve_url(raw.url, base_url)))
            if not icon.url or not icon.mime_type:
                self._log.debug("dropped icon without URL or MIME type: %r", raw.url)
                continue
            icon = replace(icon, hash=icon_hash(icon))
            tidied[icon.hash] = icon

        kept: list[Icon] = []
        for icon in tidied.values():
            filtered = apply_filters(icon, self._config.filters)
            if filtered is not None:
                kept.append(filtered)

        return rank_icons(kept)


def find(url: str, **options: Any) -> list[Icon]:
    """Find favicons for url with a Finder built from options."""
    return Finder(**options).find(url)


def find_reader(
    markup: bytes | str | IO[Any], base_url: str | None = None, **options: Any
) -> list[Icon]:
    """Find favicons in HTML markup with a Finder built from options."""
    return Finder(**options).find_reader(markup, base_url)
