# ABOUTME: Discovery package: finds, normalizes and ranks favicon candidates.
# ABOUTME: Exports the Finder, the Icon dataclass, filters and the error types.

from favfinder.discovery.finder import Finder, FinderConfig, find, find_reader
from favfinder.discovery.html_parser import DocumentParseError
from favfinder.discovery.http import FaviconHttpClient, HttpClient, IconFetchError
from favfinder.discovery.types import Icon, SourceResult
from favfinder.discovery.urls import InvalidURLError

__all__ = [
    "DocumentParseError",
    "FaviconHttpClient",
    "Finder",
    "FinderConfig",
    "HttpClient",
    "Icon",
    "IconFetchError",
    "InvalidURLError",
    "SourceResult",
    "find",
    "find_reader",
]
