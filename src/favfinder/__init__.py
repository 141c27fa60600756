# ABOUTME: favfinder finds icons for websites in HTML, web-app manifests and well-known paths.
# ABOUTME: Re-exports the public discovery API; logging is silent unless the caller configures it.

import logging

from favfinder.discovery import (
    DocumentParseError,
    FaviconHttpClient,
    Finder,
    HttpClient,
    Icon,
    IconFetchError,
    InvalidURLError,
    find,
    find_reader,
)
from favfinder.discovery import filters

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DocumentParseError",
    "FaviconHttpClient",
    "Finder",
    "HttpClient",
    "Icon",
    "IconFetchError",
    "InvalidURLError",
    "filters",
    "find",
    "find_reader",
]
