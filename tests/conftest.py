# ABOUTME: Shared pytest fixtures for favfinder tests.
# ABOUTME: Provides canned sites served by a fake HTTP client and saved HTML files.

from pathlib import Path

import pytest

from tests.fixtures.fake_http import FakeHttpClient
from tests.fixtures.pages import (
    BASE_URL,
    MULTIFORMAT_HTML,
    SIMPLE_HTML,
    SIMPLE_MANIFEST,
)


@pytest.fixture
def simple_site() -> FakeHttpClient:
    """A site with one link icon, a linked manifest and both well-known icons."""
    return FakeHttpClient(
        {
            BASE_URL: SIMPLE_HTML,
            BASE_URL + "manifest.json": SIMPLE_MANIFEST,
            BASE_URL + "favicon.ico": b"\x00\x00\x01\x00",
            BASE_URL + "apple-touch-icon.png": b"\x89PNG\r\n\x1a\n",
        }
    )


@pytest.fixture
def multiformat_site() -> FakeHttpClient:
    """A site whose page declares nine icons and has no manifest or well-known icons."""
    return FakeHttpClient({BASE_URL: MULTIFORMAT_HTML})


@pytest.fixture
def simple_html_file(tmp_path: Path) -> Path:
    """SIMPLE_HTML saved to disk."""
    filepath = tmp_path / "index.html"
    filepath.write_bytes(SIMPLE_HTML)
    return filepath


@pytest.fixture
def multiformat_html_file(tmp_path: Path) -> Path:
    """MULTIFORMAT_HTML saved to disk."""
    filepath = tmp_path / "multiformat.html"
    filepath.write_bytes(MULTIFORMAT_HTML)
    return filepath
