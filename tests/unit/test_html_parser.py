# ABOUTME: Unit tests for icon extraction from HTML markup.
# ABOUTME: Covers link icons, sizes expansion, social meta images and manifest links.

import io

import pytest

from favfinder.discovery.html_parser import (
    DocumentParseError,
    extract_link_icons,
    extract_markup,
    extract_meta_icons,
    find_manifest_url,
    parse_document,
)
from favfinder.discovery.types import Icon
from tests.fixtures.pages import MULTIFORMAT_HTML, NO_MARKUP_HTML, SIMPLE_HTML, SOCIAL_HTML


def _doc(head: str):
    return parse_document(f"<html><head>{head}</head><body></body></html>")


class TestParseDocument:
    """Tests for parse_document."""

    def test_accepts_bytes_text_and_streams(self) -> None:
        """Markup may be bytes, text or a readable stream."""
        for markup in (SIMPLE_HTML, SIMPLE_HTML.decode(), io.BytesIO(SIMPLE_HTML)):
            doc = parse_document(markup)
            assert doc.title is not None
            assert doc.title.string == "Simple"

    def test_unreadable_stream_raises(self) -> None:
        """A stream that fails to read is a parse error."""

        class BrokenStream:
            def read(self) -> bytes:
                raise OSError("disk on fire")

        with pytest.raises(DocumentParseError, match="disk on fire"):
            parse_document(BrokenStream())  # type: ignore[arg-type]

    def test_unsupported_type_raises(self) -> None:
        """Objects that are neither markup nor streams are rejected."""
        with pytest.raises(DocumentParseError):
            parse_document(42)  # type: ignore[arg-type]


class TestExtractLinkIcons:
    """Tests for extract_link_icons."""

    def test_icon_with_sizes(self) -> None:
        """sizes pre-populates the dimensions; href stays unresolved."""
        icons = extract_link_icons(_doc('<link rel="icon" sizes="32x32" href="/i.png">'))
        assert icons == [Icon(url="/i.png", width=32, height=32)]

    def test_type_attribute_sets_mime_type(self) -> None:
        """The type attribute is canonicalized into the MIME type."""
        icons = extract_link_icons(_doc('<link rel="icon" type="Image/PNG" href="/i.png">'))
        assert icons[0].mime_type == "image/png"

    def test_multiple_sizes_expand(self) -> None:
        """One icon is produced per size token."""
        icons = extract_link_icons(
            _doc('<link rel="icon" sizes="16x16 24x24 48x48" href="/favicon.ico">')
        )
        assert [(i.width, i.height) for i in icons] == [(16, 16), (24, 24), (48, 48)]
        assert {i.url for i in icons} == {"/favicon.ico"}

    @pytest.mark.parametrize(
        "rel",
        [
            "icon",
            "shortcut icon",
            "SHORTCUT ICON",
            "apple-touch-icon",
            "apple-touch-icon-precomposed",
            "mask-icon",
            "fluid-icon",
        ],
    )
    def test_icon_relations(self, rel: str) -> None:
        """All icon relations are recognised, case-insensitively."""
        icons = extract_link_icons(_doc(f'<link rel="{rel}" href="/x.png">'))
        assert [i.url for i in icons] == ["/x.png"]

    def test_non_icon_links_ignored(self) -> None:
        """Stylesheets, manifests and canonical links are not icons."""
        doc = _doc(
            '<link rel="stylesheet" href="/s.css">'
            '<link rel="manifest" href="/manifest.json">'
            '<link rel="canonical" href="/">'
        )
        assert extract_link_icons(doc) == []

    def test_unusable_references_skipped(self) -> None:
        """Empty, data: and javascript: hrefs are skipped."""
        doc = _doc(
            '<link rel="icon" href="">'
            '<link rel="icon" href="data:image/png;base64,iVBORw0KGgo=">'
            '<link rel="icon" href="javascript:void(0)">'
            '<link rel="icon">'
        )
        assert extract_link_icons(doc) == []


class TestExtractMetaIcons:
    """Tests for extract_meta_icons."""

    def test_social_images(self) -> None:
        """OG, Twitter and tile images are found; structured OG properties apply."""
        icons = extract_meta_icons(parse_document(SOCIAL_HTML))
        assert icons == [
            Icon(url="/og-first.png", mime_type="image/png", width=1200, height=630),
            Icon(url="https://example.com/twitter.jpg"),
            Icon(url="/twitter-src.jpg"),
            Icon(url="/tile.png"),
        ]

    def test_og_properties_apply_to_latest_image(self) -> None:
        """Width and height describe the og:image before them."""
        doc = _doc(
            '<meta property="og:image" content="/a.png">'
            '<meta property="og:image" content="/b.png">'
            '<meta property="og:image:width" content="300">'
        )
        icons = extract_meta_icons(doc)
        assert icons[0].width == 0
        assert icons[1].width == 300

    def test_og_image_url_alias_starts_image(self) -> None:
        """og:image:url counts as an image when no og:image came first."""
        icons = extract_meta_icons(_doc('<meta property="og:image:url" content="/a.png">'))
        assert [i.url for i in icons] == ["/a.png"]

    def test_bad_dimension_is_unknown(self) -> None:
        """Non-numeric dimensions are treated as unknown."""
        doc = _doc(
            '<meta property="og:image" content="/a.png">'
            '<meta property="og:image:width" content="wide">'
        )
        assert extract_meta_icons(doc)[0].width == 0

    def test_meta_without_content_ignored(self) -> None:
        """An image meta tag without content is skipped."""
        assert extract_meta_icons(_doc('<meta property="og:image">')) == []


class TestManifestAndMarkup:
    """Tests for find_manifest_url and extract_markup."""

    def test_manifest_reference(self) -> None:
        """The first manifest link's href is returned unresolved."""
        assert find_manifest_url(parse_document(SIMPLE_HTML)) == "/manifest.json"

    def test_no_manifest_reference(self) -> None:
        """Documents without a manifest link return None."""
        assert find_manifest_url(parse_document(NO_MARKUP_HTML)) is None

    def test_extract_markup_orders_links_before_meta(self) -> None:
        """Link icons precede meta images in the result."""
        result = extract_markup(parse_document(MULTIFORMAT_HTML))
        urls = [i.url for i in result.icons]
        assert len(urls) == 9
        assert urls[:2] == ["/favicon.ico", "/icon-16x16.png"]
        assert urls[-2:] == ["https://example.com/og.jpg", "/mstile-144x144.png"]
        assert result.manifest_url is None

    def test_document_without_icons(self) -> None:
        """No icon elements means an empty result, not an error."""
        result = extract_markup(parse_document(NO_MARKUP_HTML))
        assert result.icons == []
        assert result.manifest_url is None
