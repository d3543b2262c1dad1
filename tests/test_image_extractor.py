import pytest
from unittest.mock import AsyncMock

from pagemeta.exceptions import CandidateFault
from pagemeta.services.image_extractor import ImageExtractor, absolutize, is_preview_sized
from pagemeta.services.reachability import ImageProbeInterface
from pagemeta.services.soup_dom import SoupDomQuery


PAGE_URL = "https://example.com/a/b"


class TestImageHeuristics:
    """Unit tests for image size filtering and relative src rewriting"""

    @pytest.mark.parametrize("width,height,expected", [
        (300, 100, True),    # aspect ratio exactly 3
        (100, 300, True),
        (301, 100, False),   # ratio > 3
        (100, 301, False),
        (50, 50, False),
        (51, 51, True),
        (400, 50, False),
        (0, 0, False),
    ])
    def test_is_preview_sized(self, width, height, expected):
        assert is_preview_sized(width, height) is expected

    @pytest.mark.parametrize("src,expected", [
        ("foo/bar.png", "https://example.com/foo/bar.png"),
        ("/foo/bar.png", "https://example.com/foo/bar.png"),
        ("https://cdn.example.com/x.jpg", "https://cdn.example.com/x.jpg"),
        ("//cdn.example.com/x.jpg", "//cdn.example.com/x.jpg"),
        ("data:image/png;base64,iVBORw0KGgo=", "data:image/png;base64,iVBORw0KGgo="),
    ])
    def test_absolutize(self, src, expected):
        assert absolutize(src, PAGE_URL) == expected


class TestImageExtractor:
    """Unit tests for the image fallback chain"""

    def setup_method(self):
        self.mock_probe = AsyncMock(spec=ImageProbeInterface)
        self.extractor = ImageExtractor(self.mock_probe)

    @pytest.mark.asyncio
    async def test_reachable_og_image(self):
        """Test og:image is used when the probe confirms it."""
        # Arrange
        html = """
        <html><head>
            <meta property="og:image" content="https://cdn.example.com/x.jpg">
            <link rel="image_src" href="https://cdn.example.com/y.jpg">
        </head></html>
        """
        self.mock_probe.is_reachable_image.return_value = True

        # Act
        result = await self.extractor.extract(SoupDomQuery(html), PAGE_URL)

        # Assert
        assert result == "https://cdn.example.com/x.jpg"
        self.mock_probe.is_reachable_image.assert_awaited_once_with("https://cdn.example.com/x.jpg")

    @pytest.mark.asyncio
    async def test_unreachable_og_image_falls_back_to_image_src_link(self):
        """Test a rejected og:image moves the search to the next tier."""
        html = """
        <html><head>
            <meta property="og:image" content="https://cdn.example.com/page.html">
            <link rel="image_src" href="https://cdn.example.com/y.jpg">
        </head></html>
        """
        self.mock_probe.is_reachable_image.side_effect = [False, True]

        result = await self.extractor.extract(SoupDomQuery(html), PAGE_URL)

        assert result == "https://cdn.example.com/y.jpg"

    @pytest.mark.asyncio
    async def test_probe_fault_only_rejects_that_candidate(self):
        """Test a probe failure does not abort the image pass."""
        html = """
        <html><head>
            <meta property="og:image" content="https://slow.example.com/x.jpg">
        </head><body>
            <img id="landingImage" src="https://m.media-amazon.com/images/I/product.jpg">
        </body></html>
        """
        self.mock_probe.is_reachable_image.side_effect = [
            CandidateFault("https://slow.example.com/x.jpg", "ReadTimeout"),
            True,
        ]

        result = await self.extractor.extract(SoupDomQuery(html), PAGE_URL)

        assert result == "https://m.media-amazon.com/images/I/product.jpg"

    @pytest.mark.asyncio
    async def test_indeterminate_verdict_falls_through(self):
        """Test a candidate without any URL is rejected and the next tier is tried."""
        html = """
        <html><head>
            <meta property="og:image" content="no url in here">
        </head><body>
            <img src="photo.jpg" width="400" height="300">
        </body></html>
        """
        self.mock_probe.is_reachable_image.return_value = None

        result = await self.extractor.extract(SoupDomQuery(html), PAGE_URL)

        assert result == "https://example.com/photo.jpg"

    @pytest.mark.asyncio
    async def test_icon_skipped_in_favor_of_photo(self):
        """Test small icons are filtered out of the <img> scan."""
        html = """
        <html><body>
            <img src="https://example.com/icon.png" width="20" height="20">
            <img src="https://example.com/photo.jpg" width="400" height="300">
        </body></html>
        """

        result = await self.extractor.extract(SoupDomQuery(html), PAGE_URL)

        assert result == "https://example.com/photo.jpg"
        self.mock_probe.is_reachable_image.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_banner_skipped(self):
        html = """
        <html><body>
            <img src="/banner.png" width="900" height="100">
            <img src="foo/bar.png" width="200" height="200">
        </body></html>
        """

        result = await self.extractor.extract(SoupDomQuery(html), PAGE_URL)

        assert result == "https://example.com/foo/bar.png"

    @pytest.mark.asyncio
    async def test_none_when_no_image_qualifies(self):
        html = """
        <html><body>
            <img src="/pixel.gif" width="1" height="1">
            <img src="/rule.png" width="600" height="60">
        </body></html>
        """

        assert await self.extractor.extract(SoupDomQuery(html), PAGE_URL) is None
