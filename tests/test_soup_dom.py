import pytest

from pagemeta.services.soup_dom import SoupDomQuery


HTML = """
<html>
<head>
    <title>
        Spaced    Title
    </title>
    <meta property="og:title" content="OG Title">
    <link rel="image_src" href="/images/cover.png">
</head>
<body>
    <h1>Hello <b>world</b></h1>
    <p hidden>Hidden paragraph</p>
    <div style="display: none"><p>Inside hidden div</p></div>
    <p>Shown paragraph</p>
    <img src="photo.jpg" width="400" height="300px">
    <img src="no-size.jpg">
</body>
</html>
"""


class TestSoupDomQuery:
    """Unit tests for the static-markup DomQuery"""

    def setup_method(self):
        self.dom = SoupDomQuery(HTML)

    @pytest.mark.asyncio
    async def test_document_title_collapses_whitespace(self):
        assert await self.dom.title() == "Spaced Title"

    @pytest.mark.asyncio
    async def test_missing_title_is_empty(self):
        assert await SoupDomQuery("<html><body></body></html>").title() == ""

    @pytest.mark.asyncio
    async def test_meta_content(self):
        element = await self.dom.query_selector('meta[property="og:title"]')
        assert await element.prop("content") == "OG Title"

    @pytest.mark.asyncio
    async def test_missing_element_returns_none(self):
        assert await self.dom.query_selector('meta[name="twitter:title"]') is None

    @pytest.mark.asyncio
    async def test_inner_html_keeps_markup(self):
        element = await self.dom.query_selector("h1")
        assert await element.prop("innerHTML") == "Hello <b>world</b>"

    @pytest.mark.asyncio
    async def test_href_is_raw_without_base_url(self):
        element = await self.dom.query_selector('link[rel="image_src"]')
        assert await element.prop("href") == "/images/cover.png"

    @pytest.mark.asyncio
    async def test_href_and_src_resolve_against_base_url(self):
        dom = SoupDomQuery(HTML, base_url="https://example.com/a/b")

        link = await dom.query_selector('link[rel="image_src"]')
        img = await dom.query_selector("img")

        assert await link.prop("href") == "https://example.com/images/cover.png"
        assert await img.prop("src") == "https://example.com/a/photo.jpg"

    @pytest.mark.asyncio
    async def test_natural_size_from_attributes(self):
        images = await self.dom.query_selector_all("img")

        assert await images[0].natural_size() == (400, 300)
        assert await images[1].natural_size() == (0, 0)

    @pytest.mark.asyncio
    async def test_visibility(self):
        paragraphs = await self.dom.query_selector_all("p")

        visible = [await p.is_visible() for p in paragraphs]

        assert visible == [False, False, True]

    @pytest.mark.asyncio
    async def test_child_element_count(self):
        h1 = await self.dom.query_selector("h1")
        p = await self.dom.query_selector("p")

        assert await h1.child_element_count() == 1
        assert await p.child_element_count() == 0
