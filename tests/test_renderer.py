import httpx
import pytest

from pagemeta.exceptions import PageNavigationException
from pagemeta.services.renderer import (
    PlaywrightRenderer,
    RendererConfig,
    StaticRenderer,
    create_renderer,
)


class TestPlaywrightRenderer:
    """Unit tests for browser launch configuration"""

    def test_launch_options_pass_through(self):
        config = RendererConfig(
            args=["--no-sandbox"],
            user_agent="TestAgent/1.0",
            executable_path="/usr/bin/chromium",
            headless=True,
        )

        options = PlaywrightRenderer(config)._launch_options()

        assert options["headless"] is True
        assert options["executable_path"] == "/usr/bin/chromium"
        assert options["args"] == ["--no-sandbox", "--disable-blink-features=AutomationControlled"]

    def test_executable_path_omitted_when_not_set(self):
        config = RendererConfig(args=[], executable_path=None)

        options = PlaywrightRenderer(config)._launch_options()

        assert "executable_path" not in options

    def test_default_config_uses_preview_bot_agent(self):
        config = RendererConfig()

        assert config.user_agent.startswith("facebookexternalhit/1.1")
        assert config.args == ["--no-sandbox", "--disable-setuid-sandbox"]


class TestStaticRenderer:
    """Unit tests for StaticRenderer"""

    @pytest.mark.asyncio
    async def test_renders_html_with_resolved_links(self):
        seen_agents = []

        def handler(request):
            seen_agents.append(request.headers["user-agent"])
            return httpx.Response(
                200,
                headers={"content-type": "text/html; charset=utf-8"},
                text='<html><head><title>Static</title></head><body><img src="a.png"></body></html>',
            )

        renderer = StaticRenderer(RendererConfig(user_agent="TestAgent/1.0"), transport=httpx.MockTransport(handler))

        async with renderer.render("https://example.com/dir/page") as dom:
            title = await dom.title()
            img = await dom.query_selector("img")
            src = await img.prop("src")

        assert title == "Static"
        assert src == "https://example.com/dir/a.png"
        assert seen_agents == ["TestAgent/1.0"]

    @pytest.mark.asyncio
    async def test_html_error_page_is_still_rendered(self):
        renderer = StaticRenderer(transport=httpx.MockTransport(
            lambda request: httpx.Response(
                404,
                headers={"content-type": "text/html"},
                text="<html><head><title>Not Found</title></head><body><p>Gone</p></body></html>",
            )
        ))

        async with renderer.render("https://example.com/missing") as dom:
            title = await dom.title()

        assert title == "Not Found"

    @pytest.mark.asyncio
    async def test_error_status_without_html_is_navigation_fault(self):
        renderer = StaticRenderer(transport=httpx.MockTransport(lambda request: httpx.Response(404)))

        with pytest.raises(PageNavigationException):
            async with renderer.render("https://example.com/missing"):
                pass

    @pytest.mark.asyncio
    async def test_connection_error_is_navigation_fault(self):
        def fail(request):
            raise httpx.ConnectError("name not resolved", request=request)

        renderer = StaticRenderer(transport=httpx.MockTransport(fail))

        with pytest.raises(PageNavigationException) as exc_info:
            async with renderer.render("https://nowhere.invalid/"):
                pass
        assert "name not resolved" in exc_info.value.details["reason"]

    @pytest.mark.asyncio
    async def test_non_html_is_navigation_fault(self):
        renderer = StaticRenderer(transport=httpx.MockTransport(
            lambda request: httpx.Response(200, headers={"content-type": "application/pdf"}, content=b"%PDF")
        ))

        with pytest.raises(PageNavigationException):
            async with renderer.render("https://example.com/file.pdf"):
                pass


class TestCreateRenderer:

    def test_backends(self):
        assert isinstance(create_renderer("playwright"), PlaywrightRenderer)
        assert isinstance(create_renderer("STATIC"), StaticRenderer)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_renderer("lynx")
