import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator, List, Optional

import httpx
from playwright.async_api import async_playwright, Error as PlaywrightError

from pagemeta.core.config import settings
from pagemeta.exceptions import PageNavigationException
from .dom_query import DomQuery
from .playwright_dom import PlaywrightDomQuery
from .soup_dom import SoupDomQuery


logger = logging.getLogger(__name__)

# Hides the most common automation fingerprint before any page script runs
_STEALTH_INIT_SCRIPT = """
Object.defineProperty(navigator, 'webdriver', { get: () => undefined });
window.chrome = window.chrome || { runtime: {} };
Object.defineProperty(navigator, 'languages', { get: () => ['en-US', 'en'] });
"""
_AUTOMATION_FLAG = "--disable-blink-features=AutomationControlled"


@dataclass
class RendererConfig:
    """Pass-through options for the headless browser"""
    args: List[str] = field(default_factory=lambda: list(settings.renderer_args))
    user_agent: str = settings.renderer_user_agent
    executable_path: Optional[str] = settings.renderer_executable_path
    headless: bool = settings.renderer_headless
    navigation_timeout: int = settings.navigation_timeout


class PageRendererInterface(ABC):
    """Interface for loading a page into a queryable DOM"""

    @abstractmethod
    def render(self, url: str) -> "AsyncIterator[DomQuery]":
        """
        Load ``url`` and yield a DomQuery over the rendered document.

        Used as ``async with renderer.render(url) as dom:``; every resource
        acquired for the page is released when the block exits, whether it
        exits normally or by an exception.

        Raises:
            PageNavigationException: If the page cannot be loaded
        """
        pass


class PlaywrightRenderer(PageRendererInterface):
    """Renders pages in headless Chromium, one browser per call"""

    def __init__(self, config: RendererConfig = None):
        self.config = config or RendererConfig()

    def _launch_options(self) -> dict:
        args = list(self.config.args)
        if _AUTOMATION_FLAG not in args:
            args.append(_AUTOMATION_FLAG)

        params = {
            "headless": self.config.headless,
            "args": args,
        }
        if self.config.executable_path:
            params["executable_path"] = self.config.executable_path
        return params

    @asynccontextmanager
    async def render(self, url: str) -> AsyncIterator[DomQuery]:
        logger.info(f"Rendering page with headless browser: {url}")
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(**self._launch_options())
            try:
                context = await browser.new_context(user_agent=self.config.user_agent)
                await context.add_init_script(_STEALTH_INIT_SCRIPT)
                page = await context.new_page()
                page.set_default_timeout(self.config.navigation_timeout * 1000)

                try:
                    await page.goto(url, timeout=self.config.navigation_timeout * 1000)
                except PlaywrightError as e:
                    logger.error(f"Navigation failed for URL {url}: {str(e)}")
                    raise PageNavigationException(url, str(e))

                logger.info(f"Page rendered: {url}")
                yield PlaywrightDomQuery(page)
            finally:
                await browser.close()
                logger.debug(f"Browser closed for URL: {url}")


class StaticRenderer(PageRendererInterface):
    """
    Fetches raw HTML without running scripts.
    Layout data (image sizes, visibility) is approximated from markup.

    Like a browser, an HTML error page (404, 500, ...) is still rendered and
    extracted from; only transport failures and non-HTML bodies are faults.
    """

    def __init__(self, config: RendererConfig = None, transport: httpx.AsyncBaseTransport = None):
        self.config = config or RendererConfig()
        self.transport = transport

    @asynccontextmanager
    async def render(self, url: str) -> AsyncIterator[DomQuery]:
        logger.info(f"Fetching static HTML for URL: {url}")
        headers = {"User-Agent": self.config.user_agent}

        try:
            async with httpx.AsyncClient(
                timeout=self.config.navigation_timeout,
                follow_redirects=settings.fetch_follow_redirects,
                transport=self.transport,
            ) as client:
                res = await client.get(url, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Request error occurred while fetching URL {url}: {str(e)}")
            raise PageNavigationException(url, f"Request error occurred: {str(e)}")

        if res.is_error:
            logger.warning(f"URL {url} answered with HTTP {res.status_code}, extracting from the error page")

        content_type = res.headers.get("content-type", "")
        if "html" not in content_type.lower():
            logger.warning(f"URL does not return HTML content. Content-Type: {content_type}")
            raise PageNavigationException(url, f"Content type '{content_type}' is not supported")

        yield SoupDomQuery(res.text, base_url=str(res.url))


def create_renderer(backend: str = None, config: RendererConfig = None) -> PageRendererInterface:
    backend = (backend or settings.renderer_backend).lower()
    if backend == "playwright":
        return PlaywrightRenderer(config)
    if backend == "static":
        return StaticRenderer(config)
    raise ValueError(f"Unknown renderer backend: {backend}")
