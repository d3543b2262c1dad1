# -*- coding: utf-8 -*-
import logging
from typing import List, Optional, Tuple

from playwright.async_api import ElementHandle, Page

from .dom_query import DomElement, DomQuery

logger = logging.getLogger(__name__)


class PlaywrightElement(DomElement):
    """Reads live properties of an element inside the rendered page"""

    def __init__(self, handle: ElementHandle):
        self.handle = handle

    async def prop(self, name: str) -> Optional[str]:
        value = await self.handle.evaluate("(el, name) => el[name]", name)
        return str(value) if value is not None else None

    async def natural_size(self) -> Tuple[int, int]:
        size = await self.handle.evaluate(
            "el => [el.naturalWidth || 0, el.naturalHeight || 0]"
        )
        width, height = size or (0, 0)
        return int(width or 0), int(height or 0)

    async def is_visible(self) -> bool:
        return bool(await self.handle.evaluate("el => el.offsetParent !== null"))

    async def child_element_count(self) -> int:
        return int(await self.handle.evaluate("el => el.childElementCount") or 0)


class PlaywrightDomQuery(DomQuery):
    """DomQuery over a Playwright page that has already navigated"""

    def __init__(self, page: Page):
        self.page = page

    async def query_selector(self, selector: str) -> Optional[DomElement]:
        handle = await self.page.query_selector(selector)
        return PlaywrightElement(handle) if handle is not None else None

    async def query_selector_all(self, selector: str) -> List[DomElement]:
        handles = await self.page.query_selector_all(selector)
        return [PlaywrightElement(handle) for handle in handles]

    async def title(self) -> Optional[str]:
        return await self.page.title()
