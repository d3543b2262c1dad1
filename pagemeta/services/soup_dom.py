"""BeautifulSoup-backed DomQuery for static markup"""

import logging
import re
from typing import List, Optional, Tuple
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from .dom_query import DomElement, DomQuery


logger = logging.getLogger(__name__)

# Elements that never produce a layout box
_NON_RENDERED_TAGS = {"head", "script", "style", "template", "noscript", "title", "meta", "link"}
_DISPLAY_NONE = re.compile(r"display\s*:\s*none", re.IGNORECASE)
_DIMENSION = re.compile(r"^\s*(\d+)")


class SoupElement(DomElement):
    """Wraps a bs4 Tag; layout data is approximated from markup"""

    def __init__(self, tag: Tag, base_url: Optional[str] = None):
        self.tag = tag
        self.base_url = base_url

    async def prop(self, name: str) -> Optional[str]:
        if name == "innerHTML":
            return self.tag.decode_contents()
        if name == "textContent":
            return self.tag.get_text()

        value = self.tag.get(name)
        if isinstance(value, list):
            value = " ".join(value)
        if value is None:
            return None
        # Browsers expose href/src resolved against the document URL
        if name in ("href", "src") and self.base_url and value:
            return urljoin(self.base_url, value)
        return str(value)

    async def natural_size(self) -> Tuple[int, int]:
        return self._dimension("width"), self._dimension("height")

    def _dimension(self, attr: str) -> int:
        match = _DIMENSION.match(str(self.tag.get(attr, "")))
        return int(match.group(1)) if match else 0

    async def is_visible(self) -> bool:
        node = self.tag
        while isinstance(node, Tag) and node.name != "[document]":
            if node.name in _NON_RENDERED_TAGS:
                return False
            if node.has_attr("hidden"):
                return False
            if _DISPLAY_NONE.search(str(node.get("style", ""))):
                return False
            node = node.parent
        return True

    async def child_element_count(self) -> int:
        return sum(1 for child in self.tag.children if isinstance(child, Tag))


class SoupDomQuery(DomQuery):
    """
    Queries static HTML with CSS selectors.

    Args:
        html: HTML content to parse
        base_url: Document URL used to resolve ``href``/``src`` the way a
            browser does; raw attribute values are returned when omitted
    """

    def __init__(self, html: str, base_url: Optional[str] = None):
        self.base_url = base_url
        self.soup = BeautifulSoup(html, "lxml")

    async def query_selector(self, selector: str) -> Optional[DomElement]:
        tag = self.soup.select_one(selector)
        return SoupElement(tag, self.base_url) if tag is not None else None

    async def query_selector_all(self, selector: str) -> List[DomElement]:
        return [SoupElement(tag, self.base_url) for tag in self.soup.select(selector)]

    async def title(self) -> Optional[str]:
        title_tag = self.soup.find("title")
        if title_tag is None:
            return ""
        # document.title strips and collapses whitespace
        return " ".join(title_tag.get_text().split())
