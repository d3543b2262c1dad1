"""Preview image extraction"""

import logging
from typing import List, Optional
from urllib.parse import urlparse

from .dom_query import DomElement, DomQuery
from .reachability import ImageProbeInterface
from .tiers import CandidateTier, element_prop, first_accepted, meta_content


logger = logging.getLogger(__name__)

MAX_ASPECT_RATIO = 3
MIN_DIMENSION = 50


def is_preview_sized(width: int, height: int) -> bool:
    """Reject icons, trackers and banner-like strips"""
    if width <= MIN_DIMENSION or height <= MIN_DIMENSION:
        return False
    return max(width, height) / min(width, height) <= MAX_ASPECT_RATIO


def absolutize(src: str, page_url: str) -> str:
    """Prefix a relative ``src`` (one without ``//``) with the page origin"""
    if "//" in src or src.lower().startswith("data:"):
        return src
    parsed = urlparse(page_url)
    return f"{parsed.scheme}://{parsed.netloc}/{src.lstrip('/')}"


class ImageExtractor:
    """
    Finds a preview image for a page.

    Explicit image hints (``og:image``, ``link[rel=image_src]`` and the
    Amazon ``#landingImage`` product photo) are only taken when the probe
    confirms they serve image content. Otherwise the first reasonably sized
    ``<img>`` in document order is used without probing.
    """

    def __init__(self, probe: ImageProbeInterface):
        self.probe = probe

    def _tiers(self, page_url: str) -> List[CandidateTier]:
        async def first_sized_image(dom: DomQuery) -> Optional[str]:
            image = await self._first_preview_sized(await dom.query_selector_all("img"))
            if image is None:
                return None
            src = await image.prop("src")
            return absolutize(src, page_url) if src else None

        reachable = self.probe.is_reachable_image
        return [
            CandidateTier("og:image", meta_content('meta[property="og:image"]'), reachable),
            CandidateTier("image_src link", element_prop('link[rel="image_src"]', "href"), reachable),
            CandidateTier("landing image", element_prop("img#landingImage", "src"), reachable),
            CandidateTier("first sized img", first_sized_image),
        ]

    @staticmethod
    async def _first_preview_sized(images: List[DomElement]) -> Optional[DomElement]:
        for image in images:
            width, height = await image.natural_size()
            if is_preview_sized(width, height):
                return image
        return None

    async def extract(self, dom: DomQuery, page_url: str) -> Optional[str]:
        return await first_accepted(self._tiers(page_url), dom, "image")
