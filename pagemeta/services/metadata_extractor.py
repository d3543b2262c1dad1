import asyncio
import logging
from abc import ABC, abstractmethod

from pagemeta.core.models import PageMetadata
from .description_extractor import DescriptionExtractor
from .dom_query import DomQuery
from .image_extractor import ImageExtractor
from .reachability import ImageProbeInterface
from .title_extractor import TitleExtractor


logger = logging.getLogger(__name__)


class MetadataExtractorInterface(ABC):
    """Interface for metadata extraction following the Dependency Inversion Principle"""

    @abstractmethod
    async def extract(self, dom: DomQuery, url: str) -> PageMetadata:
        pass


class MetadataExtractor(MetadataExtractorInterface):
    """
    Runs the title, description and image passes over a rendered page
    """

    def __init__(self, image_probe: ImageProbeInterface):
        self.title_extractor = TitleExtractor()
        self.description_extractor = DescriptionExtractor()
        self.image_extractor = ImageExtractor(image_probe)

    async def extract(self, dom: DomQuery, url: str) -> PageMetadata:
        """Extract preview metadata; a failing pass fails the whole extraction"""
        logger.info(f"Extracting metadata from rendered page for URL: {url}")

        # The passes share nothing but the DOM
        tasks = [
            asyncio.ensure_future(self.title_extractor.extract(dom)),
            asyncio.ensure_future(self.description_extractor.extract(dom)),
            asyncio.ensure_future(self.image_extractor.extract(dom, url)),
        ]
        try:
            title, info, img = await asyncio.gather(*tasks)
        except Exception as e:
            logger.error(f"Failed to extract metadata for URL {url}: {str(e)}")
            # The page is released right after this, stop the remaining passes
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        logger.info(f"Successfully extracted metadata for URL: {url}")
        return PageMetadata(title=title, info=info, img=img)
