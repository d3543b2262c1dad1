import logging
from typing import Dict, Any, Tuple

from pagemeta.core.models import PageMetadata
from pagemeta.exceptions import InvalidPageURLException
from .cache_service import CacheInterface, MetadataCache
from .metadata_extractor import MetadataExtractor, MetadataExtractorInterface
from .reachability import ImageProbe
from .renderer import PageRendererInterface, RendererConfig, create_renderer
from .url_validator import URLValidator, URLValidatorInterface

logger = logging.getLogger(__name__)


class MetadataService:
    """
    Renders a page and extracts its preview metadata, with caching
    """

    def __init__(
        self,
        url_validator: URLValidatorInterface,
        renderer: PageRendererInterface,
        metadata_extractor: MetadataExtractorInterface,
        cache: CacheInterface
    ):
        self.url_validator = url_validator
        self.renderer = renderer
        self.metadata_extractor = metadata_extractor
        self.cache = cache

    async def get_page_metadata(self, url: str) -> PageMetadata:
        """
        Get preview metadata for a page.

        Args:
            url: The page URL

        Returns:
            PageMetadata; any field may be None when no candidate qualified

        Raises:
            InvalidPageURLException: If the URL is malformed or unsafe
            PageNavigationException: If the page cannot be loaded
        """
        metadata, _ = await self._get(url)
        return metadata

    async def get_metadata(self, url: str) -> Dict[str, Any]:
        """Same as get_page_metadata, as a dictionary with the cache status"""
        metadata, cached = await self._get(url)
        result = metadata.to_dict()
        result["cached"] = cached
        return result

    async def _get(self, url: str) -> Tuple[PageMetadata, bool]:
        logger.info(f"Getting metadata for URL: {url}")

        if not url or not url.strip():
            logger.warning("Empty or whitespace-only URL parameter provided")
            raise InvalidPageURLException(url or "")
        url = url.strip()

        if not self.url_validator.validate(url):
            logger.warning(f"Invalid or unsafe URL provided: {url}")
            raise InvalidPageURLException(url)

        cached_data = self.cache.get(url)
        if cached_data is not None:
            logger.info(f"Metadata retrieved from cache for URL: {url}")
            return cached_data, True

        async with self.renderer.render(url) as dom:
            metadata = await self.metadata_extractor.extract(dom, url)

        self.cache.set(url, metadata)
        logger.info(f"Metadata extracted and cached for URL: {url}")
        return metadata, False


async def get_page_metadata(url: str, config: RendererConfig = None, backend: str = None) -> PageMetadata:
    """
    One-shot extraction without the application container.

    Args:
        url: The page URL
        config: Arguments, user agent and executable path for the browser
        backend: ``playwright`` or ``static``; defaults to the configured backend
    """
    config = config or RendererConfig()
    url_validator = URLValidator()
    service = MetadataService(
        url_validator,
        create_renderer(backend, config),
        MetadataExtractor(ImageProbe(user_agent=config.user_agent, url_validator=url_validator)),
        MetadataCache(),
    )
    return await service.get_page_metadata(url)
