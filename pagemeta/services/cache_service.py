import logging
from abc import ABC, abstractmethod
from typing import Optional
from cachetools import TTLCache
from pagemeta.core.models import PageMetadata

from pagemeta.core.config import settings

logger = logging.getLogger(__name__)


class CacheInterface(ABC):
    """Interface for caching following the Dependency Inversion Principle"""

    @abstractmethod
    def get(self, key: str) -> Optional[PageMetadata]:
        """
        Get metadata from cache.

        Args:
            key: The cache key (the page URL)

        Returns:
            The cached PageMetadata if found, None otherwise
        """
        pass

    @abstractmethod
    def set(self, key: str, value: PageMetadata) -> None:
        pass


class MetadataCache(CacheInterface):
    """
    TTL Cache for extracted page metadata with configurable size and TTL.
    """

    def __init__(self, maxsize: int = None, ttl: int = None):
        """
        Initialize the cache.

        Args:
            maxsize: Maximum number of items to cache (uses config default if None)
            ttl: Time to live in seconds (uses config default if None)
        """
        if maxsize is None:
            maxsize = settings.cache_maxsize
        if ttl is None:
            ttl = settings.cache_ttl_seconds

        self.cache: TTLCache[str, PageMetadata] = TTLCache(maxsize=maxsize, ttl=ttl)

    def get(self, key: str) -> Optional[PageMetadata]:
        logger.debug(f"Checking cache for key: {key}")
        cached_item = self.cache.get(key)
        if cached_item is not None:
            logger.debug(f"Cache hit for key: {key}")
        else:
            logger.debug(f"Cache miss for key: {key}")
        return cached_item

    def set(self, key: str, value: PageMetadata) -> None:
        logger.debug(f"Storing metadata in cache for key: {key}")
        self.cache[key] = value
