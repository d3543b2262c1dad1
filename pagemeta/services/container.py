from typing import Dict, Type, TypeVar
from .url_validator import URLValidator, URLValidatorInterface
from .renderer import PageRendererInterface, create_renderer
from .reachability import ImageProbe, ImageProbeInterface
from .metadata_extractor import MetadataExtractor, MetadataExtractorInterface
from .cache_service import MetadataCache, CacheInterface
from .metadata_service import MetadataService

T = TypeVar('T')


class ServiceContainer:
    """Container for managing service dependencies with dependency injection"""

    def __init__(self, renderer_backend: str = None):
        self._services: Dict[Type, object] = {}
        self._register_services(renderer_backend)

    def _register_services(self, renderer_backend: str = None) -> None:
        """Register all services with proper dependency injection"""
        self._services[URLValidatorInterface] = URLValidator()
        self._services[PageRendererInterface] = create_renderer(renderer_backend)
        self._services[ImageProbeInterface] = ImageProbe(
            url_validator=self._services[URLValidatorInterface]
        )
        self._services[CacheInterface] = MetadataCache()

        self._services[MetadataExtractorInterface] = MetadataExtractor(
            self._services[ImageProbeInterface]
        )

        # Main service that depends on others
        self._services[MetadataService] = MetadataService(
            self._services[URLValidatorInterface],
            self._services[PageRendererInterface],
            self._services[MetadataExtractorInterface],
            self._services[CacheInterface]
        )

    def get_metadata_service(self) -> MetadataService:
        """Get the metadata service instance"""
        return self._services[MetadataService]  # type: ignore

    def get_service(self, interface: Type[T]) -> T:
        """Generic method to retrieve a service by its interface"""
        service = self._services.get(interface)
        if service is None:
            raise ValueError(f"Service for interface {interface.__name__} not found")
        return service  # type: ignore
