from functools import lru_cache

from pagemeta.services.container import ServiceContainer
from pagemeta.services.metadata_service import MetadataService


@lru_cache()
def get_container() -> ServiceContainer:
    return ServiceContainer()


def get_metadata_service() -> MetadataService:
    """FastAPI dependency returning the shared metadata service"""
    return get_container().get_metadata_service()
