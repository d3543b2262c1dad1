from fastapi import APIRouter, Depends, Query

from pagemeta.config.logging_config import get_logger
from pagemeta.dependencies.metadata_deps import get_metadata_service
from pagemeta.models.metadata_model import PageMetadataResponse
from pagemeta.services.metadata_service import MetadataService

logger = get_logger(__name__)

router = APIRouter()


@router.get("", response_model=PageMetadataResponse)
async def get_page_metadata(
    url: str = Query(..., description="Page to preview"),
    service: MetadataService = Depends(get_metadata_service),
):
    logger.info(f"Received request for page metadata: {url}")
    result = await service.get_metadata(url)
    logger.info(f"Successfully returned page metadata for: {url}")
    return result
