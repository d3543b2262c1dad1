from typing import Optional

from pydantic import BaseModel


class PageMetadataResponse(BaseModel):
    title: Optional[str] = None
    info: Optional[str] = None
    img: Optional[str] = None
    cached: bool = False
