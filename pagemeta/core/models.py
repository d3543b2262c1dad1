from typing import Optional, Dict, Any
from dataclasses import dataclass


@dataclass(frozen=True)
class PageMetadata:
    """
    Preview metadata extracted from a rendered page
    """
    title: Optional[str] = None
    info: Optional[str] = None
    img: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the metadata to a dictionary representation"""
        return {
            "title": self.title,
            "info": self.info,
            "img": self.img
        }
