"""Capability interface the extractors use to read a rendered page"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple


class DomElement(ABC):
    """A single element of a rendered document"""

    @abstractmethod
    async def prop(self, name: str) -> Optional[str]:
        """
        Read a DOM property of the element as a string.

        Supported names are the ones the extractors need: ``content``,
        ``href``, ``src``, ``innerHTML`` and ``textContent``.

        Returns:
            The property value, or None if the element does not carry it
        """
        pass

    @abstractmethod
    async def natural_size(self) -> Tuple[int, int]:
        """Return ``(naturalWidth, naturalHeight)`` of an image element"""
        pass

    @abstractmethod
    async def is_visible(self) -> bool:
        """True when the element has a layout box (non-null offsetParent)"""
        pass

    @abstractmethod
    async def child_element_count(self) -> int:
        pass


class DomQuery(ABC):
    """Interface for querying a rendered document following the Dependency Inversion Principle"""

    @abstractmethod
    async def query_selector(self, selector: str) -> Optional[DomElement]:
        pass

    @abstractmethod
    async def query_selector_all(self, selector: str) -> List[DomElement]:
        pass

    @abstractmethod
    async def title(self) -> Optional[str]:
        """Return ``document.title``"""
        pass
