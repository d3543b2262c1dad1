from typing import List, Optional

from .dom_query import DomQuery
from .tiers import CandidateTier, element_prop, first_accepted, meta_content


async def _document_title(dom: DomQuery) -> Optional[str]:
    return await dom.title()


class TitleExtractor:
    """Extracts the page title from meta tags, the document title and headings"""

    def __init__(self):
        self.tiers: List[CandidateTier] = [
            CandidateTier("og:title", meta_content('meta[property="og:title"]')),
            CandidateTier("twitter:title", meta_content('meta[name="twitter:title"]')),
            CandidateTier("document title", _document_title),
            CandidateTier("h1", element_prop("h1", "innerHTML")),
            CandidateTier("h2", element_prop("h2", "innerHTML")),
        ]

    async def extract(self, dom: DomQuery) -> Optional[str]:
        return await first_accepted(self.tiers, dom, "title")
