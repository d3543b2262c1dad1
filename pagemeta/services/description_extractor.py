from typing import List, Optional

from .dom_query import DomQuery
from .tiers import CandidateTier, first_accepted, meta_content


async def first_visible_paragraph(dom: DomQuery) -> Optional[str]:
    """
    Text of the first paragraph that is rendered and holds only text.

    Paragraphs wrapping other elements (links, images, inline markup) are
    skipped so that the description is plain prose.
    """
    for paragraph in await dom.query_selector_all("p"):
        if not await paragraph.is_visible():
            continue
        if await paragraph.child_element_count() != 0:
            continue
        return await paragraph.prop("textContent")
    return None


class DescriptionExtractor:
    """Extracts a page description from meta tags with a paragraph fallback"""

    def __init__(self):
        self.tiers: List[CandidateTier] = [
            CandidateTier("og:description", meta_content('meta[property="og:description"]')),
            CandidateTier("twitter:description", meta_content('meta[name="twitter:description"]')),
            CandidateTier("description", meta_content('meta[name="description"]')),
            CandidateTier("first visible paragraph", first_visible_paragraph),
        ]

    async def extract(self, dom: DomQuery) -> Optional[str]:
        return await first_accepted(self.tiers, dom, "description")
