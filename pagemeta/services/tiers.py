"""Ordered candidate tiers shared by the extraction passes"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Sequence

from .dom_query import DomQuery


logger = logging.getLogger(__name__)

Extract = Callable[[DomQuery], Awaitable[Optional[str]]]
Accept = Callable[[str], Awaitable[Optional[bool]]]


@dataclass(frozen=True)
class CandidateTier:
    """One ranked fallback option within an extraction pass"""
    name: str
    extract: Extract
    accept: Optional[Accept] = None


def meta_content(selector: str) -> Extract:
    return element_prop(selector, "content")


def element_prop(selector: str, name: str) -> Extract:
    """Build an extractor returning property ``name`` of the first ``selector`` match"""
    async def extract(dom: DomQuery) -> Optional[str]:
        element = await dom.query_selector(selector)
        if element is None:
            return None
        return await element.prop(name)
    return extract


async def first_accepted(tiers: Sequence[CandidateTier], dom: DomQuery, pass_name: str) -> Optional[str]:
    """
    Evaluate tiers in order and return the first non-empty, accepted candidate.

    Faults raised while extracting a candidate propagate. Faults raised by an
    acceptance check only reject that candidate; an indeterminate (None)
    verdict rejects it as well.
    """
    for tier in tiers:
        value = await tier.extract(dom)
        if not value:
            continue

        if tier.accept is not None:
            try:
                accepted = await tier.accept(value)
            except Exception as e:
                logger.warning(f"[{pass_name}] candidate from '{tier.name}' rejected after fault: {e}")
                continue
            if accepted is not True:
                logger.debug(f"[{pass_name}] candidate from '{tier.name}' not accepted")
                continue

        logger.debug(f"[{pass_name}] selected candidate from '{tier.name}'")
        return value

    logger.debug(f"[{pass_name}] no candidate found")
    return None
