"""Image reachability probe used to accept or reject image candidates"""

import asyncio
import base64
import binascii
import logging
import re
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from pagemeta.core.config import settings
from pagemeta.exceptions import CandidateFault
from .url_validator import URLValidator, URLValidatorInterface


logger = logging.getLogger(__name__)

_DATA_URI = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[\w.+-]+=[^;,]*)*;base64,(?P<data>[A-Za-z0-9+/\s]*={0,2})$",
    re.IGNORECASE,
)
_URL = re.compile(r"(?:https?:)?//[^\s\"'<>()]+\.[^\s\"'<>()]+", re.IGNORECASE)


def is_base64_image(candidate: str) -> bool:
    """True for a well-formed base64 ``data:`` URI with an image (or no) MIME type"""
    match = _DATA_URI.match(candidate.strip())
    if not match:
        return False
    mime = match.group("mime")
    if mime and not mime.lower().startswith("image/"):
        return False
    try:
        base64.b64decode("".join(match.group("data").split()), validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def find_first_url(text: str) -> Optional[str]:
    """Return the first http(s) or protocol-relative URL embedded in ``text``"""
    match = _URL.search(text)
    if not match:
        return None
    url = match.group(0).rstrip(".,;")
    if url.startswith("//"):
        url = "https:" + url
    return url


class ImageProbeInterface(ABC):
    """Interface for checking that an image candidate resolves to image content"""

    @abstractmethod
    async def is_reachable_image(self, candidate: str) -> Optional[bool]:
        """
        Check an image candidate.

        Returns:
            True for embedded images and URLs serving ``image/*`` content,
            False for other content types and for private or internal hosts,
            None when the candidate holds no URL

        Raises:
            CandidateFault: If the request fails, times out, or redirects to a
                private or internal host
        """
        pass


class ImageProbe(ImageProbeInterface):
    """Probes image URLs by inspecting response headers only"""

    max_redirects = 5

    def __init__(self, timeout: float = None, user_agent: str = None,
                 transport: httpx.AsyncBaseTransport = None,
                 url_validator: URLValidatorInterface = None):
        self.timeout = timeout if timeout is not None else settings.probe_timeout
        self.user_agent = user_agent or settings.renderer_user_agent
        self.transport = transport
        self.url_validator = url_validator or URLValidator()

    async def is_reachable_image(self, candidate: str) -> Optional[bool]:
        if is_base64_image(candidate):
            logger.debug("Embedded base64 image accepted without probing")
            return True

        url = find_first_url(candidate)
        if url is None:
            logger.debug(f"No URL found in image candidate: {candidate[:100]}")
            return None

        if not self.url_validator.validate(url):
            logger.warning(f"Image candidate points at a disallowed host, not probing: {url}")
            return False

        logger.debug(f"Probing image URL: {url}")
        try:
            # One deadline for every hop
            content_type = await asyncio.wait_for(self._fetch_content_type(url), self.timeout)
        except asyncio.TimeoutError:
            raise CandidateFault(url, f"No response headers within {self.timeout}s")
        except httpx.HTTPError as e:
            raise CandidateFault(url, f"{type(e).__name__}: {e}")

        reachable = "image/" in content_type.lower()
        logger.debug(f"Probe for {url} returned content-type '{content_type}' (image: {reachable})")
        return reachable

    async def _check_redirect_target(self, request: httpx.Request) -> None:
        if not self.url_validator.validate(str(request.url)):
            raise CandidateFault(str(request.url), "Redirected to a disallowed host")

    async def _fetch_content_type(self, url: str) -> str:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            max_redirects=self.max_redirects,
            transport=self.transport,
            event_hooks={"request": [self._check_redirect_target]},
        ) as client:
            # Streaming reads the headers without downloading the body
            async with client.stream("GET", url, headers={"User-Agent": self.user_agent}) as res:
                return res.headers.get("content-type", "")
