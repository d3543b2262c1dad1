import re
from urllib.parse import urlparse
from abc import ABC, abstractmethod


class URLValidatorInterface(ABC):
    """Interface for URL validation following the Dependency Inversion Principle"""

    @abstractmethod
    def validate(self, url: str) -> bool:
        """
        Validate a page URL before handing it to the renderer.

        Args:
            url: The URL string to validate

        Returns:
            True if the URL is valid and safe, False otherwise
        """
        pass


class URLValidator(URLValidatorInterface):
    """
    Validates page URLs and prevents SSRF attacks through the renderer.
    """

    # Block internal hosts to prevent SSRF
    private_patterns = [
        r"^127\.",
        r"^localhost",
        r"^0\.0\.0\.0$",
        r"^10\.",
        r"^172\.(1[6-9]|2[0-9]|3[0-1])\.",
        r"^192\.168\.",
        r"^169\.254\.",
        r"^::1$",
    ]

    def __init__(self, allow_private_hosts: bool = False):
        self.allow_private_hosts = allow_private_hosts

    def validate(self, url: str) -> bool:
        if not url:
            return False
        try:
            parsed = urlparse(url.strip())
            if not parsed.scheme or parsed.scheme not in ["http", "https"]:
                return False
            if not parsed.netloc:
                return False

            # Accessing .port raises ValueError when it is out of range
            if parsed.port is not None:
                if parsed.port < 1 or parsed.port > 65535:
                    return False

            hostname = parsed.hostname or ""
            if not hostname:
                return False

            if not self.allow_private_hosts:
                for pattern in self.private_patterns:
                    if re.match(pattern, hostname):
                        return False

            return True
        except ValueError:
            return False
