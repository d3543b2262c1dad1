from .base import AppException, ErrorCode


class PageNavigationException(AppException):
    """Raised when the renderer cannot load the requested page"""

    def __init__(self, url: str = "", reason: str = "", status_code: int = 502):
        details = {"url": url}
        if reason:
            details["reason"] = reason

        super().__init__(
            code=ErrorCode.PAGE_NAVIGATION_FAILED,
            message=f"Failed to load page: {url}" if url else "Failed to load page",
            status_code=status_code,
            details=details
        )


class InvalidPageURLException(PageNavigationException):
    """Raised when the page URL is malformed or points at a disallowed host"""

    def __init__(self, url: str = ""):
        super().__init__(url=url, reason="Invalid or unsafe URL provided", status_code=400)
        self.code = ErrorCode.INVALID_PAGE_URL
        self.message = f"Invalid page URL: {url}" if url else "Invalid page URL provided"


class CandidateFault(AppException):
    """Raised when checking a single extraction candidate fails; never fatal"""

    def __init__(self, candidate: str = "", reason: str = ""):
        details = {"candidate": candidate}
        if reason:
            details["reason"] = reason

        super().__init__(
            code=ErrorCode.CANDIDATE_CHECK_FAILED,
            message=f"Candidate check failed: {candidate}" if candidate else "Candidate check failed",
            status_code=500,
            details=details
        )
