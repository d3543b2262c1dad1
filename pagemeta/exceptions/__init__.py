from .base import AppException, ErrorCode
from .page import PageNavigationException, InvalidPageURLException, CandidateFault

__all__ = [
    "AppException",
    "ErrorCode",
    "PageNavigationException",
    "InvalidPageURLException",
    "CandidateFault",
]
