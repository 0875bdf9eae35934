"""
Page errors for pagewright

Both kinds abort the current request. Translation to an HTTP response
happens in the exception handler registered by the application.
"""
from enum import Enum


class PageErrorKind(str, Enum):
    """Closed set of failures raised while resolving a page."""

    INTERNAL_ERROR = "internal_error"
    PAGE_NOT_FOUND = "page_not_found"


class PageError(Exception):
    """Base class for page resolution failures."""

    kind: PageErrorKind = PageErrorKind.INTERNAL_ERROR

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InternalErrorException(PageError):
    """The environment cannot serve pages (no CMS manager, no site)."""

    kind = PageErrorKind.INTERNAL_ERROR


class PageNotFoundException(PageError):
    """The requested page does not exist for this caller."""

    kind = PageErrorKind.PAGE_NOT_FOUND
