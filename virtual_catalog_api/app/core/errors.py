"""
Error types raised by the catalog core.

``CatalogValidationError`` describes a bad id or order supplied by the
client; its message names the offending value and is safe to return
to the caller.  ``CatalogInternalError`` wraps an unexpected fault and
only exposes a generic ``public_message``; the underlying detail is
logged server side.
"""


class CatalogError(Exception):
    """Base class for catalog errors."""


class CatalogValidationError(CatalogError):
    """Client supplied an invalid id or order."""

    def __init__(self, message: str, value=None) -> None:
        super().__init__(message)
        self.value = value


class CatalogInternalError(CatalogError):
    """Unexpected failure while serving a catalog operation."""

    def __init__(self, public_message: str, detail: str = "") -> None:
        super().__init__(detail or public_message)
        self.public_message = public_message
        self.detail = detail
