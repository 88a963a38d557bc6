"""
Exception types raised by the PDF page toolkit.

Library code raises these; the CLI layer catches them at the top level,
logs a short message and exits with a non-zero status.
"""


class PdfToolkitError(Exception):
    """Base class for all toolkit errors."""


class PageSelectionError(PdfToolkitError, ValueError):
    """A page selector could not be turned into a usable set of pages."""


class MalformedSelectorError(PageSelectionError):
    """A selector token is not a page number or a `start-end` range."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid page range: '{token}'")


class EmptySelectionError(PageSelectionError):
    """A selector resolved to no pages inside the document."""

    def __init__(self, message: str = "No pages selected"):
        super().__init__(message)


class DocumentLoadError(PdfToolkitError):
    """Source bytes could not be opened as a PDF document."""


class AssemblyError(PdfToolkitError):
    """A new document could not be assembled."""


class CopyFailedError(AssemblyError):
    """Copying a single page into the new document failed."""

    def __init__(self, page: int, source: str = "", reason: str = ""):
        self.page = page
        self.source = source
        detail = f" from {source}" if source else ""
        suffix = f": {reason}" if reason else ""
        super().__init__(f"Failed to copy page {page}{detail}{suffix}")


class PasswordError(PdfToolkitError, ValueError):
    """A password was rejected before any document was touched."""
