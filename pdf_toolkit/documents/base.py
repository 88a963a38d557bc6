"""
Base classes for paged-document backends.

This module defines the opaque document handle passed between the toolkit's
components and the abstract interface every PDF library adapter implements.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional


class PagedDocument:
    """
    Opaque handle to a decoded, paginated document.

    The wrapped library object is only touched by the backend that created it.
    Consumers read `page_count` and `name` and never modify the handle; every
    transformation produces a new PagedDocument.
    """

    __slots__ = ('_handle', '_name')

    def __init__(self, handle: Any, name: str = ''):
        self._handle = handle
        self._name = name

    @property
    def handle(self) -> Any:
        """Library object backing this document."""
        return self._handle

    @property
    def name(self) -> str:
        return self._name

    @property
    def page_count(self) -> int:
        return len(self._handle.pages)

    def __len__(self) -> int:
        return self.page_count

    def __repr__(self) -> str:
        return f"PagedDocument(name={self._name!r}, pages={self.page_count})"


class DocumentBackend(ABC):
    """
    Abstract interface to a paged-document library.

    Page indices at this level are 0-based, as the underlying libraries use them.
    """

    def __init__(self):
        """Initialize the backend."""
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def load(self, data: bytes, name: str = '', password: Optional[str] = None) -> PagedDocument:
        """
        Decode document bytes.

        Args:
            data: Raw file bytes
            name: File name, kept on the handle for output naming
            password: Password for encrypted documents

        Returns:
            PagedDocument ready for reading

        Raises:
            DocumentLoadError: If the bytes cannot be opened
        """
        pass

    @abstractmethod
    def create(self, name: str = '') -> PagedDocument:
        """Create a new, empty document that pages can be copied into."""
        pass

    @abstractmethod
    def copy_page(self, target: PagedDocument, source: PagedDocument, index: int) -> None:
        """
        Append a verbatim copy of `source` page `index` to `target`.

        `target` must come from `create()`.
        """
        pass

    @abstractmethod
    def rotate_page(self, document: PagedDocument, index: int, angle: int) -> None:
        """Rotate page `index` of a created document clockwise by `angle` degrees."""
        pass

    @abstractmethod
    def encrypt(self, document: PagedDocument, user_password: str, owner_password: Optional[str] = None) -> None:
        """Mark a created document to be encrypted when serialized."""
        pass

    @abstractmethod
    def serialize(self, document: PagedDocument) -> bytes:
        """Encode a document back to file bytes."""
        pass
