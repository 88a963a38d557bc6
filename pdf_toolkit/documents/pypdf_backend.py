"""
pypdf implementation of the paged-document backend.

Source documents are held as `PdfReader` objects and documents under
construction as `PdfWriter` objects. Pages are copied with `add_page`, which
clones the page objects verbatim without re-rendering.
"""

from __future__ import annotations

from io import BytesIO
from typing import Optional

from pypdf import PasswordType, PdfReader, PdfWriter
from pypdf.errors import FileNotDecryptedError

from .. import config
from ..errors import AssemblyError, DocumentLoadError
from .base import DocumentBackend, PagedDocument


class PypdfBackend(DocumentBackend):
    """Document backend built on pypdf."""

    def load(self, data: bytes, name: str = '', password: Optional[str] = None) -> PagedDocument:
        label = name or 'document'
        if not data:
            raise DocumentLoadError(f"Could not read {label}: file is empty")

        try:
            reader = PdfReader(BytesIO(data))
            # A password given for an unencrypted file is ignored
            if reader.is_encrypted and password:
                if reader.decrypt(password) == PasswordType.NOT_DECRYPTED:
                    raise DocumentLoadError(f"Incorrect password for {label}")
            page_count = len(reader.pages)
        except DocumentLoadError:
            raise
        except FileNotDecryptedError as e:
            raise DocumentLoadError(f"{label} is password protected") from e
        except Exception as e:
            raise DocumentLoadError(f"Could not read {label}: {e}") from e

        self.logger.debug(f"Loaded {label} with {page_count} pages")
        return PagedDocument(reader, name)

    def create(self, name: str = '') -> PagedDocument:
        return PagedDocument(PdfWriter(), name)

    def copy_page(self, target: PagedDocument, source: PagedDocument, index: int) -> None:
        writer = self._writer(target)
        writer.add_page(source.handle.pages[index])

    def rotate_page(self, document: PagedDocument, index: int, angle: int) -> None:
        self._writer(document).pages[index].rotate(angle)

    def encrypt(self, document: PagedDocument, user_password: str, owner_password: Optional[str] = None) -> None:
        self._writer(document).encrypt(
            user_password=user_password,
            owner_password=owner_password,
            algorithm=config.ENCRYPTION_ALGORITHM,
        )

    def serialize(self, document: PagedDocument) -> bytes:
        handle = document.handle
        try:
            writer = handle if isinstance(handle, PdfWriter) else PdfWriter(clone_from=handle)
            buffer = BytesIO()
            writer.write(buffer)
        except Exception as e:
            raise AssemblyError(f"Could not write {document.name or 'document'}: {e}") from e
        return buffer.getvalue()

    @staticmethod
    def _writer(document: PagedDocument) -> PdfWriter:
        if not isinstance(document.handle, PdfWriter):
            raise TypeError("Pages can only be added to or changed in a document created by the backend")
        return document.handle


# Global backend instance
_global_backend: PypdfBackend | None = None


def get_document_backend() -> PypdfBackend:
    """
    Get the global document backend instance.

    Returns:
        Global PypdfBackend instance
    """
    global _global_backend
    if _global_backend is None:
        _global_backend = PypdfBackend()
    return _global_backend
