"""
Paged-document handles and library backends.
"""

from .base import DocumentBackend, PagedDocument
from .pypdf_backend import PypdfBackend, get_document_backend

__all__ = [
    'DocumentBackend',
    'PagedDocument',
    'PypdfBackend',
    'get_document_backend',
]
