"""
PDF page toolkit.

Merge, split, extract, organize, rotate, protect and unlock PDF documents
using page selectors such as "1,3,5-10".
"""

from .assembly import Bundle, SingleFile, SplitMode, save_artifact
from .errors import (
    AssemblyError,
    CopyFailedError,
    DocumentLoadError,
    EmptySelectionError,
    MalformedSelectorError,
    PageSelectionError,
    PasswordError,
    PdfToolkitError,
)
from .operations import (
    extract_pages,
    merge_documents,
    organize_pages,
    protect_document,
    rotate_pages,
    split_document,
    unlock_document,
)

__version__ = "0.1.0"

__all__ = [
    'Bundle', 'SingleFile', 'SplitMode', 'save_artifact',
    'AssemblyError', 'CopyFailedError', 'DocumentLoadError', 'EmptySelectionError',
    'MalformedSelectorError', 'PageSelectionError', 'PasswordError', 'PdfToolkitError',
    'extract_pages', 'merge_documents', 'organize_pages', 'protect_document',
    'rotate_pages', 'split_document', 'unlock_document',
]
