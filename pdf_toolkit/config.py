"""
Configuration module for the PDF page toolkit.

This module contains default configuration values used across the toolkit,
including output file names, archive naming, password rules and supported
file formats.
"""

from typing import Set

# Output file names
MERGED_FILE_NAME = "merged-document.pdf"
"""str: File name given to the result of a merge."""

EXTRACTED_FILE_NAME = "extracted-pages.pdf"
"""str: File name given to the result of a page extraction."""

SPLIT_PAGE_TEMPLATE = "page-{n}.pdf"
"""str: Entry name for per-page splits, `n` is the 1-based page number."""

SPLIT_RANGE_TEMPLATE = "split-{n}.pdf"
"""str: Entry name for range splits, `n` is the 1-based range position."""

SPLIT_BUNDLE_NAME = "split-pdfs.zip"
"""str: Archive name used when a split result is bundled."""

ORGANIZED_PREFIX = "organized-"
"""str: Prepended to the input file name for reordered documents."""

ROTATED_PREFIX = "rotated-"
"""str: Prepended to the input file name for rotated documents."""

PROTECTED_PREFIX = "protected-"
"""str: Prepended to the input file name for encrypted documents."""

UNLOCKED_PREFIX = "unlocked-"
"""str: Prepended to the input file name for decrypted documents."""

DEFAULT_DOCUMENT_NAME = "document.pdf"
"""str: Fallback name when the caller does not supply one."""

# Default output subdirectory name
DEFAULT_OUTPUT_DIR = "pdf_output"
"""str: Default subdirectory name for CLI output, created next to the first input."""

# Protection
MIN_PASSWORD_LENGTH = 4
"""int: Shortest password accepted by the protect operation."""

ENCRYPTION_ALGORITHM = "AES-256"
"""str: Algorithm name passed to pypdf when protecting a document.

AES requires the `cryptography` package, pulled in by the `pypdf[crypto]` extra.
"""

# Rotation
ROTATION_STEP = 90
"""int: Page rotations must be a multiple of this many degrees."""

# Supported file formats
SUPPORTED_PDF_FORMATS = {'.pdf'}
"""Set[str]: File formats the page tools accept as input."""


def get_supported_formats() -> Set[str]:
    """
    Get the complete set of supported input file formats.

    Returns:
        Set of supported file extensions
    """
    return set(SUPPORTED_PDF_FORMATS)
