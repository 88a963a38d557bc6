"""
Test helpers package for PDF page toolkit tests.

Provides in-memory PDF builders, readers and fake collaborators.
"""

from .pdf_factory import (
    ExplodingReporter,
    FailingBackend,
    RecordingReporter,
    build_encrypted_pdf,
    build_numbered_pdf,
    build_pdf,
    page_width,
    read_rotations,
    read_widths,
    read_zip,
)

__all__ = [
    'ExplodingReporter',
    'FailingBackend',
    'RecordingReporter',
    'build_encrypted_pdf',
    'build_numbered_pdf',
    'build_pdf',
    'page_width',
    'read_rotations',
    'read_widths',
    'read_zip',
]
