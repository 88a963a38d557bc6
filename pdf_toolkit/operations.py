"""
Page operations: merge, split, extract, organize, rotate, protect and unlock.

Each operation takes raw file bytes plus the user's options, loads fresh
documents, runs them through the assembler and returns an OutputArtifact.
Nothing is kept between calls, and an operation either returns a complete
artifact or raises.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from . import config
from .assembly import (
    EXTRACT_NAMING,
    MERGE_NAMING,
    SPLIT_ALL_NAMING,
    SPLIT_RANGES_NAMING,
    DocumentAssembler,
    NamingPolicy,
    OutputArtifact,
    OutputPackager,
    ProgressReporter,
    SegmentProgressReporter,
    SplitMode,
    extract_plan,
    merge_plan,
    plan_split,
    reorder_plan,
)
from .documents import DocumentBackend, PagedDocument, get_document_backend
from .errors import AssemblyError, PasswordError
from .utils.page_selection import PageIndexSet, parse_page_order, parse_page_selector, split_selector_list

logger = logging.getLogger(__name__)


def _whole_document(document: PagedDocument) -> PageIndexSet:
    return PageIndexSet.full_range(document.page_count)


def merge_documents(files: Sequence[tuple[bytes, str]], reporter: Optional[ProgressReporter] = None,
                    backend: Optional[DocumentBackend] = None) -> OutputArtifact:
    """
    Merge PDF files, in the given order, into one document.

    Args:
        files: (bytes, file name) pairs, at least two
        reporter: Optional progress sink
        backend: Document backend (default: pypdf)

    Returns:
        SingleFile named `merged-document.pdf`
    """
    if len(files) < 2:
        raise ValueError("At least two PDF files are needed to merge")

    backend = backend or get_document_backend()
    documents = [backend.load(data, name) for data, name in files]

    merged = DocumentAssembler(backend).assemble(merge_plan(documents), reporter, name=config.MERGED_FILE_NAME)
    logger.info(f"Merged {len(documents)} documents into {merged.page_count} pages")
    return OutputPackager().package([merged], MERGE_NAMING, backend.serialize)


def split_document(data: bytes, name: str, mode: SplitMode = SplitMode.ALL,
                   ranges: Union[str, Sequence[str], None] = None,
                   reporter: Optional[ProgressReporter] = None,
                   backend: Optional[DocumentBackend] = None) -> OutputArtifact:
    """
    Split a PDF into several documents.

    Args:
        data: PDF bytes
        name: Original file name
        mode: SplitMode.ALL for one file per page, SplitMode.RANGES for one file per range
        ranges: Page selectors for RANGES mode. A single string is split on commas,
            so "1-3,5" yields two documents.
        reporter: Optional progress sink
        backend: Document backend (default: pypdf)

    Returns:
        Bundle with `page-{n}.pdf` or `split-{i}.pdf` entries
    """
    backend = backend or get_document_backend()
    document = backend.load(data, name)

    if isinstance(ranges, str):
        selectors = split_selector_list(ranges)
    else:
        selectors = list(ranges or [])

    plan = plan_split(mode, document.page_count, selectors)
    total = sum(len(partition.pages) for partition in plan)

    assembler = DocumentAssembler(backend)
    parts = []
    done = 0
    for partition in plan:
        segment = None
        if reporter is not None:
            segment = SegmentProgressReporter(reporter, done / total, len(partition.pages) / total)
        parts.append(assembler.assemble(extract_plan(document, partition.pages), segment))
        done += len(partition.pages)

    policy = SPLIT_ALL_NAMING if mode is SplitMode.ALL else SPLIT_RANGES_NAMING
    logger.info(f"Split {name or 'document'} into {len(parts)} documents")
    return OutputPackager().package(parts, policy, backend.serialize,
                                    numbers=[partition.number for partition in plan])


def extract_pages(data: bytes, name: str, selector: str, reporter: Optional[ProgressReporter] = None,
                  backend: Optional[DocumentBackend] = None) -> OutputArtifact:
    """
    Copy the selected pages into a new document, in ascending page order.

    Returns:
        SingleFile named `extracted-pages.pdf`
    """
    backend = backend or get_document_backend()
    document = backend.load(data, name)
    pages = parse_page_selector(selector, document.page_count)

    extracted = DocumentAssembler(backend).assemble(extract_plan(document, pages), reporter,
                                                    name=config.EXTRACTED_FILE_NAME)
    logger.info(f"Extracted {len(pages)} of {document.page_count} pages")
    return OutputPackager().package([extracted], EXTRACT_NAMING, backend.serialize)


def organize_pages(data: bytes, name: str, order: str, reporter: Optional[ProgressReporter] = None,
                   backend: Optional[DocumentBackend] = None) -> OutputArtifact:
    """
    Rebuild a document with its pages in the order given.

    Pages left out of `order` are removed and repeated pages are duplicated,
    e.g. "3, 1, 1, 4-6".

    Returns:
        SingleFile named `organized-<name>`
    """
    backend = backend or get_document_backend()
    document = backend.load(data, name)
    page_order = parse_page_order(order, document.page_count)

    policy = NamingPolicy.prefixed(config.ORGANIZED_PREFIX, name)
    organized = DocumentAssembler(backend).assemble(reorder_plan(document, page_order), reporter,
                                                    name=policy.single_name)
    logger.info(f"Organized {document.page_count} pages into {organized.page_count}")
    return OutputPackager().package([organized], policy, backend.serialize)


def rotate_pages(data: bytes, name: str, angle: int, selector: Optional[str] = None,
                 reporter: Optional[ProgressReporter] = None,
                 backend: Optional[DocumentBackend] = None) -> OutputArtifact:
    """
    Rotate pages clockwise by `angle` degrees on top of their current rotation.

    Args:
        angle: Multiple of 90, negative for counter-clockwise
        selector: Pages to rotate (default: all pages)

    Returns:
        SingleFile named `rotated-<name>`
    """
    if angle % config.ROTATION_STEP != 0:
        raise ValueError(f"Rotation must be a multiple of {config.ROTATION_STEP} degrees, got {angle}")

    backend = backend or get_document_backend()
    document = backend.load(data, name)
    if selector and selector.strip():
        targets = parse_page_selector(selector, document.page_count)
    else:
        targets = _whole_document(document)

    policy = NamingPolicy.prefixed(config.ROTATED_PREFIX, name)
    rotated = DocumentAssembler(backend).assemble(merge_plan([document]), reporter, name=policy.single_name)

    angle = angle % 360
    if angle:
        for page in targets:
            try:
                backend.rotate_page(rotated, page - 1, angle)
            except Exception as e:
                raise AssemblyError(f"Failed to rotate page {page}: {e}") from e

    logger.info(f"Rotated {len(targets)} pages by {angle} degrees")
    return OutputPackager().package([rotated], policy, backend.serialize)


def validate_password(password: Optional[str]) -> str:
    """
    Check a password chosen for protection.

    Raises:
        PasswordError: If it is missing or shorter than MIN_PASSWORD_LENGTH
    """
    if not password:
        raise PasswordError("Please enter a password")
    if len(password) < config.MIN_PASSWORD_LENGTH:
        raise PasswordError(f"Password must be at least {config.MIN_PASSWORD_LENGTH} characters")
    return password


def protect_document(data: bytes, name: str, password: str, reporter: Optional[ProgressReporter] = None,
                     backend: Optional[DocumentBackend] = None) -> OutputArtifact:
    """
    Encrypt a document so that it needs `password` to open.

    Returns:
        SingleFile named `protected-<name>`
    """
    password = validate_password(password)
    backend = backend or get_document_backend()
    document = backend.load(data, name)

    policy = NamingPolicy.prefixed(config.PROTECTED_PREFIX, name)
    protected = DocumentAssembler(backend).assemble(merge_plan([document]), reporter, name=policy.single_name)
    backend.encrypt(protected, password)

    logger.info(f"Protected {name or 'document'} with {config.ENCRYPTION_ALGORITHM}")
    return OutputPackager().package([protected], policy, backend.serialize)


def unlock_document(data: bytes, name: str, password: Optional[str] = None,
                    reporter: Optional[ProgressReporter] = None,
                    backend: Optional[DocumentBackend] = None) -> OutputArtifact:
    """
    Open an encrypted document and rewrite it without encryption.

    Raises:
        DocumentLoadError: If the password is wrong or missing

    Returns:
        SingleFile named `unlocked-<name>`
    """
    backend = backend or get_document_backend()
    document = backend.load(data, name, password=password or None)

    policy = NamingPolicy.prefixed(config.UNLOCKED_PREFIX, name)
    unlocked = DocumentAssembler(backend).assemble(merge_plan([document]), reporter, name=policy.single_name)

    logger.info(f"Unlocked {name or 'document'}")
    return OutputPackager().package([unlocked], policy, backend.serialize)
