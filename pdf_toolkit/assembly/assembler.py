"""
Document assembly.

Builds a new document by copying pages, in plan order, out of one or more
source documents. Merge, extract and reorder are all expressed as assembly
plans and run through the same DocumentAssembler.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from ..documents import DocumentBackend, PagedDocument, get_document_backend
from ..errors import AssemblyError, CopyFailedError
from ..utils.page_selection import PageIndexSet, PageOrder
from .progress import ProgressReporter


@dataclass(frozen=True)
class AssemblyStep:
    """Pages of one source document, 1-based, copied in the order given."""

    document: PagedDocument
    pages: tuple[int, ...]


AssemblyPlan = list[AssemblyStep]


def merge_plan(documents: Sequence[PagedDocument]) -> AssemblyPlan:
    """Every page of every document, documents in the given order."""
    return [
        AssemblyStep(document, PageIndexSet.full_range(document.page_count).pages)
        for document in documents
        if document.page_count > 0
    ]


def extract_plan(document: PagedDocument, pages: PageIndexSet) -> AssemblyPlan:
    """The selected pages of one document, ascending."""
    return [AssemblyStep(document, pages.pages)]


def reorder_plan(document: PagedDocument, order: PageOrder) -> AssemblyPlan:
    """Pages of one document in a user-chosen order, repeats allowed."""
    return [AssemblyStep(document, order.pages)]


class DocumentAssembler:
    """
    Copies pages into a fresh document according to an AssemblyPlan.

    Assembly is all-or-nothing: if any page fails to copy, CopyFailedError is
    raised and the partially built document is dropped.
    """

    def __init__(self, backend: Optional[DocumentBackend] = None):
        self.backend = backend or get_document_backend()
        self.logger = logging.getLogger(self.__class__.__name__)

    def assemble(self, plan: AssemblyPlan, reporter: Optional[ProgressReporter] = None,
                 name: str = '') -> PagedDocument:
        """
        Assemble a new document.

        Args:
            plan: Ordered (document, pages) steps
            reporter: Receives copied/total after every page copy
            name: Name for the new document

        Returns:
            The assembled PagedDocument

        Raises:
            AssemblyError: If the plan selects no pages
            CopyFailedError: If a page copy fails
        """
        target = self.backend.create(name)
        for fraction in self._copy_steps(plan, target):
            self._report(reporter, fraction)
        return target

    async def assemble_async(self, plan: AssemblyPlan, reporter: Optional[ProgressReporter] = None,
                             name: str = '') -> PagedDocument:
        """
        Cooperative variant of assemble().

        Yields to the event loop after each page copy. Ordering and result are
        the same as assemble().
        """
        target = self.backend.create(name)
        for fraction in self._copy_steps(plan, target):
            self._report(reporter, fraction)
            await asyncio.sleep(0)
        return target

    def _copy_steps(self, plan: AssemblyPlan, target: PagedDocument) -> Iterator[float]:
        total = sum(len(step.pages) for step in plan)
        if total == 0:
            raise AssemblyError("Nothing to assemble: the plan selects no pages")

        copied = 0
        for step in plan:
            source = step.document
            for page in step.pages:
                if not 1 <= page <= source.page_count:
                    raise CopyFailedError(page, source.name, f"document has {source.page_count} pages")
                try:
                    self.backend.copy_page(target, source, page - 1)
                except Exception as e:
                    raise CopyFailedError(page, source.name, str(e)) from e
                copied += 1
                self.logger.debug(f"Copied page {page} of {source.name or 'document'} ({copied}/{total})")
                yield copied / total

    def _report(self, reporter: Optional[ProgressReporter], fraction: float) -> None:
        if reporter is None:
            return
        try:
            reporter.report(fraction)
        except Exception as e:
            self.logger.warning(f"Progress reporter failed: {e}")
