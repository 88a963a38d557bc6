"""
Split planning.

Turns a split request into a PartitionPlan: an ordered list of page sets,
each of which becomes one output document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from ..errors import EmptySelectionError, PageSelectionError
from ..utils.page_selection import PageIndexSet, parse_page_selector

logger = logging.getLogger(__name__)


class SplitMode(Enum):
    """How a document is split."""

    ALL = "all"
    """One output document per page."""

    RANGES = "ranges"
    """One output document per page selector."""


@dataclass(frozen=True)
class Partition:
    """
    Pages for one output document.

    `number` is the 1-based page number for per-page splits, or the 1-based
    position of the selector for range splits; output names are built from it.
    """

    number: int
    pages: PageIndexSet


PartitionPlan = list[Partition]


def plan_split(mode: SplitMode, page_count: int, selectors: Sequence[str] = ()) -> PartitionPlan:
    """
    Plan how a document is split.

    Args:
        mode: SplitMode.ALL or SplitMode.RANGES
        page_count: Number of pages in the document
        selectors: Page selectors, used in RANGES mode only

    Returns:
        Partitions in output order.

    Raises:
        ValueError: If page_count is below 1
        EmptySelectionError: If no selector produced any pages
    """
    if page_count < 1:
        raise ValueError("Cannot split a document without pages")

    if mode is SplitMode.ALL:
        return [Partition(number=page, pages=PageIndexSet((page,))) for page in range(1, page_count + 1)]

    plan: PartitionPlan = []
    for position, selector in enumerate(selectors, 1):
        try:
            pages = parse_page_selector(selector, page_count)
        except PageSelectionError as e:
            logger.warning(f"Skipping range {position} ('{selector}'): {e}")
            continue
        plan.append(Partition(number=position, pages=pages))

    if not plan:
        raise EmptySelectionError("No valid page ranges provided")
    return plan
