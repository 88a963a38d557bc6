"""
Page selection parsing utilities.

This module turns user page selectors such as "1,3,5-10" into validated page
numbers for a document with a known page count. Page numbers are 1-based
throughout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from ..errors import EmptySelectionError, MalformedSelectorError


@dataclass(frozen=True)
class PageIndexSet:
    """Selected pages, 1-based, strictly ascending and never empty."""

    pages: tuple[int, ...]

    def __post_init__(self):
        if not self.pages:
            raise EmptySelectionError()
        if self.pages[0] < 1:
            raise ValueError("Page numbers must be >= 1")
        for previous, current in zip(self.pages, self.pages[1:]):
            if current <= previous:
                raise ValueError("Page numbers must be strictly ascending")

    @classmethod
    def full_range(cls, page_count: int) -> PageIndexSet:
        """Every page of a `page_count` page document."""
        return cls(tuple(range(1, page_count + 1)))

    def __iter__(self) -> Iterator[int]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    def __contains__(self, page: object) -> bool:
        return page in self.pages


@dataclass(frozen=True)
class PageOrder:
    """
    A user-chosen page sequence used to reorganize a document.

    Unlike PageIndexSet the order is kept as given and pages may repeat.
    """

    pages: tuple[int, ...]

    def __post_init__(self):
        if not self.pages:
            raise EmptySelectionError()
        if min(self.pages) < 1:
            raise ValueError("Page numbers must be >= 1")

    def __iter__(self) -> Iterator[int]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)


def _parse_number(text: str, token: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise MalformedSelectorError(token)
    return int(text)


def _expand_token(token: str, page_count: int) -> range:
    """
    Expand one selector token into the pages it names inside the document.

    Out-of-range pages and reversed ranges produce an empty range.
    """
    if "-" in token:
        parts = token.split("-")
        if len(parts) != 2:
            raise MalformedSelectorError(token)
        start_s, end_s = (part.strip() for part in parts)
        if not start_s or not end_s:
            raise MalformedSelectorError(token)
        start = _parse_number(start_s, token)
        end = _parse_number(end_s, token)
        if start > end:
            return range(0)
    else:
        start = end = _parse_number(token, token)

    return range(max(start, 1), min(end, page_count) + 1)


def _iter_tokens(selector: str | None) -> Iterator[str]:
    for part in str(selector or "").split(","):
        token = part.strip()
        if token:
            yield token


def parse_page_selector(selector: str | None, page_count: int) -> PageIndexSet:
    """
    Parse a page selector into an ascending, duplicate-free PageIndexSet.

    Supported formats:
    - "3"
    - "1-5"
    - "1, 3, 5-10"

    Pages outside 1..page_count are dropped, as are reversed ranges like "5-3".

    Args:
        selector: Raw selector text.
        page_count: Number of pages in the target document.

    Returns:
        PageIndexSet with the selected pages.

    Raises:
        MalformedSelectorError: A token is not a number or a range.
        EmptySelectionError: Nothing inside the document was selected.
    """
    pages: set[int] = set()
    for token in _iter_tokens(selector):
        pages.update(_expand_token(token, page_count))

    if not pages:
        raise EmptySelectionError()
    return PageIndexSet(tuple(sorted(pages)))


def parse_page_order(selector: str | None, page_count: int) -> PageOrder:
    """
    Parse a reorder selector such as "3, 1, 2, 5-7" into a PageOrder.

    Uses the same token grammar and range policy as parse_page_selector, but
    keeps the given order and repeated pages.
    """
    pages: list[int] = []
    for token in _iter_tokens(selector):
        pages.extend(_expand_token(token, page_count))

    if not pages:
        raise EmptySelectionError()
    return PageOrder(tuple(pages))


def split_selector_list(text: str | None) -> list[str]:
    """
    Split "1-3, 5, 8-10" into one selector per comma-separated range.

    Used by range splits, where every range becomes its own output document.
    Empty entries are kept so that positions match what the user typed.
    """
    raw = str(text or "").strip()
    if not raw:
        return []
    return [part.strip() for part in raw.split(",")]
