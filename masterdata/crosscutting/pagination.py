"""
===============================================================================
MODULE: Pagination helpers (zero-based page index)
===============================================================================

Goal
----
Simple, consistent pagination for list endpoints:
- paginate() slices an already ordered sequence
- Page[T] is the generic response envelope

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Component:
  paginate + build_page + Page[T]

Responsibilities:
  - Slice [page*size, page*size + size) clipped to the sequence bounds
  - Compute page metadata (total, page_count, has_next/has_prev)

Rules:
  - A page beyond the last one is empty, never an error.
  - Negative page index or non-positive size is a caller bug (ValueError).
===============================================================================
"""

from __future__ import annotations

from typing import Generic, List, Sequence, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageInfo(BaseModel):
    page: int = Field(description="Zero-based index of this page")
    page_size: int = Field(description="Requested page size")
    total: int = Field(description="Items matching the filter")
    page_count: int = Field(description="Number of non-empty pages")
    has_next: bool = Field(description="There are items after this page")
    has_prev: bool = Field(description="There are items before this page")


class Page(BaseModel, Generic[T]):
    items: List[T] = Field(description="Items of the current page")
    page_info: PageInfo = Field(description="Pagination metadata")


def paginate(items: Sequence[T], page_index: int, page_size: int) -> List[T]:
    """Return the page_index-th slice of page_size items (empty if out of range)."""
    if page_index < 0:
        raise ValueError("page_index must be >= 0")
    if page_size <= 0:
        raise ValueError("page_size must be > 0")

    start = page_index * page_size
    return list(items[start : start + page_size])


def page_count(total: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be > 0")
    return (total + page_size - 1) // page_size


def build_page(items: Sequence[T], page_index: int, page_size: int) -> Page[T]:
    """
    Paginate and wrap with metadata.

    has_prev holds for every page after the first unless the sequence is
    empty, so an out-of-range page still points back to data.
    """
    page_items = paginate(items, page_index, page_size)
    total = len(items)
    start = page_index * page_size

    return Page(
        items=page_items,
        page_info=PageInfo(
            page=page_index,
            page_size=page_size,
            total=total,
            page_count=page_count(total, page_size),
            has_next=start + page_size < total,
            has_prev=page_index > 0 and total > 0,
        ),
    )
