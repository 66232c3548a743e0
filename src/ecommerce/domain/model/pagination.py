"""Pagination descriptor returned alongside list queries."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20


@dataclass(frozen=True)
class Pagination:
    current_page: int
    limit: int
    skip: int
    total: int
    total_pages: int

    @staticmethod
    def new(page: int, limit: int, total: int) -> Pagination:
        """Build a descriptor for *page* of *limit* items out of *total*.

        Non-positive page and limit fall back to the defaults.
        """
        if page <= 0:
            page = DEFAULT_PAGE
        if limit <= 0:
            limit = DEFAULT_LIMIT
        total_pages = (total + limit - 1) // limit if total > 0 else 0
        return Pagination(
            current_page=page,
            limit=limit,
            skip=(page - 1) * limit,
            total=total,
            total_pages=total_pages,
        )
