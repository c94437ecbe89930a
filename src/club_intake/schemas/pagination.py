"""Offset pagination shared by the listing endpoints"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List

# Keeps the OFFSET within the database integer range
MAX_PAGE_NUMBER = 1_000_000


@dataclass
class PageRequest:
    page: int
    limit: int

    @classmethod
    def build(cls, page: int, limit: int, max_limit: int) -> "PageRequest":
        """Clamp page to [1, MAX_PAGE_NUMBER] and limit to [1, max_limit]"""
        return cls(
            page=min(max(page, 1), MAX_PAGE_NUMBER),
            limit=min(max(limit, 1), max_limit),
        )

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Page:
    items: List[Any]
    total_count: int
    request: PageRequest

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.request.limit)

    def pagination(self) -> Dict[str, Any]:
        return {
            "currentPage": self.request.page,
            "totalPages": self.total_pages,
            "totalCount": self.total_count,
            "hasNext": self.request.page < self.total_pages,
            "hasPrev": self.request.page > 1,
        }
