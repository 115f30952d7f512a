# taskhub/utils/pagination.py
import math
from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 20
SMALL_PAGE_SIZE = 10  # comment and assigned-task listings


@dataclass(frozen=True)
class Pagination:
    page: int
    page_size: int

    @classmethod
    def clamp(cls, page: Optional[int], page_size: Optional[int], default_size: int = DEFAULT_PAGE_SIZE) -> "Pagination":
        """Out-of-range values fall back to page 1 and the endpoint's default size"""
        if page is None or page < 1:
            page = 1
        if page_size is None or page_size < 1 or page_size > MAX_PAGE_SIZE:
            page_size = default_size
        return cls(page=page, page_size=page_size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


def page_count(total: int, page_size: int) -> int:
    return max(1, math.ceil(total / page_size))


@dataclass
class PageResult(Generic[T]):
    items: List[T]
    total: int
    pagination: Pagination

    @property
    def page(self) -> int:
        return self.pagination.page

    @property
    def pages(self) -> int:
        return page_count(self.total, self.pagination.page_size)


def parse_int(value: Optional[str]) -> Optional[int]:
    """Lenient query-string parsing: anything unparsable counts as absent"""
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        return None
