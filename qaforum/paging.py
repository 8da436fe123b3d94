"""Page-by-page navigation over a list of ids."""

from __future__ import annotations

from typing import Iterable


class Pager:
    """Splits a list into pages of ``page_size`` items and tracks the current page."""

    def __init__(self, page_size: int, items: Iterable[int] = ()):
        if page_size < 1:
            raise ValueError("page size must be positive")
        self.page_size = page_size
        self.items: list[int] = []
        self._low = 0
        self.reset(items)

    @property
    def page_count(self) -> int:
        return -(-len(self.items) // self.page_size)

    @property
    def current_page(self) -> int:
        return self._low // self.page_size + 1

    def reset(self, items: Iterable[int]) -> list[int]:
        """Replace the items, go back to the first page and return its window."""
        self.items = list(items)
        self._low = 0
        return self.window()

    def next_page(self) -> bool:
        """Move one page forward; False if already on the last page."""
        new_low = self._low + self.page_size
        if new_low >= len(self.items):
            return False
        self._low = new_low
        return True

    def previous_page(self) -> bool:
        """Move one page back; False if already on the first page."""
        new_low = self._low - self.page_size
        if new_low < 0:
            return False
        self._low = new_low
        return True

    def go_to(self, page: int) -> bool:
        """Jump to a 1-based page; False if it is already the current page."""
        if not 1 <= page <= self.page_count:
            raise ValueError(f"page {page} is outside 1..{self.page_count}")
        new_low = (page - 1) * self.page_size
        if new_low == self._low:
            return False
        self._low = new_low
        return True

    def window(self) -> list[int]:
        """The items shown on the current page."""
        return self.items[self._low : self._low + self.page_size]