"""A flat page table mapping logical pages to physical frames."""

from __future__ import annotations

from dataclasses import dataclass, replace

INVALID_FRAME = -1


@dataclass
class PageEntry:
    """One page-table entry: frame number, valid bit and (unused) dirty bit."""

    frame_num: int = INVALID_FRAME
    valid: bool = False
    dirty: bool = False


class PageTable:
    """An array of page entries indexed by logical page number."""

    def __init__(self, num_pages: int) -> None:
        if num_pages < 0:
            raise ValueError(f"number of pages must not be negative: {num_pages}")
        self._entries = [PageEntry() for _ in range(num_pages)]

    def _check(self, page_num: int) -> None:
        if not 0 <= page_num < len(self._entries):
            raise IndexError(
                f"page {page_num} out of range 0..{len(self._entries) - 1}"
            )

    def frame_number(self, page_num: int) -> int:
        """Return the frame the page is mapped to, or -1 if unmapped."""
        self._check(page_num)
        return self._entries[page_num].frame_num

    def is_valid(self, page_num: int) -> bool:
        """Return whether the page is currently resident in memory."""
        self._check(page_num)
        return self._entries[page_num].valid

    def set_entry(self, page_num: int, frame_num: int, valid: bool) -> None:
        """Set the frame number and valid bit of a page."""
        self._check(page_num)
        entry = self._entries[page_num]
        entry.frame_num = frame_num
        entry.valid = valid

    def entry(self, page_num: int) -> PageEntry:
        """Return a copy of the page's entry."""
        self._check(page_num)
        return replace(self._entries[page_num])

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, page_num: int) -> PageEntry:
        """Return the live entry for the page; changes to it affect the table."""
        self._check(page_num)
        return self._entries[page_num]