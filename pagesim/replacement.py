"""Base class for page replacement simulations."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TextIO

from .pagetable import PageEntry, PageTable


@dataclass(frozen=True)
class Statistics:
    """Counters collected during a simulation."""

    references: int
    page_faults: int
    page_replacements: int

    def format(self) -> str:
        """Render the counters as the three-line report."""
        return (
            f"Number of references: \t\t{self.references}\n"
            f"Number of page faults: \t\t{self.page_faults}\n"
            f"Number of page replacements: \t{self.page_replacements}"
        )


class Replacement(ABC):
    """Simulates page accesses; subclasses decide which page to evict."""

    def __init__(self, num_pages: int, num_frames: int) -> None:
        if num_frames < 0:
            raise ValueError(f"number of frames must not be negative: {num_frames}")
        self.page_table = PageTable(num_pages)
        self.num_pages = num_pages
        self.num_frames = num_frames
        self._free_frame = 0
        self.references = 0
        self.page_faults = 0
        self.page_replacements = 0

    def access_page(self, page_num: int, is_write: bool = False) -> bool:
        """Access a page; return True if the access caused a page fault."""
        self.references += 1
        if self.page_table.is_valid(page_num):
            self.touch_page(page_num)
            return False
        if self._free_frame < self.num_frames:
            self.load_page(page_num)
        else:
            self.replace_page(page_num)
        return True

    def touch_page(self, page_num: int) -> None:
        """Called when a resident page is accessed."""

    def load_page(self, page_num: int) -> None:
        """Called on a page fault while free frames remain."""

    @abstractmethod
    def replace_page(self, page_num: int) -> int:
        """Evict a page to make room; return the frame given to page_num."""

    def page_entry(self, page_num: int) -> PageEntry:
        """Return a copy of the page-table entry for a page."""
        return self.page_table.entry(page_num)

    def next_free_frame(self) -> int:
        """Hand out the next unused frame number."""
        frame = self._free_frame
        self._free_frame += 1
        return frame

    def statistics(self) -> Statistics:
        """Return a snapshot of the counters."""
        return Statistics(self.references, self.page_faults, self.page_replacements)

    def print_statistics(self, file: TextIO | None = None) -> None:
        """Write the statistics report to file (standard output by default)."""
        print(self.statistics().format(), file=file if file is not None else sys.stdout)