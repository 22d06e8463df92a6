"""Least-recently-used page replacement."""

from __future__ import annotations

from collections import OrderedDict

from .replacement import Replacement


class LRUReplacement(Replacement):
    """Evicts the resident page whose last access is the oldest."""

    def __init__(self, num_pages: int, num_frames: int) -> None:
        super().__init__(num_pages, num_frames)
        # Resident pages ordered from least to most recently used.
        self._recency: OrderedDict[int, None] = OrderedDict()

    def touch_page(self, page_num: int) -> None:
        if page_num in self._recency:
            self._recency.move_to_end(page_num)

    def load_page(self, page_num: int) -> None:
        frame = self.next_free_frame()
        self.page_table.set_entry(page_num, frame, True)
        self._recency[page_num] = None
        self.page_faults += 1

    def replace_page(self, page_num: int) -> int:
        if not self._recency:
            raise RuntimeError("no resident page to evict")
        victim, _ = self._recency.popitem(last=False)
        frame = self.page_table.frame_number(victim)
        self.page_table.set_entry(victim, -1, False)
        self.page_table.set_entry(page_num, frame, True)
        self._recency[page_num] = None
        self.page_faults += 1
        self.page_replacements += 1
        return frame