"""First-in, first-out page replacement."""

from __future__ import annotations

from collections import deque

from .replacement import Replacement


class FIFOReplacement(Replacement):
    """Evicts the page that has been resident the longest."""

    def __init__(self, num_pages: int, num_frames: int) -> None:
        super().__init__(num_pages, num_frames)
        self._queue: deque[int] = deque()

    def load_page(self, page_num: int) -> None:
        frame = self.next_free_frame()
        self.page_table.set_entry(page_num, frame, True)
        self._queue.append(page_num)
        self.page_faults += 1

    def replace_page(self, page_num: int) -> int:
        if not self._queue:
            raise RuntimeError("no resident page to evict")
        victim = self._queue.popleft()
        frame = self.page_table.frame_number(victim)
        self.page_table.set_entry(victim, -1, False)
        self.page_table.set_entry(page_num, frame, True)
        self._queue.append(page_num)
        self.page_faults += 1
        self.page_replacements += 1
        return frame