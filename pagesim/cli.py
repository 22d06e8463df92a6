"""Command-line driver comparing FIFO, LIFO and LRU page replacement."""

from __future__ import annotations

import re
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .fifo import FIFOReplacement
from .lifo import LIFOReplacement
from .lru import LRUReplacement
from .replacement import Replacement

LOGICAL_MEMORY_BITS = 27
MIN_PAGE_SIZE = 256
MAX_PAGE_SIZE = 8192
MIN_PHYS_MEM_MB = 4
MAX_PHYS_MEM_MB = 64

SMALL_REFS = "small_refs.txt"
LARGE_REFS = "large_refs.txt"

_RULE = "=" * 65
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def is_power_of_two(x: int) -> bool:
    """Return whether x is a positive power of two."""
    return x > 0 and x & (x - 1) == 0


@dataclass(frozen=True)
class MemoryLayout:
    """Sizes derived from the page size and physical memory size."""

    page_size: int
    phys_mem_size: int
    page_offset_bits: int
    num_pages: int
    num_frames: int

    @classmethod
    def from_sizes(cls, page_size: int, phys_mem_mb: int) -> MemoryLayout:
        """Validate the sizes and derive page and frame counts.

        Raises ValueError when a size is not a power of two in range.
        """
        if (
            not is_power_of_two(page_size)
            or page_size < MIN_PAGE_SIZE
            or page_size > MAX_PAGE_SIZE
        ):
            raise ValueError(
                "Invalid page size. Must be power of 2 between 256 and 8192."
            )
        if (
            not is_power_of_two(phys_mem_mb)
            or phys_mem_mb < MIN_PHYS_MEM_MB
            or phys_mem_mb > MAX_PHYS_MEM_MB
        ):
            raise ValueError(
                "Invalid physical memory size. Must be power of 2 between 4 and 64 MB."
            )
        phys_mem_size = phys_mem_mb << 20
        offset_bits = page_size.bit_length() - 1
        phys_bits = phys_mem_size.bit_length() - 1
        return cls(
            page_size=page_size,
            phys_mem_size=phys_mem_size,
            page_offset_bits=offset_bits,
            num_pages=1 << (LOGICAL_MEMORY_BITS - offset_bits),
            num_frames=1 << (phys_bits - offset_bits),
        )

    def page_number(self, address: int) -> int:
        """Return the logical page number holding an address."""
        return address >> self.page_offset_bits


def read_references(path: str | Path) -> list[int]:
    """Read whitespace-separated integer addresses, stopping at the first non-integer."""
    refs: list[int] = []
    with open(path, encoding="utf-8") as handle:
        for token in handle.read().split():
            try:
                refs.append(int(token))
            except ValueError:
                break
    return refs


def _leading_int(text: str) -> int:
    """Parse a leading integer the lenient way; text without one counts as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _run(policy: type[Replacement], layout: MemoryLayout, refs: Sequence[int]) -> None:
    start = time.perf_counter()
    sim = policy(layout.num_pages, layout.num_frames)
    for address in refs:
        sim.access_page(layout.page_number(address), False)
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    sim.print_statistics()
    print(f"Execution time: {elapsed_ms} ms")


def main(argv: Sequence[str] | None = None) -> int:
    """Run both simulation tests; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    print(_RULE)
    print("Description: Program to simulate different page replacement algorithms")
    print(_RULE + "\n")

    if len(args) < 2:
        print("Error: Please provide two command-line arguments:")
        print("1. Page size (256–8192 bytes, power of 2)")
        print("2. Physical memory size (4–64 MB, power of 2)")
        return 1

    try:
        layout = MemoryLayout.from_sizes(_leading_int(args[0]), _leading_int(args[1]))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Page size = {layout.page_size} bytes")
    print(f"Physical Memory size = {layout.phys_mem_size} bytes")
    print(f"Number of pages = {layout.num_pages}")
    print(f"Number of physical frames = {layout.num_frames}")

    print(
        "\n================================ Test 1 "
        "==============================================",
    )
    try:
        small_refs = read_references(SMALL_REFS)
    except OSError:
        print(f"Cannot open {SMALL_REFS}. Please check your path.", file=sys.stderr)
        return 1

    vm = FIFOReplacement(layout.num_pages, layout.num_frames)
    for address in small_refs:
        page_num = layout.page_number(address)
        fault = vm.access_page(page_num, False)
        entry = vm.page_entry(page_num)
        print(
            f"Logical address: {address}, \tpage number: {page_num}, "
            f"\tframe number: {entry.frame_num}, "
            f"\tis page fault? {'Yes' if fault else 'No'}"
        )
    vm.print_statistics()

    print(
        "\n================================ Test 2 "
        "==============================================",
    )
    try:
        large_refs = read_references(LARGE_REFS)
    except OSError:
        print(f"Cannot open {LARGE_REFS}. Please check your path.", file=sys.stderr)
        return 1

    for title, policy in (
        ("**************** Simulating FIFO Replacement ****************", FIFOReplacement),
        ("**************** Simulating LIFO Replacement ****************", LIFOReplacement),
        ("**************** Simulating LRU Replacement *****************", LRUReplacement),
    ):
        print(f"\n{title}")
        _run(policy, layout, large_refs)

    return 0


if __name__ == "__main__":
    sys.exit(main())