"""Simulation of FIFO, LIFO and LRU page replacement over a page table."""

__version__ = "1.0.0"
__all__ = ["pagetable", "replacement", "fifo", "lifo", "lru", "cli"]