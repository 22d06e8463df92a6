import pytest

from pagesim.lifo import LIFOReplacement


def _run(refs, frames, pages=16):
    sim = LIFOReplacement(pages, frames)
    for page in refs:
        sim.access_page(page)
    return sim


def test_most_recent_page_is_evicted():
    sim = _run([1, 2, 3], 3)
    frame_of_3 = sim.page_table.frame_number(3)
    assert sim.access_page(4)
    assert not sim.page_table.is_valid(3)
    assert sim.page_table.frame_number(4) == frame_of_3


def test_replacement_keeps_evicting_same_frame():
    sim = _run([1, 2, 3], 3)
    frame_of_3 = sim.page_table.frame_number(3)
    for page in (4, 5, 6):
        sim.access_page(page)
        assert sim.page_table.frame_number(page) == frame_of_3
    assert all(sim.page_table.is_valid(p) for p in (1, 2, 6))
    assert not any(sim.page_table.is_valid(p) for p in (3, 4, 5))


def test_hit_does_not_change_victim():
    sim = _run([1, 2, 3, 1, 4], 3)
    assert sim.page_table.is_valid(1)
    assert not sim.page_table.is_valid(3)


def test_counters_are_consistent():
    refs = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]
    sim = LIFOReplacement(8, 3)
    faults = sum(sim.access_page(p) for p in refs)
    stats = sim.statistics()
    assert stats.references == len(refs)
    assert stats.page_faults == faults
    assert stats.page_replacements == faults - 3


def test_no_frames_cannot_replace():
    sim = LIFOReplacement(4, 0)
    with pytest.raises(RuntimeError):
        sim.access_page(0)