import io

import pytest

from pagesim.replacement import Replacement, Statistics


class _Recorder(Replacement):
    def __init__(self, num_pages, num_frames):
        super().__init__(num_pages, num_frames)
        self.calls = []

    def touch_page(self, page_num):
        self.calls.append(("touch", page_num))

    def load_page(self, page_num):
        self.calls.append(("load", page_num))
        self.page_table.set_entry(page_num, Replacement.next_free_frame(self), True)

    def replace_page(self, page_num):
        self.calls.append(("replace", page_num))
        return 0


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Replacement(4, 2)


def test_negative_frames_rejected():
    sim = _Recorder(4, 2)
    with pytest.raises(ValueError):
        Replacement.__init__(sim, 4, -1)


def test_next_free_frame_counts_up():
    sim = _Recorder(4, 4)
    assert [Replacement.next_free_frame(sim) for _ in range(3)] == [0, 1, 2]


def test_access_dispatches_to_hooks():
    sim = _Recorder(8, 2)
    faults = [Replacement.access_page(sim, page, False) for page in (1, 2, 1, 3)]
    assert faults == [True, True, False, True]
    assert sim.calls == [("load", 1), ("load", 2), ("touch", 1), ("replace", 3)]
    assert Replacement.statistics(sim).references == 4


def test_page_entry_is_copy():
    sim = _Recorder(4, 2)
    Replacement.access_page(sim, 3, False)
    entry = Replacement.page_entry(sim, 3)
    entry.valid = False
    assert sim.page_table.is_valid(3)
    assert Replacement.page_entry(sim, 3).frame_num == sim.page_table.frame_number(3)


def test_statistics_format():
    stats = Statistics(references=5, page_faults=3, page_replacements=1)
    assert stats.format().splitlines() == [
        "Number of references: \t\t5",
        "Number of page faults: \t\t3",
        "Number of page replacements: \t1",
    ]


def test_print_statistics_writes_report():
    sim = _Recorder(4, 2)
    Replacement.access_page(sim, 0, False)
    Replacement.access_page(sim, 0, False)
    out = io.StringIO()
    Replacement.print_statistics(sim, out)
    stats = Replacement.statistics(sim)
    assert out.getvalue() == stats.format() + "\n"
    assert stats.references == 2
    assert stats.page_faults == 0
    assert stats.page_replacements == 0