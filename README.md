# pagesim

pagesim simulates virtual-memory page replacement. It models a page
table and three replacement policies. For a stream of page accesses it
counts the references, the page faults and the page replacements.

Policies:

- `FIFOReplacement` (in `pagesim.fifo`) evicts the page that has been resident longest.
- `LIFOReplacement` (in `pagesim.lifo`) evicts the page that was loaded most recently.
- `LRUReplacement` (in `pagesim.lru`) evicts the resident page whose last access is oldest.

## Installation

```
pip install .
```

## Command line

```
pagesim PAGE_SIZE PHYS_MEM_MB
```

- `PAGE_SIZE` is the page size in bytes. It must be a power of two from 256 to 8192.
- `PHYS_MEM_MB` is the physical memory size in megabytes. It must be a power of two from 4 to 64.

Each argument is read by its leading integer. An argument with no
leading integer counts as 0.

The logical address space is 2^27 bytes. The command prints the page
size, the physical memory size in bytes, and the number of pages and
frames. It then reads whitespace-separated logical addresses from
`small_refs.txt` and `large_refs.txt` in the current directory. Reading
a file stops at its first token that is not an integer.

- **Test 1** runs FIFO over the small list. For each address it prints
  the address, the page number, the frame number and whether the access
  caused a page fault. It then prints the statistics.
- **Test 2** runs FIFO, LIFO and LRU over the large list. For each policy
  it prints the statistics and the execution time in milliseconds.

The command exits with status 1 in three cases:

- fewer than two arguments are given (a usage message goes to standard output);
- a size is invalid (the message goes to standard error);
- a reference file cannot be opened (the message goes to standard error).

Otherwise it exits with status 0.

Example:

```
pagesim 1024 32
```

## Library use

```python
from pagesim.lru import LRUReplacement

sim = LRUReplacement(num_pages=8, num_frames=3)
for page in [0, 1, 2, 0, 3, 0, 4]:
    faulted = sim.access_page(page, False)
    print(page, sim.page_entry(page).frame_num, faulted)

stats = sim.statistics()
print(stats.format())
sim.print_statistics(None)  # writes to standard output
```

`access_page(page_num, is_write)` returns `True` when the access caused
a page fault. The `is_write` flag is accepted but not used.
`statistics()` returns a frozen `Statistics` with `references`,
`page_faults` and `page_replacements`. `print_statistics(file)` writes
the three-line report to `file`, or to standard output when `file` is
`None`.

`PageTable` (in `pagesim.pagetable`) holds one `PageEntry` per logical
page. Each entry has `frame_num` (-1 when unmapped), `valid` and
`dirty`. The table has these methods:

- `frame_number`, `is_valid`, `set_entry` and `entry`. `entry` returns a copy.
- `len(table)` gives the number of pages.
- `table[page]` gives the live entry.

A page number outside the table raises `IndexError`. A negative page
count or frame count raises `ValueError`. If a policy has to evict a
page while none is resident, it raises `RuntimeError`. This happens
when there are zero frames.

To write your own policy, subclass `Replacement` (in
`pagesim.replacement`) and implement `replace_page`. You can also
override `load_page` and `touch_page`. Use `next_free_frame()` to take
frames while free ones remain.

`pagesim.cli` has helpers for the command:

- `MemoryLayout.from_sizes(page_size, phys_mem_mb)` validates the sizes
  and derives the page offset width and the number of pages and frames.
  It raises `ValueError` when a size is invalid.
- `MemoryLayout.page_number(address)` maps an address to its page.
- `is_power_of_two(x)` tells whether `x` is a power of two.
- `read_references(path)` reads an address file.

## Tests

```
pip install ".[test]"
pytest
```