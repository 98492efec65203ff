# kiamkit

A small toolkit of building blocks for numerical and systems code.

## Modules

- `kiamkit.mathutil`: guarded math helpers that raise `ValueError` outside
  their domain (`safe_sqrt`, `safe_log`, `safe_log10`, `safe_log2`,
  `safe_asin`, `safe_acos`), rounding (`round_int`, `pround`,
  `round_to_level`), `num_len`, `rad`/`deg`, `sign`, `cbrt`, `sqr`, `cube`,
  clipping (`clipped`, `val_to_range`, `in_range`), `float_is_ok`, tolerance
  comparisons (`about_zero`, `near_zero`, `about_equal`, `near_equal`,
  `sign_about`, `sign_near`) and the closed interval `BBox1`.
- `kiamkit.numerics`: result codes and enumerations for numerical routines
  (`NalError`, `FftDirection`, `SplineKind`, `TreeMode`), the frozen
  `Kiaml` pair of full-mesh and rough-mesh results, the constants
  `ZERO_DOUBLE` and `MAX_DOUBLE`, and `is_power2`.
- `kiamkit.arrays`: `ArrayView`, a fixed-length window over a mutable
  sequence that shares its storage, and `Array`, which owns zero-initialised
  storage and resizes on `allocate` and `copy_from`; plus `set_all` and
  `add_all`, which require equal lengths.
- `kiamkit.kstr`: `KStr`, a string that may be null. Null sorts before every
  other string; `icmp` compares case-insensitively and returns -1, 0 or 1.
- `kiamkit.memclass`: `MemoryClass`, a registry with one instance per name
  that tracks current and peak sizes, with totals
  (`allocated_by_class`, `allocated_by_all`) and a tracing threshold
  (`set_trace`, `to_trace`).
- `kiamkit.memstream`: in-memory byte streams. `ReadMemStream` reads a fixed
  block and raises `EOFError` past its end; `WriteMemStream` appends bytes
  until closed. Both work as context managers.
- `kiamkit.tsync`: `TSync`, a recursive lock entered with `mono` and left
  with `multi`; `AutoSync`, a scoped holder of a `TSync`; and the events
  `TEvent` and `TEventSet` (wait on any of several events).
- `kiamkit.version`: `IR_VERSION`, `IR_PROT_VERSION`, `REPOSITORY_VERSION`,
  and the helpers `ir_version_tuple`, `repository_version_tuple` and
  `protocol_name`.

## Installation

```
pip install kiamkit
```

## Examples

```python
from kiamkit.mathutil import BBox1, pround, clipped

box = BBox1(0.0, 2.0)
box.include(5.0)
print(box.diag(), box.center())     # 5.0 2.5

print(pround(0.012345, 2))          # 0.012
print(clipped(7, 0, 5))             # 5
```

```python
from kiamkit.memstream import WriteMemStream, ReadMemStream

out = WriteMemStream(block_size=1024, initial_size=1024)
out.write(b"hello")
out.write_byte(0x21)

src = ReadMemStream(out.data())
print(src.read(5), src.read_byte(), src.end_of_stream())   # b'hello' 33 True
```

```python
from kiamkit.tsync import TSync, AutoSync

lock = TSync()
with AutoSync(lock) as guard:
    print(guard.held)   # True: the section is held until the block ends
```

## What this package does not do

`kiamkit.numerics` holds only the shared codes, enumerations and constants of
a numerical analysis library; it does not contain linear algebra solvers,
splines, root finders, quadrature, Fourier transforms, binary trees or
sorting routines. There is no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```