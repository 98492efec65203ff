"""Fixed-length array views over shared storage, and arrays that own their storage."""

from __future__ import annotations

from itertools import islice


class ArrayView:
    """A fixed-length window over the first ``size`` items of a mutable sequence.

    The view does not copy: writes through the view change the underlying
    sequence and vice versa.
    """

    def __init__(self, data=None, size=0):
        self._data = None
        self._size = 0
        self.rebind(data, size)

    def rebind(self, data, size):
        """Point the view at another sequence (or at nothing, with ``None``)."""
        if size < 0:
            raise ValueError(f"negative array size {size}")
        if data is None:
            if size:
                raise ValueError("a view without storage must have size 0")
        elif size > len(data):
            raise ValueError(f"size {size} exceeds storage of length {len(data)}")
        self._data = data
        self._size = size

    def __len__(self):
        return self._size

    def _check_index(self, i):
        if not 0 <= i < self._size:
            raise IndexError(f"index {i} out of range for array of length {self._size}")

    def __getitem__(self, i):
        self._check_index(i)
        return self._data[i]

    def __setitem__(self, i, value):
        self._check_index(i)
        self._data[i] = value

    def __iter__(self):
        if self._data is None:
            return iter(())
        return islice(self._data, self._size)

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"

    def _take(self, values):
        taken = list(islice(values, self._size))
        if len(taken) < self._size:
            raise ValueError(f"expected at least {self._size} values, got {len(taken)}")
        return taken

    def fill(self, val):
        """Set every element to ``val``."""
        if self._size:
            self._data[: self._size] = [val] * self._size

    def set_from(self, values):
        """Overwrite the elements with the first ``len(self)`` items of ``values``."""
        taken = self._take(values)
        if self._size:
            self._data[: self._size] = taken

    def add_from(self, values):
        """Add the first ``len(self)`` items of ``values`` element-wise."""
        taken = self._take(values)
        if self._size:
            self._data[: self._size] = [a + b for a, b in zip(self, taken)]

    def scale(self, c):
        """Multiply every element by ``c``."""
        if self._size:
            self._data[: self._size] = [a * c for a in self]

    def copy_from(self, src):
        """Copy as many elements of ``src`` as fit into this view."""
        if src is self:
            return
        if self._data is None or src._data is None:
            raise ValueError("cannot copy between arrays without storage")
        n = min(len(self), len(src))
        self._data[:n] = list(islice(src, n))


class Array(ArrayView):
    """An array that owns its storage; elements start at zero."""

    def __init__(self, n=0):
        if n < 0:
            raise ValueError(f"negative array size {n}")
        super().__init__([0] * n, n)

    def allocate(self, n):
        """Resize to ``n`` elements; new storage is zeroed, same size keeps contents."""
        if n < 0:
            raise ValueError(f"negative array size {n}")
        if n == len(self):
            return
        self.rebind([0] * n, n)

    def copy_from(self, src):
        """Resize to the length of ``src`` and copy all its elements."""
        if src is self:
            return
        self.allocate(len(src))
        super().copy_from(src)


def _check_same_length(a, b):
    if len(a) != len(b):
        raise ValueError(f"array lengths differ: {len(a)} and {len(b)}")


def set_all(a, b):
    """Copy every element of ``b`` into ``a``; the lengths must match."""
    _check_same_length(a, b)
    a.set_from(b)


def add_all(a, b):
    """Add every element of ``b`` to ``a``; the lengths must match."""
    _check_same_length(a, b)
    a.add_from(b)