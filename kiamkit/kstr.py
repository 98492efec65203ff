"""A string value that may be null, with null-aware ordering."""

from __future__ import annotations


def _raw(other):
    if isinstance(other, KStr):
        return other._value
    if other is None or isinstance(other, str):
        return other
    raise TypeError(f"cannot compare KStr with {type(other).__name__}")


class KStr:
    """A string that distinguishes a null value from an empty one.

    A null string sorts before every non-null string.
    """

    __slots__ = ("_value",)

    def __init__(self, value=None):
        if isinstance(value, KStr):
            value = value._value
        if value is not None and not isinstance(value, str):
            raise TypeError(f"expected str or None, got {type(value).__name__}")
        self._value = value

    @property
    def value(self):
        """The underlying string, or ``None`` for a null string."""
        return self._value

    def is_null(self):
        """True if the string is null."""
        return self._value is None

    def is_empty(self):
        """True if the string is null or has no characters."""
        return not self._value

    def __len__(self):
        return 0 if self._value is None else len(self._value)

    def __getitem__(self, ind):
        """Character at ``ind``; the index equal to the length gives the terminator ``"\\0"``."""
        if self._value is None:
            raise ValueError("indexing a null string")
        if not 0 <= ind <= len(self._value):
            raise IndexError(f"index {ind} out of range")
        return "\0" if ind == len(self._value) else self._value[ind]

    def __str__(self):
        return "" if self._value is None else self._value

    def __repr__(self):
        return f"KStr({self._value!r})"

    def __hash__(self):
        return hash(self._value)

    def __eq__(self, other):
        try:
            s = _raw(other)
        except TypeError:
            return NotImplemented
        return self._value == s

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __lt__(self, other):
        s = _raw(other)
        if self._value is None or s is None:
            return s is not None
        return self._value < s

    def __le__(self, other):
        s = _raw(other)
        if self._value is None or s is None:
            return s is None if self._value is None else False
        return self._value <= s

    def __gt__(self, other):
        s = _raw(other)
        if self._value is None or s is None:
            return self._value is not None
        return self._value > s

    def __ge__(self, other):
        s = _raw(other)
        if self._value is None or s is None:
            return s is None if self._value is None else True
        return self._value >= s

    def icmp(self, other):
        """Case-insensitive comparison returning -1, 0 or 1."""
        s = _raw(other)
        if self._value is None:
            return 0 if s is None else -1
        if s is None:
            return 1
        a, b = self._value.lower(), s.lower()
        return (a > b) - (a < b)