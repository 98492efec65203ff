"""Named memory accounting classes with current and peak sizes."""

from __future__ import annotations

from enum import Enum


class TraceMode(Enum):
    """Whether allocations are traced."""

    UNDEFINED = "undefined"
    TRACE = "trace"
    NO_TRACE = "no_trace"


class MemoryClass:
    """Running total of memory attributed to one named class of allocations.

    Instances are obtained through :meth:`get_class`; there is one per name.
    """

    _registry: dict[str, MemoryClass] = {}
    _trace_mode = TraceMode.UNDEFINED
    _trace_size = 0

    def __init__(self, name):
        self.name = name
        self.cur_size = 0
        self.max_size = 0

    def __repr__(self):
        return f"MemoryClass({self.name!r}, cur={self.cur_size}, max={self.max_size})"

    def add(self, size):
        """Account ``size`` more bytes and update the peak."""
        self.cur_size += size
        if self.cur_size > self.max_size:
            self.max_size = self.cur_size

    def remove(self, size):
        """Account ``size`` bytes as released."""
        if size > self.cur_size:
            raise ValueError(f"releasing {size} bytes from class {self.name!r} holding {self.cur_size}")
        self.cur_size -= size

    @classmethod
    def get_class(cls, class_name):
        """The class of that name, created on first use."""
        found = cls._registry.get(class_name)
        if found is None:
            found = cls(class_name)
            cls._registry[class_name] = found
        return found

    @classmethod
    def all_classes(cls):
        """Iterate over every registered class in creation order."""
        yield from list(cls._registry.values())

    @classmethod
    def allocated_by_class(cls, class_name):
        """Current size of the named class, 0 if it does not exist."""
        found = cls._registry.get(class_name)
        return 0 if found is None else found.cur_size

    @classmethod
    def allocated_by_all(cls):
        """Sum of current sizes over all classes."""
        return sum(mc.cur_size for mc in cls._registry.values())

    @classmethod
    def set_trace(cls, enabled, size=0):
        """Turn tracing of allocations of at least ``size`` bytes on or off."""
        cls._trace_mode = TraceMode.TRACE if enabled else TraceMode.NO_TRACE
        cls._trace_size = size

    @classmethod
    def to_trace(cls, size):
        """True if an allocation of ``size`` bytes should be traced."""
        return cls._trace_mode is TraceMode.TRACE and cls._trace_size <= size

    @classmethod
    def reset_registry(cls):
        """Forget all classes and the trace settings."""
        cls._registry.clear()
        cls._trace_mode = TraceMode.UNDEFINED
        cls._trace_size = 0