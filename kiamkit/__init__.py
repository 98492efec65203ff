"""Math helpers, numeric codes, arrays, null-aware strings, memory accounting, memory streams and synchronisation primitives."""

__version__ = "1.41.390"

__all__ = [
    "arrays",
    "kstr",
    "mathutil",
    "memclass",
    "memstream",
    "numerics",
    "tsync",
    "version",
]