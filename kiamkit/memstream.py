"""Byte streams kept in memory."""

from __future__ import annotations


class ReadMemStream:
    """Sequential reader over a fixed block of bytes."""

    def __init__(self, area):
        self._area = bytes(area)
        self._cur = 0

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def open(self):
        """Start reading from the beginning."""
        self._cur = 0

    def close(self):
        """Finish reading."""
        self._cur = len(self._area)

    def read_byte(self):
        """Read one byte as an integer."""
        return self.read(1)[0]

    def read(self, length):
        """Read exactly ``length`` bytes."""
        if length < 0:
            raise ValueError(f"negative read length {length}")
        end = self._cur + length
        if end > len(self._area):
            raise EOFError(f"cannot read {length} bytes at offset {self._cur}")
        chunk = self._area[self._cur:end]
        self._cur = end
        return chunk

    def end_of_stream(self):
        """True once all bytes have been read."""
        return self._cur >= len(self._area)

    def data(self):
        """The whole underlying block."""
        return self._area

    def __len__(self):
        return len(self._area)

    def is_file(self):
        """Memory streams are not files."""
        return False


class WriteMemStream:
    """Growing in-memory byte buffer."""

    def __init__(self, block_size=64000, initial_size=64000):
        if block_size <= 0:
            raise ValueError(f"block size must be positive, got {block_size}")
        if initial_size < 0:
            raise ValueError(f"initial size must be non-negative, got {initial_size}")
        self.block_size = block_size
        self.initial_size = initial_size
        self._area = bytearray()
        self._closed = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def open(self):
        """Start writing into an empty buffer."""
        self._area = bytearray()
        self._closed = False

    def close(self):
        """Finish writing; the written bytes stay available but no more can be added."""
        self._closed = True

    def _check_writable(self):
        if self._closed:
            raise ValueError("write to a closed memory stream")

    def write_byte(self, value):
        """Append one byte given as an integer 0..255."""
        self._check_writable()
        if not 0 <= value <= 255:
            raise ValueError(f"byte value out of range: {value}")
        self._area.append(value)

    def write(self, data):
        """Append a block of bytes."""
        self._check_writable()
        self._area += data

    def data(self):
        """The bytes written so far."""
        return bytes(self._area)

    def __len__(self):
        return len(self._area)

    def is_file(self):
        """Memory streams are not files."""
        return False