"""Version identifiers of the library, its protocol and its repository format."""

from __future__ import annotations

import sys

IR_VERSION = "1.41.390"
IR_PROT_VERSION = "1.40"
REPOSITORY_VERSION = 0x04043E


def protocol_name(is_64bit=None):
    """Protocol name; the 64-bit Windows build uses a distinct one.

    With ``is_64bit`` left as ``None`` the running interpreter decides.
    """
    if is_64bit is None:
        is_64bit = sys.platform == "win32" and sys.maxsize > 2**32
    return "IRx64" if is_64bit else "IR"


def repository_version_tuple():
    """The repository format version split into its three bytes, most significant first."""
    return (
        (REPOSITORY_VERSION >> 16) & 0xFF,
        (REPOSITORY_VERSION >> 8) & 0xFF,
        REPOSITORY_VERSION & 0xFF,
    )


def ir_version_tuple():
    """The library version as a tuple of integers."""
    return tuple(int(part) for part in IR_VERSION.split("."))