"""Shared definitions of the numerical analysis library: codes, modes and constants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

PI = 3.1415926535897931
PI2 = 6.2831853071795862

ZERO_DOUBLE = 1e-40
"""Values below this magnitude are treated as underflow."""

MAX_DOUBLE = 1e200


class NalError(IntEnum):
    """Result codes of the numerical routines."""

    OK = 0
    BAD_MATRIX = -1
    MEM_ERR = -2
    BAD_PARAM = -3
    BAD_INTERV = -4


class FftDirection(IntEnum):
    """Direction of a Fourier transform."""

    BACKWARD = -1
    FORWARD = 1
    SYNTHESIS = -1
    ANALYSIS = 1


class SplineKind(IntEnum):
    """Kind of approximating spline."""

    SPLINE = 0
    EXP_SPLINE = 1


class TreeMode(IntEnum):
    """Whether a search in a binary tree may add missing elements."""

    ADD = -1
    NO_ADD = 1


@dataclass(frozen=True)
class Kiaml:
    """A quadrature result over the full mesh and over the rough (odd knots) mesh."""

    full: float
    rough: float


def is_power2(n):
    """True if ``n`` is a non-negative integer power of two."""
    power = 1
    rest = n
    while rest > 1:
        rest >>= 1
        power <<= 1
    return power == n