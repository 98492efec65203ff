"""Scalar math helpers, tolerant comparisons and a one-dimensional bounding box."""

from __future__ import annotations

import math
import sys

EPSILON = 0.0001
EPSILON_POW_2 = 0.00000001
PI = 3.1415926535897932
REV_PI = 0.3183098861837907
PI2 = 6.2831853071795865
HALFPI = 1.5707963267948966192313216916398
SQRT2 = 1.4142135623730950
SQRT3 = 1.7320508075688773
REV_BYTE = 0.0039215686274510

_MAX_VALUE = sys.float_info.max


def num_len(a):
    """Number of decimal digits in the integer ``a`` (sign ignored)."""
    return len(str(abs(int(a))))


def round_int(a):
    """Round to the nearest integer, halves away from zero."""
    return int(a + 0.5) if a > 0.0 else int(a - 0.5)


def pround(a, prec):
    """Round ``a`` to ``prec`` significant digits."""
    if a == 0:
        return 0.0
    p = prec - 1 - math.floor(math.log10(abs(a)))
    p10 = 10.0 ** p
    return math.floor(a * p10 + 0.5) / p10


def rad(a):
    """Degrees to radians."""
    return a * PI / 180.0


def deg(a):
    """Radians to degrees."""
    return a * 180.0 / PI


def sign(a):
    """Return 1, 0 or -1 according to the sign of ``a``."""
    if a > 0.0:
        return 1
    if a == 0.0:
        return 0
    return -1


def safe_sqrt(a):
    """Square root that rejects negative arguments."""
    if a < 0:
        raise ValueError(f"square root of negative value {a!r}")
    return math.sqrt(a)


def cbrt(a):
    """Real cube root, defined for negative values too."""
    if a > 0:
        return a ** (1.0 / 3.0)
    if a < 0:
        return -((-a) ** (1.0 / 3.0))
    return 0.0


def _check_log_domain(a):
    if not 0.0 < a < _MAX_VALUE:
        raise ValueError(f"logarithm argument out of range: {a!r}")


def safe_log(a):
    """Natural logarithm of a positive finite value."""
    _check_log_domain(a)
    return math.log(a)


def safe_log10(a):
    """Decimal logarithm of a positive finite value."""
    _check_log_domain(a)
    return math.log10(a)


def safe_log2(a):
    """Binary logarithm of a positive finite value."""
    _check_log_domain(a)
    return math.log(a) / math.log(2.0)


def safe_asin(x):
    """Arc sine of a value in [-1, 1]."""
    if not -1.0 <= x <= 1.0:
        raise ValueError(f"asin argument out of [-1, 1]: {x!r}")
    return math.asin(x)


def safe_acos(x):
    """Arc cosine of a value in [-1, 1]."""
    if not -1.0 <= x <= 1.0:
        raise ValueError(f"acos argument out of [-1, 1]: {x!r}")
    return math.acos(x)


def sqr(a):
    """Square of ``a``."""
    return a * a


def cube(a):
    """Cube of ``a``."""
    return a * a * a


def clipped(v, a_min, a_max):
    """``v`` limited to the range [a_min, a_max]."""
    if v < a_min:
        return a_min
    if v > a_max:
        return a_max
    return v


def val_to_range(v, vmin, vmax):
    """``v`` limited to the range [vmin, vmax]."""
    if v < vmin:
        return vmin
    if v > vmax:
        return vmax
    return v


def in_range(v, a_min, a_max):
    """True if ``a_min <= v <= a_max``."""
    return a_min <= v <= a_max


def round_to_level(v, level):
    """Round ``v`` to the nearest multiple of ``level``, halves away from zero."""
    if level == 0:
        raise ValueError("rounding level must be non-zero")
    if v >= 0:
        result = math.floor(v / level + 0.5) * level
    else:
        result = math.ceil(v / level - 0.5) * level
    return int(result) if isinstance(v, int) else float(result)


def float_is_ok(val):
    """True if ``val`` is a finite number."""
    return math.isfinite(val)


def about_zero(v, tolerance):
    """True if ``|v| <= tolerance``."""
    return -tolerance <= v <= tolerance


def near_zero(v):
    """True if ``v`` is within EPSILON of zero."""
    return about_zero(v, EPSILON)


def about_equal(v1, v2, tolerance):
    """True if ``v1`` and ``v2`` differ by no more than ``tolerance``."""
    return about_zero(v1 - v2, tolerance)


def near_equal(v1, v2):
    """True if ``v1`` and ``v2`` differ by no more than EPSILON."""
    return about_zero(v1 - v2, EPSILON)


def sign_about(v, tolerance):
    """Sign of ``v`` where values inside (-tolerance, tolerance) count as zero."""
    if v >= tolerance:
        return 1
    if v <= -tolerance:
        return -1
    return 0


def sign_near(v):
    """Sign of ``v`` with EPSILON as the zero tolerance."""
    return sign_about(v, EPSILON)


class BBox1:
    """A closed interval [vmin, vmax] on the real line."""

    __slots__ = ("vmin", "vmax")

    def __init__(self, vmin, vmax=None):
        self.vmin = vmin
        self.vmax = vmin if vmax is None else vmax

    def __eq__(self, other):
        if not isinstance(other, BBox1):
            return NotImplemented
        return self.vmin == other.vmin and self.vmax == other.vmax

    def __repr__(self):
        return f"BBox1({self.vmin!r}, {self.vmax!r})"

    def not_empty(self):
        """True if the interval contains at least one point."""
        return self.vmin <= self.vmax

    def is_dot(self):
        """True if the interval is a single point."""
        return self.vmin == self.vmax

    def includes(self, other):
        """True if the point or box ``other`` lies inside this box."""
        if isinstance(other, BBox1):
            return self.vmin <= other.vmin and other.vmax <= self.vmax
        return self.vmin <= other <= self.vmax

    def intersects(self, box):
        """True if this box and ``box`` overlap."""
        return self.vmin <= box.vmax and box.vmin <= self.vmax

    def include(self, other):
        """Extend the box to cover the point or box ``other``."""
        if isinstance(other, BBox1):
            if self.vmin > other.vmin:
                self.vmin = other.vmin
            if self.vmax < other.vmax:
                self.vmax = other.vmax
        else:
            if other < self.vmin:
                self.vmin = other
            if self.vmax < other:
                self.vmax = other

    def intersect(self, box):
        """Shrink the box to its overlap with ``box``."""
        if self.vmin < box.vmin:
            self.vmin = box.vmin
        if self.vmax > box.vmax:
            self.vmax = box.vmax

    def translate(self, vct):
        """Shift the box by ``vct`` in place."""
        self.vmin += vct
        self.vmax += vct

    def translated(self, vct):
        """A copy of the box shifted by ``vct``."""
        return BBox1(self.vmin + vct, self.vmax + vct)

    def diag(self):
        """Length of the interval."""
        return float(self.vmax) - float(self.vmin)

    def center(self):
        """Midpoint of the interval."""
        return (float(self.vmax) + float(self.vmin)) / 2