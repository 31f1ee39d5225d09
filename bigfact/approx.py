import logging
from math import floor, isfinite, ldexp, log2, log10
from typing import NamedTuple, Tuple

from .exceptions import assert_int, assert_range

logger = logging.getLogger(__name__)

LOG10_2 = log10(2.0)


class Approximation(NamedTuple):
    """`mantissa * 2**exponent` with `1 <= mantissa < 2` and an integer valued `exponent`."""

    mantissa: float
    exponent: float

    def value(self) -> float:
        """Returns the approximation as float. Raises OverflowError if it doesn't fit a float."""

        return ldexp(self.mantissa, int(self.exponent))

    def to_decimal(self) -> Tuple[float, int]:
        """Converts to base-10 scientific notation `(m, e)` with `1 <= m < 10`.
        Works on logarithms, so it doesn't overflow for large exponents.
        """

        log10_value = (self.exponent + log2(self.mantissa)) * LOG10_2
        e = floor(log10_value)
        m = 10.0 ** (log10_value - e)
        if m >= 10.0:
            m /= 10.0
            e += 1
        return m, e


def log2_factorial(n: int) -> float:
    """Returns log2(n!) as sum of log2(i) for i in [2, n].
    The factorial itself is never computed, so large `n` don't overflow.
    """

    assert_int("n", n)
    assert_range("n", n, 0)

    if n < 2:
        return 0.0

    s = 0.0
    for i in range(2, n + 1):
        s += log2(i)
    return s


def normalize(log2_value: float) -> Approximation:
    """Splits `log2_value` into an integer exponent and a mantissa in [1, 2).

    Example:
            normalize(3.0)  # Approximation(mantissa=1.0, exponent=3.0)
    """

    if not isfinite(log2_value) or log2_value < 0:
        raise ValueError(f"log2_value must be finite and non-negative, but was {log2_value}")

    exponent = float(floor(log2_value))
    mantissa = 2.0 ** (log2_value - exponent)

    # rounding of 2**frac for frac close to 1
    if mantissa >= 2.0:
        logger.debug("Renormalizing mantissa %r for exponent %r", mantissa, exponent)
        mantissa /= 2.0
        exponent += 1.0

    return Approximation(mantissa, exponent)


def approximate_factorial(n: int) -> Approximation:
    return normalize(log2_factorial(n))


def round_log2(log2_value: float) -> int:
    """Returns the exponent of the power of two closest to `2**log2_value` in log space."""

    return floor(log2_value + 0.5)
