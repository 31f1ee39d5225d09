import logging
from typing import Dict, Iterable

from .bigint import MAX_DIGITS, BigUInt
from .exceptions import assert_int, assert_range

logger = logging.getLogger(__name__)


def factorial_bigint(n: int, capacity: int = MAX_DIGITS) -> BigUInt:
    """Computes `n!` exactly by repeated multiplication of a `BigUInt` with `capacity` digits.
    Raises `CapacityExceeded` if `n!` has more than `capacity` digits.
    """

    assert_int("n", n)
    assert_range("n", n, 0)

    res = BigUInt(1, capacity)
    for i in range(2, n + 1):
        res.multiply_by_small(i)
        logger.debug("%d! has %d digits", i, len(res))

    return res


def factorials_bigint(ns: Iterable[int], capacity: int = MAX_DIGITS) -> Dict[int, BigUInt]:
    """Computes the factorial of each number in `ns` independently.
    The result maps `n` to `n!` in the order of first occurrence.
    """

    out: Dict[int, BigUInt] = {}
    for n in ns:
        if n not in out:
            out[n] = factorial_bigint(n, capacity)
    return out


def is_consecutive_factorial(larger: BigUInt, smaller: BigUInt, n: int) -> bool:
    """Checks `larger == smaller * n` using a copy of `smaller`, so `smaller` is left untouched.
    Raises `CapacityExceeded` if the product doesn't fit in the capacity of `smaller`.
    """

    return smaller.copy().multiply_by_small(n) == larger
