import logging
from typing import List

import numpy as np

from .exceptions import CapacityExceeded, assert_int, assert_range

logger = logging.getLogger(__name__)

MAX_DIGITS = 1000

# digit * multiplier + carry stays below 2**63 for multipliers up to this value
MAX_MULTIPLIER = 2**31 - 1

# largest seed accepted by `BigUInt.init`
MAX_SEED = 2**63 - 1


def num_digits(value: int) -> int:
    """Number of decimal digits of the non-negative integer `value`. Zero has one digit."""

    count = 1
    while value >= 10:
        value //= 10
        count += 1
    return count


class BigUInt:

    """Unsigned integer stored as base-10 digits in a fixed-capacity buffer.
    Digits are stored least significant first. Positions at or above `len(self)` are always zero.

    Example:
            x = BigUInt(1)
            for i in range(2, 11):
                x.multiply_by_small(i)
            x.to_decimal_string()  # "3628800"
    """

    __slots__ = ("capacity", "_digits", "_len")

    capacity: int
    _digits: np.ndarray
    _len: int

    def __init__(self, value: int = 0, capacity: int = MAX_DIGITS) -> None:
        assert_int("capacity", capacity)
        assert_range("capacity", capacity, 1)

        self.capacity = capacity
        self._digits = np.zeros(capacity, dtype=np.uint8)
        self._len = 1
        self.init(value)

    def init(self, value: int) -> "BigUInt":
        """Resets the number to `value`. `value` must be in [0, MAX_SEED]."""

        assert_int("value", value)
        assert_range("value", value, 0, MAX_SEED + 1)

        required = num_digits(value)
        if required > self.capacity:
            raise CapacityExceeded(self.capacity, required)

        self._digits[:] = 0
        self._len = 0

        if value == 0:
            self._len = 1
            return self

        while value > 0:
            self._digits[self._len] = value % 10
            self._len += 1
            value //= 10

        return self

    def multiply_by_small(self, multiplier: int) -> "BigUInt":
        """Multiplies the number by `multiplier` in place.
        `multiplier` must be in [0, MAX_MULTIPLIER]. Raises `CapacityExceeded` if the product doesn't fit,
        in which case the number is left unchanged.
        """

        assert_int("multiplier", multiplier)
        assert_range("multiplier", multiplier, 0, MAX_MULTIPLIER + 1)

        if multiplier == 0:
            self._digits[: self._len] = 0
            self._len = 1
            return self

        # dry run of the carry chain, so the capacity is checked before any digit is written
        carry = 0
        for digit in self._digits[: self._len].tolist():
            carry = (digit * multiplier + carry) // 10

        if carry > 0:
            required = self._len + num_digits(carry)
            if required > self.capacity:
                raise CapacityExceeded(self.capacity, required)

        carry = 0
        for i in range(self._len):
            prod = int(self._digits[i]) * multiplier + carry
            self._digits[i] = prod % 10
            carry = prod // 10

        while carry > 0:
            self._digits[self._len] = carry % 10
            self._len += 1
            carry //= 10

        return self

    def to_decimal_string(self) -> str:
        return "".join(map(str, self._digits[self._len - 1 :: -1].tolist()))

    def digits(self) -> List[int]:
        """Returns the used digits, least significant first."""

        return self._digits[: self._len].tolist()

    def is_zero(self) -> bool:
        return self._len == 1 and int(self._digits[0]) == 0

    def copy(self) -> "BigUInt":
        out = BigUInt.__new__(BigUInt)
        out.capacity = self.capacity
        out._digits = self._digits.copy()
        out._len = self._len
        return out

    def __len__(self) -> int:
        return self._len

    def __int__(self) -> int:
        # not via `int(str)`, which is limited to `sys.get_int_max_str_digits()` digits
        value = 0
        for digit in reversed(self.digits()):
            value = value * 10 + digit
        return value

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        return f"BigUInt({self.to_decimal_string()}, capacity={self.capacity})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigUInt):
            return self._len == other._len and np.array_equal(self._digits[: self._len], other._digits[: other._len])
        elif isinstance(other, int) and not isinstance(other, bool):
            return other >= 0 and int(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]
