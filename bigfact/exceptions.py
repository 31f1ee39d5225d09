from typing import Any, Optional, Tuple, Type, Union


class CapacityExceeded(OverflowError):
    """Raised when a fixed-capacity number would need more digits than it can hold.
    The operation which raised it did not modify the number.
    """

    def __init__(self, capacity: int, required: int, msg: Optional[str] = None) -> None:
        if msg is None:
            msg = f"{required} digits required, but capacity is {capacity}"
        OverflowError.__init__(self, msg)
        self.capacity = capacity
        self.required = required


class InconsistentResult(ArithmeticError):
    """Raised when two independent computations of the same value disagree."""


# values, input errors


def assert_type(name: str, value: Any, types: Union[Type[Any], Tuple[Type[Any], ...]]) -> None:
    if not isinstance(value, types):
        if not isinstance(types, tuple):
            types = (types,)
        raise TypeError(
            "{} must be one of these types: {}. Not: {}".format(name, ", ".join(map(str, types)), type(value))
        )


def assert_int(name: str, value: Any) -> None:
    """bool is a subclass of int, but never a valid count or digit."""

    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not bool")
    assert_type(name, value, int)


def assert_range(name: str, value: int, start: int, stop: Optional[int] = None) -> None:
    """Raises a ValueError if `value` is not in the half-open interval [start, stop).
    `stop=None` means unbounded.
    """

    if value < start or (stop is not None and value >= stop):
        if stop is None:
            raise ValueError(f"{name} must be >= {start}, but was {value}")
        raise ValueError(f"{name} must be in [{start}, {stop}), but was {value}")
