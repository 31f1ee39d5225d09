from argparse import ArgumentTypeError
from pathlib import Path
from typing import Callable, Optional


def int_range(minimum: int, maximum: Optional[int] = None) -> Callable[[str], int]:

    from builtins import int as builtin_int

    # The inner function is called 'int' so that argparse can show a nicer error message
    # in case input cannot be cast to int: "error: argument --capacity: invalid int value: 'a'"

    def int(s: str) -> builtin_int:

        number = builtin_int(s)

        if number < minimum:
            msg = f"{s} is smaller than {minimum}"
            raise ArgumentTypeError(msg)

        if maximum is not None and number > maximum:
            msg = f"{s} is larger than {maximum}"
            raise ArgumentTypeError(msg)

        return number

    return int


non_negative_int = int_range(0)
positive_int = int_range(1)


def existing_file(s: str) -> Path:

    """Checks if a path exists and is a file."""

    path = Path(s)
    if not path.is_file():
        msg = f"{path} does not exist or is not a file"
        raise ArgumentTypeError(msg)

    return path
