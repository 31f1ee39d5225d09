from functools import wraps
from itertools import zip_longest
from typing import Any, Callable, Iterable, Optional
from unittest import TestCase


class NoRaise:
    def __init__(self, testcase: TestCase, message: Optional[str] = None) -> None:
        self.testcase = testcase
        self.message = message

    def __enter__(self) -> None:
        pass

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if exc_type:
            self.testcase.fail(self.message or f"Unexpected {exc_type.__name__}: {exc_value}")


class MyTestCase(TestCase):
    def assertNoRaise(self, msg: Optional[str] = None) -> NoRaise:
        return NoRaise(self, msg)

    def assertIterEqual(self, first: Iterable, second: Iterable, msg: Optional[str] = None) -> None:
        for i, (a, b) in enumerate(zip_longest(first, second)):
            self.assertEqual(a, b, msg=f"in iteration index {i}: {msg}")

    def assertRelativeError(self, truth: float, result: float, tol: float, msg: Optional[str] = None) -> None:
        """Asserts `|result - truth| / |truth| < tol`. `truth` must not be zero."""

        error = abs(result - truth) / abs(truth)
        if not error < tol:
            standard_msg = f"relative error {error!r} of {result!r} to {truth!r} is not below {tol!r}"
            self.fail(self._formatMessage(msg, standard_msg))

    def assertInInterval(self, value: Any, start: Any, stop: Any, msg: Optional[str] = None) -> None:
        """Asserts `start <= value < stop`."""

        if not (start <= value < stop):
            standard_msg = f"{value!r} not in [{start!r}, {stop!r})"
            self.fail(self._formatMessage(msg, standard_msg))


# also called: parameterize
def parametrize(*args_list: tuple) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for args in args_list:
                with self.subTest(str(args)[:1000]):
                    if func(self, *args) is not None:
                        raise AssertionError

        return inner

    return decorator

