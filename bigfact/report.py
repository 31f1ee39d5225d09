from typing import Iterator, List, Mapping, Sequence

from .approx import approximate_factorial, log2_factorial, round_log2
from .bigint import BigUInt
from .exceptions import InconsistentResult
from .factorial import is_consecutive_factorial


def format_exact(n: int, value: BigUInt) -> str:
    return f"{n}! (exact) = {value.to_decimal_string()}"


def format_log2(n: int, precision: int = 6) -> str:
    log2_value = log2_factorial(n)
    return f"{n}! ≈ 2^({log2_value:.{precision}f})  (≈ 2^{round_log2(log2_value)} if rounded)"


def format_mantissa(n: int, precision: int = 6) -> str:
    mantissa, exponent = approximate_factorial(n)
    return f"{n}! ≈ {mantissa:.{precision}f} × 2^({exponent:.0f})"


def format_decimal(n: int, precision: int = 6) -> str:
    m, e = approximate_factorial(n).to_decimal()
    return f"{n}! ≈ {m:.{precision}f}e{e}"


def report_lines(n: int, value: BigUInt, precision: int = 6, decimal: bool = False) -> List[str]:
    lines = [format_exact(n, value), format_log2(n, precision), format_mantissa(n, precision)]
    if decimal:
        lines.append(format_decimal(n, precision))
    return lines


def ratio_lines(ns: Sequence[int], values: Mapping[int, BigUInt]) -> Iterator[str]:
    """Yields `a!/b! = a` for every pair of neighbours in `ns` which differ by one,
    after checking it by multiplication.
    """

    for a, b in zip(ns, ns[1:]):
        if abs(a - b) != 1:
            continue

        larger, smaller = max(a, b), min(a, b)
        if not is_consecutive_factorial(values[larger], values[smaller], larger):
            raise InconsistentResult(f"{larger}! is not {smaller}! * {larger}")
        yield f"{larger}!/{smaller}! = {larger}"
