from argparse import ArgumentParser

from rich.console import Console
from rich.table import Table

from bigfact.approx import approximate_factorial
from bigfact.args import non_negative_int
from bigfact.factorial import factorial_bigint

parser = ArgumentParser()
parser.add_argument("start", type=non_negative_int)
parser.add_argument("stop", type=non_negative_int)
args = parser.parse_args()

table = Table("n", "digits", "n! ≈", "leading digits")
for n in range(args.start, args.stop + 1):
    exact = factorial_bigint(n).to_decimal_string()
    mantissa, exponent = approximate_factorial(n)
    table.add_row(str(n), str(len(exact)), f"{mantissa:.6f} × 2^({exponent:.0f})", exact[:12])

Console().print(table)
