import logging
from argparse import ArgumentParser
from typing import List, Optional

from rich.console import Console

from .args import existing_file, non_negative_int, positive_int
from .config import load_config
from .exceptions import CapacityExceeded, InconsistentResult
from .factorial import factorials_bigint
from .logging import setup_logging
from .report import ratio_lines, report_lines

logger = logging.getLogger(__name__)


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="bigfact", description="Exact factorials and their base-2 approximations")
    parser.add_argument("values", metavar="N", type=non_negative_int, nargs="*", help="Compute N! (default: 25 24)")
    parser.add_argument("--capacity", type=positive_int, help="Maximum number of decimal digits")
    parser.add_argument("--precision", type=non_negative_int, help="Decimal places of approximations")
    parser.add_argument("--decimal", action="store_true", help="Also print a base-10 approximation")
    parser.add_argument("--ratio", action="store_true", help="Check n!/(n-1)! = n for neighbouring values")
    parser.add_argument("--config", type=existing_file, help="Path to a bigfact.toml config file")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug output")
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = get_parser().parse_args(argv)
    setup_logging(args.verbose)

    console = console or Console(highlight=False, markup=False, emoji=False)

    try:
        config = load_config(str(args.config) if args.config else None)
    except ValueError as e:
        logger.error("Invalid config: %s", e)
        return 1

    config = config.merge(values=args.values or None, capacity=args.capacity, precision=args.precision)

    try:
        results = factorials_bigint(config.values, config.capacity)
        for n in config.values:
            for line in report_lines(n, results[n], config.precision, args.decimal):
                console.print(line, soft_wrap=True)
            console.print()

        if args.ratio:
            for line in ratio_lines(config.values, results):
                console.print(line, soft_wrap=True)

    except CapacityExceeded as e:
        logger.error("Capacity of %d digits exhausted: %s", config.capacity, e)
        return 1
    except InconsistentResult as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
