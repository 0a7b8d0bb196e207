"""
Demonstration of quadratic fitting on a small sample set.

Fits a polynomial to sample points, then prints the coefficients, the fitted
values and an extrapolated value. With no arguments the built-in samples are
used; `--data` reads samples from a CSV file instead.

```bash
polyfit-demo
polyfit-demo --data samples.csv --x-column t --y-column v --order 3 --at 10
```
"""

import argparse
import sys

from .data.loading import load_samples
from .evaluate import evaluate, poly_fit
from .fitting import fit
from .metrics import rmse
from .solvers import DEFAULT_PIVOTING, PIVOTING_STRATEGIES


DEFAULT_X = [0.0, 1.0, 2.0, 3.0, 4.0]
DEFAULT_Y = [1.0, 1.8, 1.3, 2.5, 6.3]
DEFAULT_ORDER = 2
DEFAULT_AT = 5.0


def format_vector(values) -> str:
    """Format a sequence of numbers as '[a, b, c]'."""
    return "[" + ", ".join(f"{v:g}" for v in values) + "]"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fit a polynomial to sample points by least squares"
    )
    parser.add_argument(
        "--data",
        type=str,
        default=None,
        help="CSV file with sample points (default: built-in samples)",
    )
    parser.add_argument(
        "--x-column",
        type=str,
        default="x",
        help="Column holding x-coordinates (default: x)",
    )
    parser.add_argument(
        "--y-column",
        type=str,
        default="y",
        help="Column holding y-values (default: y)",
    )
    parser.add_argument(
        "--order",
        type=int,
        default=DEFAULT_ORDER,
        help=f"Polynomial order (default: {DEFAULT_ORDER})",
    )
    parser.add_argument(
        "--x2",
        type=float,
        nargs="+",
        default=None,
        help="Points to evaluate the fit at (default: the sample x values)",
    )
    parser.add_argument(
        "--at",
        type=float,
        default=DEFAULT_AT,
        help=f"Single point to evaluate the fit at (default: {DEFAULT_AT:g})",
    )
    parser.add_argument(
        "--pivoting",
        choices=PIVOTING_STRATEGIES,
        default=DEFAULT_PIVOTING,
        help=f"Row pivoting strategy (default: {DEFAULT_PIVOTING})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print progress messages",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.data is not None:
            x, y = load_samples(
                args.data,
                x_column=args.x_column,
                y_column=args.y_column,
                verbose=args.verbose,
            )
        else:
            x, y = DEFAULT_X, DEFAULT_Y
        x2 = args.x2 if args.x2 is not None else list(x)
        order = args.order

        print(f"x     : {format_vector(x)}")
        print(f"y     : {format_vector(y)}")
        print(f"x2    : {format_vector(x2)}")
        print(f"order : {order}")
        print("*" * 60)

        if args.verbose:
            print(f"\nFitting order {order} polynomial to {len(x)} samples "
                  f"({args.pivoting} pivoting)...")

        coeffs = fit(x, y, order, pivoting=args.pivoting)
        print()
        print(f"coeffs = fit(x, y, order) : {format_vector(coeffs)}")
        print(f"eval(coeffs, x2)          : {format_vector(evaluate(coeffs, x2))}")
        print()
        print(f"polyFit(x, y, x2, order) : "
              f"{format_vector(poly_fit(x, y, x2, order, pivoting=args.pivoting))}")
        print(f"polyFit(x, y, {args.at:g}, order)  : "
              f"{poly_fit(x, y, args.at, order, pivoting=args.pivoting):g}")
        print(f"rmse  : {rmse(y, evaluate(coeffs, x)):g}")
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
