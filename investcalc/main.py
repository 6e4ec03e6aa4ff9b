"""
Entry point for the investment calculator.

Usage:
    investcalc                      # serves the JSON API
    investcalc --cli --amount 500 --rate 7 --inflation 3 --years 30
"""

import argparse
import sys
from typing import List, Optional

from investcalc.config import settings


def run_web() -> None:
    """Start the Flask development server."""
    from investcalc.app import create_app

    app = create_app()
    app.run(host=settings.API_HOST, port=settings.API_PORT, debug=settings.DEBUG)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Investment Calculator: nominal and real growth projections",
    )
    parser.add_argument(
        "--cli",
        action="store_true",
        help="Run in terminal mode instead of serving the API; other options go to the CLI",
    )
    args, rest = parser.parse_known_args(argv)

    if args.cli:
        from investcalc.cli import run_cli
        return run_cli(rest)

    if rest:
        parser.error(f"unrecognized arguments: {' '.join(rest)}")
    run_web()
    return 0


if __name__ == "__main__":
    sys.exit(main())
