"""
FARS Command-Line Interface

Exposes two subcommands:

    fars summarize --years <Y> [<Y> ...] [...]   Monthly accident counts per year
    fars map --state <N> --year <Y> [...]        Accident map for one state/year

The package must be installed (``pip install -e .``) for the ``fars``
entry point to be available.

Accident files are looked up in ``--data-dir``, then ``$FARS_DATA_DIR``,
then the current working directory.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .utils.logging import configure_logging


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\n❌  Error: {message}", file=sys.stderr)
    sys.exit(1)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------

def handle_summarize(args: argparse.Namespace) -> None:
    """Print the month x year accident count table.

    With ``--output-dir`` the table is also written as CSV together with
    an HTML line chart.  Years that fail to load are reported as warnings
    and left out of the table.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.reports.generators import ReportGenerator, summarize_years

    print(f"\n📊  Summarizing accident years: {', '.join(f'{y:g}' for y in args.years)}")

    if args.output_dir:
        gen = ReportGenerator(args.data_dir, args.output_dir)
        summary = gen.generate_summary(args.years)
        print(f"    Output: {gen.output_dir}")
    else:
        summary = summarize_years(args.years, data_dir=args.data_dir)

    if summary.empty:
        _die("none of the requested years could be loaded")

    print()
    print(summary.to_string())


# ---------------------------------------------------------------------------
# map
# ---------------------------------------------------------------------------

def handle_map(args: argparse.Namespace) -> None:
    """Build the accident map for one state and year.

    Writes ``state_<N>_<YEAR>.html`` into ``--output-dir`` when given,
    otherwise opens the figure with ``fig.show()``.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.reports.generators import ReportGenerator, map_state

    print(f"\n🗺️   Mapping accidents: state {args.state}, year {int(args.year)}")

    try:
        if args.output_dir:
            gen = ReportGenerator(args.data_dir, args.output_dir)
            out_path = gen.generate_state_map(args.state, args.year)
            if out_path is None:
                print("    no accidents to plot")
            else:
                print(f"    ✅  Saved → {out_path}")
            return

        fig = map_state(args.state, args.year, data_dir=args.data_dir)
    except (FileNotFoundError, ValueError, OverflowError) as exc:
        _die(str(exc))

    if fig is None:
        print("    no accidents to plot")
        return
    fig.show()


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``summarize`` and ``map``
        subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System toolkit\n"
            "Summarize yearly accident files and map accident locations."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the fars logger (default: WARNING).",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON objects.",
    )

    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
        description=(
            "Read accident_<year>.csv.bz2 for every requested year and print\n"
            "a table with one row per month and one column per year.\n\n"
            "Years whose file is missing or unreadable are skipped with a warning."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        type=float,
        metavar="YEAR",
        help="One or more accident years, e.g. --years 2013 2014 2015 (fractions truncate)",
    )
    _add_io_arguments(p_sum)
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Map the accidents of one state for one year.",
        description=(
            "Plot every accident with a recorded location for the given\n"
            "FARS state code and year.  Unrecorded coordinates are skipped."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_map.add_argument(
        "--state",
        required=True,
        type=int,
        metavar="N",
        help="FARS state code, e.g. 1 for Alabama.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        type=float,
        metavar="YEAR",
        help="Accident year (fractions truncate).",
    )
    _add_io_arguments(p_map)
    p_map.set_defaults(func=handle_map)

    return parser


def _add_io_arguments(sub: argparse.ArgumentParser) -> None:
    sub.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        metavar="DIR",
        help="Directory holding the accident files (default: $FARS_DATA_DIR or cwd).",
    )
    sub.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        metavar="DIR",
        help="Write CSV/HTML reports into this directory.",
    )


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(args.log_level, json_output=args.log_json)
    args.func(args)


if __name__ == "__main__":
    main()
