"""
FARS Unified Command-Line Interface

Exposes three subcommands:

    fars filename  YEAR [YEAR ...]                 Show dataset filenames
    fars summarize --years Y [Y ...] [--output P]  Monthly fatality counts
    fars map       --state N --year Y [...]        Per-state accident map

Dataset files (``accident_<year>.csv.bz2``) are looked up in the current
working directory unless ``--data-dir`` is given.

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from .analysis.geo import InvalidStateError
from .analysis.summary import EmptyAggregationError
from .data.reader import MissingFileError

# Errors that end a command with status 1 instead of a traceback
_EXPECTED_ERRORS = (MissingFileError, InvalidStateError, EmptyAggregationError)


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


def _resolve_data_dir(args: argparse.Namespace) -> Optional[Path]:
    """Return ``--data-dir`` as a Path, exiting if it is not a directory.

    Args:
        args: Parsed CLI arguments.

    Returns:
        Directory path, or ``None`` to use the current working directory.
    """
    if args.data_dir is None:
        return None
    data_dir = Path(args.data_dir)
    if not data_dir.is_dir():
        _die(f"Data directory not found: {data_dir}")
    return data_dir


# ===========================================================================
# Subcommand handlers
# ===========================================================================

# ---------------------------------------------------------------------------
# filename
# ---------------------------------------------------------------------------

def handle_filename(args: argparse.Namespace) -> None:
    """Print the dataset filename for each requested year.

    Args:
        args: Parsed CLI arguments.  Required field: ``args.years``.
    """
    from fars.data import make_filename

    for year in args.years:
        print(make_filename(year))


# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------

def handle_summarize(args: argparse.Namespace) -> None:
    """Build the month-by-year fatality table and print or save it.

    Years whose files are missing are reported as warnings and skipped.
    The command fails only when no year at all could be read.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.data import summarize_years
    from fars.reports import write_summary

    data_dir = _resolve_data_dir(args)

    print(f"\n📊  Summarizing FARS years: {', '.join(args.years)}")
    try:
        table = summarize_years(
            args.years, data_dir=data_dir, max_workers=args.workers
        )
    except _EXPECTED_ERRORS as exc:
        _die(str(exc))

    if args.output:
        out = write_summary(table, args.output)
        print(f"✅  Summary written to {out}")
    else:
        print()
        print(table.to_string(index=False, na_rep=""))


# ---------------------------------------------------------------------------
# map
# ---------------------------------------------------------------------------

def handle_map(args: argparse.Namespace) -> None:
    """Draw one state's accidents for one year.

    Writes an HTML file (default ``state_<N>_<YEAR>.html``) or, with
    ``--show``, opens the figure in a browser.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.reports import map_state

    data_dir = _resolve_data_dir(args)

    print(f"\n🗺️   Mapping STATE {args.state} for {args.year}")
    try:
        fig = map_state(args.state, args.year, data_dir=data_dir)
    except _EXPECTED_ERRORS as exc:
        if args.verbose:
            traceback.print_exc()
        _die(str(exc))

    if fig is None:
        print("    ⏭️   No accidents to plot")
        return

    if args.show:
        fig.show()
        return

    out = Path(args.output or f"state_{args.state}_{args.year}.html")
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(out))
    print(f"✅  Map written to {out}")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _add_common(parser: argparse.ArgumentParser) -> None:
    """Attach ``--data-dir`` to a subcommand parser."""
    parser.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory holding accident_<year>.csv.bz2 files "
             "(default: current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``filename``, ``summarize``, and
        ``map`` subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System tools\n"
            "Monthly fatality summaries and per-state accident maps."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        metavar="LEVEL",
        help="Logging level (default: WARNING).",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # filename
    # ------------------------------------------------------------------
    p_name = subs.add_parser(
        "filename",
        help="Print the dataset filename for one or more years.",
    )
    p_name.add_argument(
        "years",
        nargs="+",
        metavar="YEAR",
        help="Year values, e.g. 2013 2014.",
    )
    p_name.set_defaults(func=handle_filename)

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count fatal accidents per month, one column per year.",
        description=(
            "Read accident_<year>.csv.bz2 for every requested year and\n"
            "count accidents per MONTH.  Missing years are skipped with a\n"
            "warning; the command fails only if no year can be read."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YEAR",
        help="Years to summarize, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="PATH",
        help="Write the table to PATH (.csv or .html) instead of printing.",
    )
    p_sum.add_argument(
        "--workers",
        type=int,
        default=None,
        metavar="N",
        help="Read years on N threads (default: sequential).",
    )
    _add_common(p_sum)
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Map one state's fatal accidents for one year.",
    )
    p_map.add_argument(
        "--state",
        required=True,
        metavar="N",
        help="FARS state code, e.g. 49.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        metavar="YEAR",
        help="Dataset year, e.g. 2014.",
    )
    p_map.add_argument(
        "--output",
        default=None,
        metavar="PATH",
        help="HTML output path (default: state_<N>_<YEAR>.html).",
    )
    p_map.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Open the map in a browser instead of writing HTML.",
    )
    p_map.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Print full tracebacks on errors.",
    )
    _add_common(p_map)
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    from fars.utils.logging import configure_logging

    parser = _build_parser()
    args   = parser.parse_args(argv)

    try:
        configure_logging(args.log_level, json_format=args.log_json)
    except ValueError as exc:
        _die(str(exc))

    args.func(args)


if __name__ == "__main__":
    main()
