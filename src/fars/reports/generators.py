"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: calls the data reader to load accident files,
hands the DataFrames to the functional core for aggregation / state
selection, builds figures, and (for ``ReportGenerator``) writes CSV and
HTML files.

No parsing or counting logic lives here.

Package Location: src/fars/reports/generators.py

Usage::

    from pathlib import Path
    from fars.reports.generators import ReportGenerator, map_state

    fig = map_state(1, 2013, data_dir=Path("data"))
    if fig is not None:
        fig.show()

    gen = ReportGenerator(data_dir=Path("data"), output_dir=Path("reports"))
    gen.generate_summary([2013, 2014, 2015])
    # Writes:
    #   reports/summary_2013-2015.csv
    #   reports/monthly_counts_2013-2015.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.mapping import state_points
from ..analysis.summary import summarize_months
from ..config import resolve_data_dir
from ..data import reader
from ..plotting.state_map import plot_state_accidents
from ..plotting.summary import plot_monthly_counts

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public API – single-call pipelines
# ---------------------------------------------------------------------------

def summarize_years(
    years: Iterable,
    data_dir: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """
    Load several accident years and count accidents per month.

    Years whose file is missing or unreadable are logged as warnings by
    the reader and omitted from the result.

    Args:
        years: Year values to load.
        data_dir: Directory holding the accident files.

    Returns:
        Wide summary table (see ``analysis.summary.summarize_months``).
    """
    results = reader.read_years(years, data_dir=data_dir)
    return summarize_months(results)


def map_state(
    state_num,
    year,
    data_dir: Optional[Union[str, Path]] = None,
) -> Optional[go.Figure]:
    """
    Build the accident map for one state and year.

    Args:
        state_num: State code (coerced with ``int()``).
        year: Accident year (coerced with ``int()``).
        data_dir: Directory holding the accident files.

    Returns:
        The map figure, or ``None`` when the state has no accidents to
        plot.  Nothing is displayed; call ``fig.show()`` to draw it.

    Raises:
        FileNotFoundError: If the year's accident file does not exist.
        InvalidStateError: If *state_num* does not occur in the file.
    """
    path = resolve_data_dir(data_dir) / reader.make_filename(year)
    data = reader.read_accidents(path)

    points = state_points(data, state_num)
    if points.empty:
        log.info(
            "no accidents to plot",
            extra={"state": int(state_num), "year": int(year)},
        )
        return None

    return plot_state_accidents(points, state_num=int(state_num), year=int(year))


# ---------------------------------------------------------------------------
# File-writing generator
# ---------------------------------------------------------------------------

class ReportGenerator:
    """
    Generates and saves FARS summary tables and maps.

    Responsibilities
    ----------------
    - Delegate file reads to ``data.reader``.
    - Call pure aggregation and plotting functions from the functional core.
    - Write the resulting tables to CSV and figures to HTML.

    Args:
        data_dir: Directory holding the ``accident_<year>.csv.bz2`` files.
            ``None`` defers to ``$FARS_DATA_DIR`` / the working directory.
        output_dir: Directory reports are written to; created on demand.
    """

    def __init__(
        self,
        data_dir: Optional[Union[str, Path]],
        output_dir: Union[str, Path],
    ) -> None:
        self.data_dir = resolve_data_dir(data_dir)
        self.output_dir = Path(output_dir)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def generate_summary(self, years: Iterable) -> pd.DataFrame:
        """
        Write the month x year summary as CSV plus a line chart as HTML.

        Saves (see ``summary_paths``):
        - ``summary_<years>.csv``
        - ``monthly_counts_<years>.html`` (skipped when no year loaded)

        Args:
            years: Year values to summarize.

        Returns:
            The summary table that was written.
        """
        years = list(years)
        summary = summarize_years(years, data_dir=self.data_dir)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        csv_path, html_path = self.summary_paths(years)

        summary.to_csv(csv_path)
        log.info(f"Summary saved → {csv_path}", extra={"path": str(csv_path)})

        if summary.empty:
            log.warning("No accident years loaded; monthly chart skipped")
            return summary

        fig = plot_monthly_counts(summary)
        fig.write_html(str(html_path))
        log.info(f"Monthly chart saved → {html_path}", extra={"path": str(html_path)})

        return summary

    def summary_paths(self, years: Iterable) -> Tuple[Path, Path]:
        """Return the ``(csv, html)`` output paths for a list of years."""
        tag = _years_tag(list(years))
        return (
            self.output_dir / f'summary_{tag}.csv',
            self.output_dir / f'monthly_counts_{tag}.html',
        )

    def generate_state_map(self, state_num, year) -> Optional[Path]:
        """
        Write the accident map for one state and year as HTML.

        Args:
            state_num: State code.
            year: Accident year.

        Returns:
            Path of the written HTML file, or ``None`` if there was
            nothing to plot.

        Raises:
            FileNotFoundError: If the year's accident file does not exist.
            InvalidStateError: If *state_num* does not occur in the file.
        """
        fig = map_state(state_num, year, data_dir=self.data_dir)
        if fig is None:
            return None

        self.output_dir.mkdir(parents=True, exist_ok=True)
        out_path = self.output_dir / f'state_{int(state_num)}_{int(year)}.html'
        fig.write_html(str(out_path))
        log.info(f"State map saved → {out_path}", extra={"path": str(out_path)})
        return out_path


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _years_tag(years: list) -> str:
    """File-name fragment for a list of years: ``2013`` or ``2013-2015``."""
    ints = []
    for y in years:
        try:
            ints.append(int(y))
        except (TypeError, ValueError):
            continue
    if not ints:
        return 'none'
    lo, hi = min(ints), max(ints)
    return str(lo) if lo == hi else f'{lo}-{hi}'
