"""
FARS Monthly Counts Plot (Functional Core)

Pure function - no file I/O, no side effects.
Input: wide month x year summary table from analysis/summary.py.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/summary.py
"""

from __future__ import annotations

import calendar

import pandas as pd
import plotly.graph_objects as go

_MONTHS = list(range(1, 13))


def plot_monthly_counts(summary: pd.DataFrame) -> go.Figure:
    """
    Draw one line per year of accident counts by month.

    Months with no records (``<NA>`` cells) are left as gaps in the
    line rather than drawn as zero.

    Args:
        summary: Output of ``summarize_months`` - indexed by ``MONTH``,
            one column per year.

    Returns:
        ``plotly.graph_objects.Figure``.

    Raises:
        ValueError: If *summary* has no years or no months.
    """
    if summary.empty:
        raise ValueError("summary is empty; nothing to plot")

    # Int64 <NA> -> float NaN so plotly breaks the line
    table = summary.astype('float64').reindex(_MONTHS)

    fig = go.Figure()
    for year in table.columns:
        fig.add_trace(go.Scatter(
            x=table.index,
            y=table[year],
            mode='lines+markers',
            name=str(year),
            connectgaps=False,
            hovertemplate=(
                f"<b>{year}</b><br>"
                "Month: %{x}<br>"
                "Accidents: %{y}<extra></extra>"
            ),
        ))

    fig.update_layout(
        title='Fatal Accidents by Month',
        xaxis=dict(
            title='Month',
            tickmode='array',
            tickvals=_MONTHS,
            ticktext=[calendar.month_abbr[m] for m in _MONTHS],
        ),
        yaxis=dict(title='Accidents', rangemode='tozero'),
        legend=dict(title='Year'),
        hovermode='x unified',
        template='plotly_white',
    )

    return fig
