"""
FARS State Accident Map (Functional Core)

Pure function - no file I/O, no display side effects.
Input: sanitized state accident DataFrame (see analysis/mapping.py).
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Map extent:
    The geo axes are restricted to the latitude/longitude range of the
    valid coordinates (NaN ignored), padded by ``_EXTENT_PAD_DEG`` so
    that points on the edge remain visible and a single accident still
    gets a non-degenerate map.  State borders are drawn as subunits.
"""

from __future__ import annotations

from typing import List

import pandas as pd
import plotly.graph_objects as go

from ..analysis.mapping import coordinate_bounds, plottable_points
from ..config import LATITUDE_COL, LONGITUDE_COL

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_EXTENT_PAD_DEG: float = 0.5

_POINT_STYLE = {
    'color': 'firebrick',
    'size': 3,
    'opacity': 0.7,
}

# Optional columns shown in the hover label when present
_HOVER_COLS: List[str] = ['ST_CASE', 'MONTH', 'DAY', 'FATALS']


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_accidents(
    points: pd.DataFrame,
    state_num: int,
    year: int,
) -> go.Figure:
    """
    Build a map of one state's accidents for one year.

    Args:
        points: Output of ``analysis.mapping.state_points`` - a non-empty
            DataFrame with float ``LONGITUD`` / ``LATITUDE`` columns where
            NaN marks a coordinate that was not recorded.
        state_num: State code, used in the title.
        year: Accident year, used in the title.

    Returns:
        ``plotly.graph_objects.Figure`` with a single ``Scattergeo``
        trace holding one marker per row with both coordinates valid.

    Raises:
        ValueError: If *points* is empty or missing coordinate columns.
    """
    _validate_columns(points, required=[LONGITUDE_COL, LATITUDE_COL])
    if points.empty:
        raise ValueError("points is empty; nothing to plot")

    valid = plottable_points(points)
    bounds = coordinate_bounds(points)

    hover_cols = [c for c in _HOVER_COLS if c in valid.columns]

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lon=valid[LONGITUDE_COL],
        lat=valid[LATITUDE_COL],
        mode='markers',
        marker=dict(
            color=_POINT_STYLE['color'],
            size=_POINT_STYLE['size'],
            opacity=_POINT_STYLE['opacity'],
        ),
        name='Accident',
        showlegend=False,
        customdata=valid[hover_cols] if hover_cols else None,
        hovertemplate=_hover_template(hover_cols),
    ))

    geo = dict(
        scope='north america',
        projection_type='mercator',
        resolution=50,
        showsubunits=True,
        subunitcolor='gray',
        showland=True,
        landcolor='rgb(243, 243, 243)',
        showlakes=False,
    )
    if bounds is not None:
        (lat_min, lat_max), (lon_min, lon_max) = bounds
        geo['lataxis_range'] = [lat_min - _EXTENT_PAD_DEG, lat_max + _EXTENT_PAD_DEG]
        geo['lonaxis_range'] = [lon_min - _EXTENT_PAD_DEG, lon_max + _EXTENT_PAD_DEG]

    fig.update_geos(**geo)
    fig.update_layout(
        title=f'State {int(state_num)} – Fatal Accidents {int(year)}',
        margin=dict(l=10, r=10, t=50, b=10),
        template='plotly_white',
    )

    return fig


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _validate_columns(df: pd.DataFrame, required: list[str]) -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: List of column names that must be present.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(
            f"points is missing required columns: {missing}"
        )


def _hover_template(hover_cols: List[str]) -> str:
    lines = [
        'Lat: %{lat:.4f}',
        'Lon: %{lon:.4f}',
    ]
    for idx, col in enumerate(hover_cols):
        lines.append(f'{col}: %{{customdata[{idx}]}}')
    return '<br>'.join(lines) + '<extra></extra>'
