"""
FARS Plotting Package (Functional Core)

Pure plotting functions only – no file I/O, no display side effects.
Every public function accepts DataFrames and returns a
``plotly.graph_objects.Figure``; showing or saving it is up to the caller.

Modules:
    state_map: Accident locations for one state and year on a map.
    summary:   Accident counts by month, one line per year.
"""

from .state_map import plot_state_accidents
from .summary import plot_monthly_counts

__all__ = [
    'plot_state_accidents',
    'plot_monthly_counts',
]
