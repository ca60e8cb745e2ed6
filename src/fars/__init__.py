"""
FARS - Fatality Analysis Reporting System toolkit

Reads yearly FARS accident files, summarizes accident counts by month
and year, and maps accident locations for a single state, using the
Functional Core, Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file names, file reads, per-year loading)
- analysis/ : Functional Core (record schema, aggregation, state filtering)
- plotting/ : (plotting functions)
- reports/  : Imperative Shell (orchestration, CSV/HTML output)
"""

__version__ = "0.1.0"
