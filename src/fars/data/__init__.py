"""
FARS Data Package (Imperative Shell)

This package handles all file-system access for the FARS toolkit.

Modules:
- reader: File name derivation, single-file reads, per-year batch loads
"""

from .reader import (
    make_filename,
    read_accidents,
    read_years,
)

__all__ = [
    'make_filename',
    'read_accidents',
    'read_years',
]
