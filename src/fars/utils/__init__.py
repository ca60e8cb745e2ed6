"""Shared helpers: structured logging."""
