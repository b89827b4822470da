"""Shared data structures, errors and redaction helpers."""
