"""Batch conversion of NDJSON message streams into HTML reports."""

__version__ = "0.1.0"
