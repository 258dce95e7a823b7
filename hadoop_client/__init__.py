"""Thin Hadoop-compatible storage client with test-support helpers."""

__version__ = "0.3.0"
