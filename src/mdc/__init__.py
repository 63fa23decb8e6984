"""Metadata container content-version layer.

This module tracks which MDC content formats this binary understands.
It exposes the version table, comparison helpers, and the read/write gate.
"""
