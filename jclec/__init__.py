"""Verify vulnerable Java classes against Maven artifacts."""

__version__ = "1.0.0"
