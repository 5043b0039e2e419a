"""Shared helpers for RegKit."""
