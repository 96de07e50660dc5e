"""Adapters for user-facing entry points."""

__all__ = []
