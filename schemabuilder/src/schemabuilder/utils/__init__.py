"""Utility functions for common operations."""

from .schema_io import load_workspace, save_workspace

__all__ = ["load_workspace", "save_workspace"]
