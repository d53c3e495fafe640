"""
Summary: Edit surface model and keep sentinel for batch edits.
Why: Provide a stable import path for the aggregator, applier, and UI.
"""

from .edit_surface import KEEP, SURFACE_FIELDS, EditSurface, Keep, KeepType, is_kept

__all__ = ["KEEP", "SURFACE_FIELDS", "EditSurface", "Keep", "KeepType", "is_kept"]
