# Where: batchtag.features.selection.__init__
# What: Expose the edit surface with its aggregate and apply operations.
# Why: Let UI layers edit any selection size through one surface type.

from .domain import KEEP, EditSurface, Keep, is_kept
from .usecases import aggregate_selection, apply_surface

__all__ = ["KEEP", "EditSurface", "Keep", "is_kept", "aggregate_selection", "apply_surface"]
