"""
Summary: Aggregate a selection into an edit surface and apply it back.
Why: Provide a stable import path for services and tests.
"""

from .aggregator import aggregate_selection
from .applier import apply_surface

__all__ = ["aggregate_selection", "apply_surface"]
