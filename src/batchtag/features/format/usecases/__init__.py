"""
Summary: Filename/tag conversion entry points.
Why: Provide a stable import path for services and tests.
"""

from .convert import convert_filenames_to_tags, convert_tags_to_filenames
from .matcher import FieldUpdates, apply_field_updates, filename_to_tag, match_filename
from .relocate import relocate_record, target_filename
from .renderer import render_field, render_filename, tag_to_filename

__all__ = [
    "convert_filenames_to_tags",
    "convert_tags_to_filenames",
    "FieldUpdates",
    "apply_field_updates",
    "filename_to_tag",
    "match_filename",
    "relocate_record",
    "target_filename",
    "render_field",
    "render_filename",
    "tag_to_filename",
]
