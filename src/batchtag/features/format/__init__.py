# Where: batchtag.features.format.__init__
# What: Expose the format-string compiler, matcher, and renderer.
# Why: Give services one import surface for both conversion directions.

from .domain import FormatToken, LiteralToken, PlaceholderToken, Sanitizer, compile_format
from .usecases import (
    convert_filenames_to_tags,
    convert_tags_to_filenames,
    filename_to_tag,
    match_filename,
    relocate_record,
    render_filename,
    tag_to_filename,
)

__all__ = [
    "FormatToken",
    "LiteralToken",
    "PlaceholderToken",
    "Sanitizer",
    "compile_format",
    "convert_filenames_to_tags",
    "convert_tags_to_filenames",
    "filename_to_tag",
    "match_filename",
    "relocate_record",
    "render_filename",
    "tag_to_filename",
]
