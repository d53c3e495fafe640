# Where: batchtag.shared.__init__
# What: Provide a concise import surface for shared dataclasses and errors.
# Why: Encourage consistent reuse of the record model across features.

"""Shared cross-cutting types exposed at the package level."""

from .errors import (
    AmbiguousFormatError,
    BatchTagError,
    ImageDecodeError,
    InvalidFilenameError,
    NoMatchError,
    ParseError,
    PathCollisionError,
    TagIOError,
)
from .metadata_record import FileStats, MetadataRecord
from .tag_fields import NUMERIC_FIELDS, TAG_FIELDS, TEXT_FIELDS, TagField

__all__ = [
    "AmbiguousFormatError",
    "BatchTagError",
    "ImageDecodeError",
    "InvalidFilenameError",
    "NoMatchError",
    "ParseError",
    "PathCollisionError",
    "TagIOError",
    "FileStats",
    "MetadataRecord",
    "TagField",
    "TEXT_FIELDS",
    "NUMERIC_FIELDS",
    "TAG_FIELDS",
]
