"""
Summary: Library use cases and the ports they depend on.
Why: Provide a stable import path for services and adapters.
"""

from .music_folder import MusicFolder
from .ports import ImageDecodePort, ImageInfo, RenamePort, TagIOPort
from .remove_tags import refresh_record, remove_tags

__all__ = [
    "MusicFolder",
    "ImageDecodePort",
    "ImageInfo",
    "RenamePort",
    "TagIOPort",
    "refresh_record",
    "remove_tags",
]
