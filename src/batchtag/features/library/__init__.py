# Where: batchtag.features.library.__init__
# What: Expose music folder scanning, search, ports, and concrete adapters.
# Why: Provide a cohesive import surface for services and the CLI.

from .adapters import LocalRenameAdapter, MutagenTagAdapter, PillowImageDecoder
from .domain import SearchResult, search_records
from .usecases import (
    ImageDecodePort,
    ImageInfo,
    MusicFolder,
    RenamePort,
    TagIOPort,
    remove_tags,
)

__all__ = [
    "LocalRenameAdapter",
    "MutagenTagAdapter",
    "PillowImageDecoder",
    "SearchResult",
    "search_records",
    "ImageDecodePort",
    "ImageInfo",
    "MusicFolder",
    "RenamePort",
    "TagIOPort",
    "remove_tags",
]
