"""
Summary: Package marker for library adapters.
Why: Keep adapter exports together for easy discovery.
"""

from .filesystem_adapter import LocalRenameAdapter
from .image_adapter import PillowImageDecoder
from .mutagen_tag_adapter import MutagenTagAdapter

__all__ = ["LocalRenameAdapter", "MutagenTagAdapter", "PillowImageDecoder"]
