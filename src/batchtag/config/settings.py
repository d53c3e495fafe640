"""Where: src/batchtag/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from batchtag.config.config import (
    DEFAULT_FORMAT_STRING,
    DEFAULT_FORMAT_STRINGS,
    DEFAULT_ILLEGAL_CHARACTER_SUBSTITUTE,
    config as app_config,
)

# Music folder ----------------------------------------------------------------

INCLUDE_SUBFOLDERS: bool = bool(getattr(app_config, "include_subfolders", True))

# Audio extensions considered when scanning a music folder.
SUPPORTED_AUDIO_EXTENSIONS: tuple[str, ...] = (
    ".mp3",
    ".flac",
    ".ogg",
    ".opus",
    ".m4a",
    ".wav",
)


# Music file ------------------------------------------------------------------

PRESERVE_MODIFICATION_TIMESTAMP: bool = bool(
    getattr(app_config, "preserve_modification_timestamp", False)
)


# Format strings --------------------------------------------------------------

FILENAME_TO_TAG_FORMAT: str = app_config.filename_to_tag_format or DEFAULT_FORMAT_STRING
TAG_TO_FILENAME_FORMAT: str = app_config.tag_to_filename_format or DEFAULT_FORMAT_STRING

_format_strings = getattr(app_config, "format_strings", None)
FORMAT_STRINGS: tuple[str, ...] = (
    tuple(item for item in _format_strings if isinstance(item, str) and item)
    if isinstance(_format_strings, list) and _format_strings
    else DEFAULT_FORMAT_STRINGS
)

# The substitute must itself be a single legal filename character.
_substitute = getattr(app_config, "illegal_character_substitute", DEFAULT_ILLEGAL_CHARACTER_SUBSTITUTE)
ILLEGAL_CHARACTER_SUBSTITUTE: str = (
    _substitute
    if isinstance(_substitute, str)
    and len(_substitute) == 1
    and _substitute.isprintable()
    and _substitute not in '/\\:*?"<>|'
    else DEFAULT_ILLEGAL_CHARACTER_SUBSTITUTE
)


__all__ = [
    "INCLUDE_SUBFOLDERS",
    "SUPPORTED_AUDIO_EXTENSIONS",
    "PRESERVE_MODIFICATION_TIMESTAMP",
    "FILENAME_TO_TAG_FORMAT",
    "TAG_TO_FILENAME_FORMAT",
    "FORMAT_STRINGS",
    "ILLEGAL_CHARACTER_SUBSTITUTE",
]
