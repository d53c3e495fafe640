# Where: batchtag.shared.tag_fields
# What: Canonical identifiers for editable tag fields and format placeholders.
# Why: Placeholder names are user-visible configuration and must stay bit-exact.

from __future__ import annotations

from enum import StrEnum


class TagField(StrEnum):
    """Field identifiers recognized inside ``%...%`` placeholders."""

    FILENAME = "filename"
    TITLE = "title"
    ARTIST = "artist"
    ALBUM = "album"
    YEAR = "year"
    TRACK = "track"
    ALBUM_ARTIST = "albumArtist"
    COMPOSER = "composer"
    GENRE = "genre"
    COMMENT = "comment"

    @property
    def attribute(self) -> str:
        """Name of the matching ``MetadataRecord`` attribute."""
        return _ATTRIBUTES[self]

    @property
    def is_numeric(self) -> bool:
        return self in NUMERIC_FIELDS

    @classmethod
    def lookup(cls, name: str) -> "TagField | None":
        """Resolve ``name`` case-insensitively, returning None when unknown."""
        return _BY_LOWER_NAME.get(name.lower())


_ATTRIBUTES: dict[TagField, str] = {
    TagField.FILENAME: "filename",
    TagField.TITLE: "title",
    TagField.ARTIST: "artist",
    TagField.ALBUM: "album",
    TagField.YEAR: "year",
    TagField.TRACK: "track",
    TagField.ALBUM_ARTIST: "album_artist",
    TagField.COMPOSER: "composer",
    TagField.GENRE: "genre",
    TagField.COMMENT: "comment",
}

_BY_LOWER_NAME: dict[str, TagField] = {member.value.lower(): member for member in TagField}

TEXT_FIELDS: tuple[TagField, ...] = (
    TagField.TITLE,
    TagField.ARTIST,
    TagField.ALBUM,
    TagField.ALBUM_ARTIST,
    TagField.COMPOSER,
    TagField.GENRE,
    TagField.COMMENT,
)

NUMERIC_FIELDS: tuple[TagField, ...] = (TagField.YEAR, TagField.TRACK)

# Every field a batch edit can overwrite, in display order.
TAG_FIELDS: tuple[TagField, ...] = (
    TagField.TITLE,
    TagField.ARTIST,
    TagField.ALBUM,
    TagField.YEAR,
    TagField.TRACK,
    TagField.ALBUM_ARTIST,
    TagField.COMPOSER,
    TagField.GENRE,
    TagField.COMMENT,
)


__all__ = ["TagField", "TEXT_FIELDS", "NUMERIC_FIELDS", "TAG_FIELDS"]
