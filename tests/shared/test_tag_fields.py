"""Tests for tag field identifiers."""

import pytest

from batchtag.shared.metadata_record import MetadataRecord
from batchtag.shared.tag_fields import NUMERIC_FIELDS, TAG_FIELDS, TEXT_FIELDS, TagField


def test_placeholder_names_are_exact() -> None:
    assert [field.value for field in TagField] == [
        "filename",
        "title",
        "artist",
        "album",
        "year",
        "track",
        "albumArtist",
        "composer",
        "genre",
        "comment",
    ]


@pytest.mark.parametrize("name", ["albumArtist", "albumartist", "ALBUMARTIST"])
def test_lookup_is_case_insensitive(name: str) -> None:
    assert TagField.lookup(name) is TagField.ALBUM_ARTIST


def test_lookup_unknown_returns_none() -> None:
    assert TagField.lookup("bpm") is None
    assert TagField.lookup("") is None


def test_attributes_exist_on_record() -> None:
    for field in TAG_FIELDS:
        assert field.attribute in MetadataRecord.__dataclass_fields__
    assert TagField.FILENAME not in TAG_FIELDS


def test_numeric_and_text_fields_partition_tag_fields() -> None:
    assert set(TEXT_FIELDS) | set(NUMERIC_FIELDS) == set(TAG_FIELDS)
    assert all(field.is_numeric for field in NUMERIC_FIELDS)
    assert not any(field.is_numeric for field in TEXT_FIELDS)
