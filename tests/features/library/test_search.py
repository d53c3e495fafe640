"""Tests for plain and advanced record search."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from batchtag.features.library.domain.search import (
    SearchTerm,
    parse_advanced_query,
    search_records,
)
from batchtag.shared.metadata_record import MetadataRecord
from batchtag.shared.tag_fields import TagField

if TYPE_CHECKING:
    from conftest import RecordFactory


@pytest.fixture
def records(make_record: RecordFactory) -> list[MetadataRecord]:
    return [
        make_record("Daft Punk- One More Time.mp3", artist="Daft Punk", year=2001, track=1),
        make_record("Daft Punk- Aerodynamic.mp3", artist="Daft Punk", year=2001, track=2),
        make_record("Air- Sexy Boy.flac", artist="Air", album="Moon Safari", year=1998),
    ]


def test_plain_query_matches_filename_substring(records: list[MetadataRecord]) -> None:
    result = search_records(records, "daft")

    assert result.valid
    assert [r.filename for r in result.matches] == [
        "Daft Punk- One More Time.mp3",
        "Daft Punk- Aerodynamic.mp3",
    ]


def test_empty_query_keeps_everything(records: list[MetadataRecord]) -> None:
    assert search_records(records, "").matches == tuple(records)


def test_advanced_query_ands_terms(records: list[MetadataRecord]) -> None:
    result = search_records(records, '!artist="daft punk";track="2"')

    assert result.valid
    assert [r.filename for r in result.matches] == ["Daft Punk- Aerodynamic.mp3"]


def test_advanced_query_compares_whole_values(records: list[MetadataRecord]) -> None:
    assert search_records(records, '!artist="Daft"').matches == ()
    assert len(search_records(records, '!albumArtist=""').matches) == 3


def test_advanced_query_on_filename_and_empty_number(records: list[MetadataRecord]) -> None:
    by_name = search_records(records, '!filename="air- sexy boy.flac"')
    no_track = search_records(records, '!track=""')

    assert [r.artist for r in by_name.matches] == ["Air"]
    assert [r.artist for r in no_track.matches] == ["Air"]


@pytest.mark.parametrize(
    "query",
    [
        "!",
        "!artist=Air",
        '!artist="Air";',
        '!bpm="120"',
        '!year="199x"',
        '!artist="Air" album="x"',
    ],
)
def test_malformed_advanced_query_is_invalid(
    records: list[MetadataRecord], query: str
) -> None:
    result = search_records(records, query)

    assert not result.valid
    assert result.matches == ()


def test_parse_advanced_query_terms() -> None:
    assert parse_advanced_query('!Year="2001";genre="House"') == (
        SearchTerm(TagField.YEAR, "2001"),
        SearchTerm(TagField.GENRE, "House"),
    )
    assert parse_advanced_query("plain") is None
