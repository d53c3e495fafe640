"""
Summary: Plain and advanced search over loaded metadata records.
Why: Narrow large folders to the files a batch edit should target.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from batchtag.shared.metadata_record import MetadataRecord
from batchtag.shared.tag_fields import TagField

ADVANCED_PREFIX: Final[str] = "!"

_TERM_SYNTAX: Final[str] = r'[A-Za-z]+="[^"]*"'
_QUERY_PATTERN: Final[re.Pattern[str]] = re.compile(rf"{_TERM_SYNTAX}(?:;{_TERM_SYNTAX})*")
_TERM_PATTERN: Final[re.Pattern[str]] = re.compile(r'(?P<prop>[A-Za-z]+)="(?P<value>[^"]*)"')


@dataclass(frozen=True, slots=True)
class SearchTerm:
    """One ``property="value"`` condition of an advanced query."""

    field: TagField
    value: str


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Outcome of a search; ``valid`` is False for malformed advanced queries."""

    valid: bool
    matches: tuple[MetadataRecord, ...] = ()


def is_advanced_query(query: str) -> bool:
    return query.startswith(ADVANCED_PREFIX)


def parse_advanced_query(query: str) -> tuple[SearchTerm, ...] | None:
    """Parse ``!prop="value";prop2="value2"`` into terms.

    Returns None when the syntax is wrong, a property is unknown, or a
    ``year``/``track`` value is neither empty nor digits.
    """
    if not is_advanced_query(query):
        return None
    body = query[len(ADVANCED_PREFIX) :]
    if _QUERY_PATTERN.fullmatch(body) is None:
        return None

    terms: list[SearchTerm] = []
    for match in _TERM_PATTERN.finditer(body):
        tag_field = TagField.lookup(match.group("prop"))
        if tag_field is None:
            return None
        value = match.group("value")
        if tag_field.is_numeric and value and not (value.isascii() and value.isdigit()):
            return None
        terms.append(SearchTerm(tag_field, value))
    return tuple(terms)


def _matches_term(record: MetadataRecord, term: SearchTerm) -> bool:
    if term.field is TagField.FILENAME:
        return record.filename.lower() == term.value.lower()
    current = getattr(record, term.field.attribute)
    if term.field.is_numeric:
        return current == (int(term.value) if term.value else None)
    return current.lower() == term.value.lower()


def search_records(records: Sequence[MetadataRecord], query: str) -> SearchResult:
    """Filter ``records`` with ``query``.

    Plain text keeps records whose filename contains it, ignoring case; empty
    text keeps everything. Text starting with ``!`` is an advanced query whose
    terms must all match, comparing whole values case-insensitively.
    """
    if not is_advanced_query(query):
        needle = query.lower()
        return SearchResult(
            valid=True,
            matches=tuple(record for record in records if needle in record.filename.lower()),
        )

    terms = parse_advanced_query(query)
    if terms is None:
        return SearchResult(valid=False)
    return SearchResult(
        valid=True,
        matches=tuple(
            record for record in records if all(_matches_term(record, term) for term in terms)
        ),
    )


__all__ = [
    "ADVANCED_PREFIX",
    "SearchResult",
    "SearchTerm",
    "is_advanced_query",
    "parse_advanced_query",
    "search_records",
]
