from __future__ import annotations

from typing import Iterable, List

from .abbreviations import Abbreviation, detect_abbreviations
from .entry import Entry, split_fragment
from .normalization import decode_markup
from .possible_words import derive_possible_words
from .tree import link_by_depth


def parse_entry(fragment: str) -> Entry:
    return Entry.from_html(fragment)


def parse_entries(fragments: Iterable[str]) -> List[Entry]:
    """Parse fragments in document order and return the linked root entries."""
    return link_by_depth([parse_entry(fragment) for fragment in fragments])


__all__ = [
    "Abbreviation",
    "Entry",
    "decode_markup",
    "derive_possible_words",
    "detect_abbreviations",
    "link_by_depth",
    "parse_entries",
    "parse_entry",
    "split_fragment",
]
