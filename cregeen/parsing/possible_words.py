"""Derivation of the word forms which should resolve to an entry.

A headword such as ``trogg* or trog`` together with a definition mentioning
``-agh`` and ``-ee`` produces ``trogg``, ``trog``, ``troggagh`` and
``troggee``. Bold sub-forms of the heading (``dy <b>hroggal</b>``) are
indexed on their own, and explicit ``[change -agh to -ee]`` instructions in
the definition replace a suffix instead of appending to it.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterator, List, Tuple

from .normalization import parse_fragment

# Marks the verb form that takes the suffixes: "trogg*" joins to -agh, -ee, -ey &c.
VERB_HAS_SUFFIXES = "*"

NON_BREAKING_HYPHEN = "‑"
RIGHT_SINGLE_QUOTE = "’"

ALTERNATIVES_PATTERN = re.compile(r"\s+or\s+")
SUFFIX_PATTERN = re.compile(r"\s[-‑]\w+")
SUFFIX_CHANGE_PATTERN = re.compile(r"\[change [-‑](.*?)\s+to\s+[-‑](.*?)\s*\]")
# Additions are written as &lt;...&gt; in the heading and are not indexed yet.
ADDITION_PATTERN = re.compile(r"&lt;.*?&gt;", re.DOTALL)

SUFFIX_TRIM_CHARS = NON_BREAKING_HYPHEN + "-\n\r "
SIC_MARKERS = ("[sic]", "(sic)", "[sic:", "(sic:")


def clean_word(value: str) -> str:
    """Normalise punctuation and drop a trailing "sic" annotation."""
    value = value.replace(NON_BREAKING_HYPHEN, "-").replace(RIGHT_SINGLE_QUOTE, "'")
    positions = [value.find(marker) for marker in SIC_MARKERS if marker in value]
    if positions:
        value = value[: min(positions)]
    return value.strip()


def split_alternatives(word: str) -> List[str]:
    return ALTERNATIVES_PATTERN.split(word)


def _strip_marker(value: str) -> str:
    return value.strip().strip(VERB_HAS_SUFFIXES)


def bold_words(heading: str) -> List[str]:
    """Decoded text of every bold span in the heading, additions excluded."""
    if "<b>" not in heading:
        return []
    soup = parse_fragment(ADDITION_PATTERN.sub("", heading))
    if soup is None:
        return []
    return [tag.get_text() for tag in soup.find_all("b")]


def _is_indexable(value: str) -> bool:
    if any(char in value for char in ("\r", "\n", "[", VERB_HAS_SUFFIXES)):
        return False
    return bool(value.strip())


def find_suffixes(definition_text: str) -> List[str]:
    return [
        match.group(0).strip(SUFFIX_TRIM_CHARS)
        for match in SUFFIX_PATTERN.finditer(definition_text)
    ]


def _iter_candidates(word: str, heading: str, definition_text: str) -> Iterator[str]:
    alternatives = split_alternatives(word)
    words = [_strip_marker(alternative) for alternative in alternatives]
    yield from words

    for value in bold_words(heading):
        if _is_indexable(value):
            yield value

    if VERB_HAS_SUFFIXES in word:
        bases = [
            _strip_marker(alternative)
            for alternative in alternatives
            if VERB_HAS_SUFFIXES in alternative
        ]
    else:
        bases = words

    suffixes = find_suffixes(definition_text)

    for match in SUFFIX_CHANGE_PATTERN.finditer(definition_text):
        old_suffix = match.group(1).strip()
        new_suffix = match.group(2)
        for base in bases:
            if base.endswith(old_suffix):
                yield base[: len(base) - len(old_suffix)] + new_suffix
        suffixes = [suffix for suffix in suffixes if suffix not in (old_suffix, new_suffix)]

    for base in bases:
        for suffix in suffixes:
            yield base + suffix


@lru_cache(maxsize=4096)
def derive_possible_words(word: str, heading: str = "", definition_text: str = "") -> Tuple[str, ...]:
    """Return the deduplicated forms which link to an entry, in order of discovery.

    ``word`` and ``definition_text`` are decoded text, ``heading`` is the raw
    markup of the headword segment.
    """
    # removing "sic" can produce duplicates
    seen = dict.fromkeys(clean_word(value) for value in _iter_candidates(word, heading, definition_text))
    return tuple(seen)
