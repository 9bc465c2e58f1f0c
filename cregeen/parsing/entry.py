"""Parsed dictionary entries and the splitting of raw entry fragments."""

from __future__ import annotations

import logging
import re
import weakref
from functools import cached_property
from typing import Any, Dict, Iterator, List, Optional, Tuple

from cregeen.config import headwords_without_definition

from .abbreviations import ABBREVIATIONS_AT_PREFIX, Abbreviation, detect_abbreviations
from .normalization import decode_markup
from .possible_words import derive_possible_words

LOGGER = logging.getLogger(__name__)

# font-family:"Times New Roman",serif - the comma belongs to the style, not the entry
FONT_FAMILY_PATTERN = re.compile(r'Times New Roman"\s*>?\s*$')

# ". See" is a common element which does not contain a comma
SEE_MARKER = ". See"

# Inflection lists which carry no meaning in a short gloss.
GLOSS_NOISE = [
    " ‑agh;",
    " ‑ee;",
    " ‑in;",
    " ‑ins;",
    " ‑ym;",
    " ‑yms;",
    " ‑ys, 94.",
]


def split_fragment(fragment: str) -> Tuple[str, Optional[str]]:
    """Split raw entry markup into the headword and the definition markup.

    The definition is ``None`` when the fragment holds no comma at all.
    """
    segments = fragment.split(",")

    while len(segments) > 1 and FONT_FAMILY_PATTERN.search(segments[0]):
        segments[0] += segments.pop(1)

    index = segments[0].find(SEE_MARKER)
    if index != -1:
        original = segments[0]
        segments[0] = original[:index]
        if len(segments) == 1:
            segments.append("")
        segments[1] = original[index + len(". ") :] + segments[1]

    word = segments[0]
    if len(segments) == 1:
        # Certain headwords (cummey, jeear) appear both with and without definitions
        if word.strip() not in headwords_without_definition():
            LOGGER.warning("Entry without definition: %r", word.strip())
        return word, None

    return word, ",".join(segments[1:])


class Entry:
    """A single dictionary record.

    ``raw_word`` and ``raw_definition`` keep the original markup; ``word`` and
    ``definition_text`` are their decoded forms. Children are owned by the
    entry, the parent is only referenced weakly.
    """

    def __init__(
        self,
        raw_word: str,
        raw_definition: Optional[str] = None,
        *,
        depth: Optional[int] = None,
    ) -> None:
        self.raw_word = raw_word
        self.raw_definition = raw_definition
        self.word = decode_markup(raw_word)
        self.definition_text = decode_markup(raw_definition)
        self._depth = depth
        self._children: List[Entry] = []
        self._parent: Optional[weakref.ReferenceType] = None

    @classmethod
    def from_html(cls, fragment: str, *, depth: Optional[int] = None) -> "Entry":
        raw_word, raw_definition = split_fragment(fragment)
        return cls(raw_word, raw_definition, depth=depth)

    def __repr__(self) -> str:
        return f"Entry({self.raw_word.strip()!r})"

    @property
    def heading(self) -> str:
        """The HTML of the headword(s) for the entry."""
        return self.raw_word

    @property
    def depth(self) -> int:
        """Nesting depth; the number of spaces before the word unless set explicitly."""
        if self._depth is not None:
            return self._depth
        return len(self.word) - len(self.word.lstrip())

    @depth.setter
    def depth(self, value: int) -> None:
        self._depth = value

    @property
    def children(self) -> Tuple["Entry", ...]:
        return tuple(self._children)

    @property
    def parent(self) -> Optional["Entry"]:
        if self._parent is None:
            return None
        return self._parent()

    def add_child(self, node: "Entry") -> None:
        if node.parent is not None:
            raise ValueError(f"{node!r} already belongs to {node.parent!r}")
        ancestor: Optional[Entry] = self
        while ancestor is not None:
            if ancestor is node:
                raise ValueError(f"{node!r} cannot be nested under itself")
            ancestor = ancestor.parent
        self._children.append(node)
        node._parent = weakref.ref(self)

    def iter_tree(self) -> Iterator["Entry"]:
        """Yield this entry followed by all of its descendants."""
        yield self
        for child in self._children:
            yield from child.iter_tree()

    @cached_property
    def tags(self) -> Tuple[Abbreviation, ...]:
        return detect_abbreviations(self.raw_definition)

    @cached_property
    def possible_words(self) -> Tuple[str, ...]:
        LOGGER.debug("Deriving possible words for %r", self.word.strip())
        return derive_possible_words(self.word, self.raw_word, self.definition_text)

    @cached_property
    def gloss(self) -> str:
        text = self.definition_text
        index = text.find("pl. ")
        if index != -1:
            text = text[:index]
        text = text.replace("\r\n", " ").replace("\n", " ")
        for noise in GLOSS_NOISE:
            text = text.replace(noise, "")

        # strip prefixed abbreviations
        for prefix in ABBREVIATIONS_AT_PREFIX:
            index = text.find(prefix)
            if index == -1:
                continue
            text = text[index + len(prefix) :]
        return text.strip()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "heading": self.heading,
            "word": self.word.strip(),
            "definition": self.definition_text,
            "depth": self.depth,
            "tags": [tag.value for tag in self.tags],
            "possible_words": list(self.possible_words),
            "gloss": self.gloss,
            "children": [child.to_dict() for child in self._children],
        }
