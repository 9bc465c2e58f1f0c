"""Decoding of dictionary markup into plain display text."""

from __future__ import annotations

import html
import logging
import re
import warnings
from typing import Optional

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, ParserRejectedMarkup

LOGGER = logging.getLogger(__name__)

VERB_SUFFIX_ESCAPE = ("[*]", "*")

# Deletions are marked with <...>; once decoded they are literal characters.
DELETION_PATTERN = re.compile(r"<.*?>", re.DOTALL)

# Used only when the HTML parser gives up on a fragment.
TAG_PATTERN = re.compile(r"<[^>]*>")

BRACKET_CORRECTIONS = [
    ("[cha]", "cha"),
    ("[er]", "er"),
    ("[ny]", "ny"),
    ("[da]", "da"),
    ("[lesh]", "lesh"),
    ("[yn]", "yn"),
    ("[e]", "e"),
    ("[ad]", "ad"),
    ("[or s'tiark]", "or s'tiark"),
    ("[or cruinnaght]", "or cruinnaght"),
]


def parse_fragment(markup: str) -> Optional[BeautifulSoup]:
    """Parse an HTML fragment, or return ``None`` if the parser rejects it."""
    with warnings.catch_warnings():
        # Short fragments such as "fy-" or "co." are routinely mistaken for file names.
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        try:
            return BeautifulSoup(markup, "html.parser")
        except ParserRejectedMarkup as exc:
            LOGGER.warning("Markup rejected by HTML parser (%s): %r", exc, markup)
            return None


def extract_text(markup: Optional[str]) -> str:
    """Return the text content of an HTML fragment with tags removed and entities decoded."""
    if not markup:
        return ""
    soup = parse_fragment(markup)
    if soup is None:
        return html.unescape(TAG_PATTERN.sub("", markup))
    return soup.get_text()


def decode_markup(markup: Optional[str]) -> str:
    """Convert an entry fragment into plain text.

    Leading spaces are kept: the indentation of a headword is its nesting depth.
    Only carriage returns and line feeds are trimmed from both ends.
    """
    text = extract_text(markup).strip("\r\n")
    text = text.replace(*VERB_SUFFIX_ESCAPE)
    text = DELETION_PATTERN.sub("", text)
    for bracketed, plain in BRACKET_CORRECTIONS:
        text = text.replace(bracketed, plain)
    return text
