"""Grammatical abbreviations used in the definitions and their detection."""

from __future__ import annotations

from collections import OrderedDict
from enum import Enum
from functools import lru_cache
from typing import List, Optional, Tuple


class Abbreviation(Enum):
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    ADJECTIVE_DERIVATIVE = "adjective_derivative"
    ADJECTIVE_PLURAL = "adjective_plural"
    ADVERB_AND_PRONOUN = "adverb_and_pronoun"
    ARTICLE = "article"
    ARTICLE_PLURAL = "article_plural"
    COMPARATIVE_DEGREE = "comparative_degree"
    CONJUNCTION = "conjunction"
    CONJUNCTION_AND_PRONOUN = "conjunction_and_pronoun"
    DIMINUTIVE = "diminutive"
    EMPHATICALLY = "emphatically"
    FEMININE_GENDER = "feminine_gender"
    GALIC_OR_GAELIC = "galic_or_gaelic"
    HEBREW_AND_BOOK_OF_HEBREWS = "hebrew_and_book_of_hebrews"
    THE_SAME_AS_ABOVE = "the_same_as_above"
    INTERJECTION = "interjection"
    LITERALLY = "literally"
    PRONOMINAL = "pronominal"
    HAS_PLURAL = "has_plural"
    PREPOSITION_AND_PRONOUN = "preposition_and_pronoun"
    PREPOSITION = "preposition"
    PRONOUN = "pronoun"
    MANKS_PROVERB = "manks_proverb"
    PARTICIPLE = "participle"
    SUBSTANTIVE = "substantive"
    SUBSTANTIVE_FEMININE = "substantive_feminine"
    SINGULAR = "singular"
    SUBSTANTIVE_MASCULINE = "substantive_masculine"
    DO_MASCULINE_AND_FEMININE = "do_masculine_and_feminine"
    SUBSTANTIVE_PLURAL = "substantive_plural"
    SUPERLATIVE_DEGREE = "superlative_degree"
    SYNONYMOUS = "synonymous"
    VERB = "verb"
    VERB_IMPERATIVE = "verb_imperative"


ABBREVIATIONS_AT_PREFIX = OrderedDict(
    [
        ("a. d.", Abbreviation.ADJECTIVE_DERIVATIVE),
        ("a. pl.", Abbreviation.ADJECTIVE_PLURAL),
        ("a.", Abbreviation.ADJECTIVE),
        ("adv. p.", Abbreviation.ADVERB_AND_PRONOUN),
        ("adv.", Abbreviation.ADVERB),
        ("comp.", Abbreviation.COMPARATIVE_DEGREE),
        ("comj.", Abbreviation.CONJUNCTION),
        ("c. p.", Abbreviation.CONJUNCTION_AND_PRONOUN),
        ("dim.", Abbreviation.DIMINUTIVE),
        ("em.", Abbreviation.EMPHATICALLY),
        ("f.", Abbreviation.FEMININE_GENDER),
        ("Gal.", Abbreviation.GALIC_OR_GAELIC),
        ("Heb.", Abbreviation.HEBREW_AND_BOOK_OF_HEBREWS),
        ("id.", Abbreviation.THE_SAME_AS_ABOVE),
        ("idem.", Abbreviation.THE_SAME_AS_ABOVE),
        ("in.", Abbreviation.INTERJECTION),
        ("lit.", Abbreviation.LITERALLY),
        ("p. p.", Abbreviation.PREPOSITION_AND_PRONOUN),
        ("p.", Abbreviation.PRONOMINAL),
        ("pl.", Abbreviation.HAS_PLURAL),
        ("pre.", Abbreviation.PREPOSITION),
        ("pro.", Abbreviation.PRONOUN),
        ("Prov.", Abbreviation.MANKS_PROVERB),
        ("pt.", Abbreviation.PARTICIPLE),
        ("sing.", Abbreviation.SINGULAR),
        ("s. m. f.", Abbreviation.DO_MASCULINE_AND_FEMININE),
        ("s. m.", Abbreviation.SUBSTANTIVE_MASCULINE),
        ("s. pl.", Abbreviation.SUBSTANTIVE_PLURAL),
        ("s. f.", Abbreviation.SUBSTANTIVE_FEMININE),
        ("s.", Abbreviation.SUBSTANTIVE),
        ("sup.", Abbreviation.SUPERLATIVE_DEGREE),
        ("syn.", Abbreviation.SYNONYMOUS),
        ("v. i.", Abbreviation.VERB_IMPERATIVE),
        ("v.", Abbreviation.VERB),
    ]
)

# (generic tag, more specific tags that subsume it), applied in order.
SUBSUMED_BY = [
    (
        Abbreviation.SUBSTANTIVE,
        (
            Abbreviation.SUBSTANTIVE_FEMININE,
            Abbreviation.SUBSTANTIVE_MASCULINE,
            Abbreviation.SUBSTANTIVE_PLURAL,
        ),
    ),
    (
        Abbreviation.ADJECTIVE,
        (Abbreviation.ADJECTIVE_DERIVATIVE, Abbreviation.ADJECTIVE_PLURAL),
    ),
    (Abbreviation.ADVERB, (Abbreviation.ADVERB_AND_PRONOUN,)),
    (Abbreviation.ARTICLE, (Abbreviation.ARTICLE_PLURAL,)),
    (Abbreviation.VERB, (Abbreviation.VERB_IMPERATIVE,)),
]


def _has_prefix(text: str, prefix: str) -> bool:
    return f" {prefix}" in text or text.startswith(prefix) or f">{prefix}" in text


@lru_cache(maxsize=4096)
def detect_abbreviations(extra: Optional[str]) -> Tuple[Abbreviation, ...]:
    """Return the abbreviation tags found in raw definition markup.

    The raw markup is used so that an abbreviation directly after a closing
    tag (``</i>s. f.``) is still recognised.
    """
    if not extra:
        return ()

    found: List[Abbreviation] = []
    for prefix, abbreviation in ABBREVIATIONS_AT_PREFIX.items():
        if abbreviation not in found and _has_prefix(extra, prefix):
            found.append(abbreviation)

    for generic, specific in SUBSUMED_BY:
        if generic in found and any(tag in found for tag in specific):
            found.remove(generic)

    return tuple(found)
