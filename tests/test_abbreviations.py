from cregeen.parsing.abbreviations import ABBREVIATIONS_AT_PREFIX, Abbreviation, detect_abbreviations


def test_specific_substantive_replaces_generic():
    tags = detect_abbreviations(" s. f. power")
    assert Abbreviation.SUBSTANTIVE_FEMININE in tags
    assert Abbreviation.SUBSTANTIVE not in tags


def test_generic_substantive_alone():
    assert Abbreviation.SUBSTANTIVE in detect_abbreviations("s. a thing")


def test_imperative_verb_replaces_verb():
    assert detect_abbreviations("v. i. go") == (Abbreviation.VERB_IMPERATIVE,)


def test_abbreviation_after_closing_tag():
    assert detect_abbreviations("<i>a. d.</i> full") == (Abbreviation.ADJECTIVE_DERIVATIVE,)


def test_adverb_and_pronoun_replaces_adverb():
    tags = detect_abbreviations(" adv. p. with him")
    assert Abbreviation.ADVERB_AND_PRONOUN in tags
    assert Abbreviation.ADVERB not in tags


def test_plural_adjective_replaces_adjective():
    tags = detect_abbreviations(" a. pl. high ones")
    assert Abbreviation.ADJECTIVE_PLURAL in tags
    assert Abbreviation.ADJECTIVE not in tags


def test_same_tag_from_two_prefixes_is_reported_once():
    assert detect_abbreviations("id. or idem.") == (Abbreviation.THE_SAME_AS_ABOVE,)


def test_prefix_inside_word_is_ignored():
    assert detect_abbreviations("tea.") == ()


def test_empty_definition():
    assert detect_abbreviations(None) == ()
    assert detect_abbreviations("") == ()


def test_prefix_table_is_ordered_specific_first():
    prefixes = list(ABBREVIATIONS_AT_PREFIX)
    assert prefixes.index("s. f.") < prefixes.index("s.")
    assert prefixes.index("v. i.") < prefixes.index("v.")
