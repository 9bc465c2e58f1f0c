import warnings

from bs4 import MarkupResemblesLocatorWarning, ParserRejectedMarkup

from cregeen.parsing import Entry, derive_possible_words
from cregeen.parsing import normalization
from cregeen.parsing.normalization import decode_markup, extract_text


def test_tags_are_stripped():
    assert decode_markup("<b>aght</b>") == "aght"
    assert decode_markup('<span style=\'font-family:"Times New Roman"\'>dy <b>hroggal</b></span>') == "dy hroggal"


def test_entities_are_decoded():
    assert decode_markup("co&#8209; prefix.") == "co‑ prefix."
    assert decode_markup("&amp;c.") == "&c."


def test_only_line_breaks_are_trimmed():
    assert decode_markup("\n   trogg[*]\n") == "   trogg*"


def test_deletion_markers_are_removed():
    assert decode_markup("gheul &lt;or gheuley&gt; x") == "gheul  x"


def test_bracket_corrections():
    assert decode_markup("[cha] [e] fy[er]") == "cha e fyer"
    assert decode_markup("shiartagh [or s'tiark]") == "shiartagh or s'tiark"


def test_unknown_brackets_are_kept():
    assert decode_markup("bing [sic]") == "bing [sic]"


def test_malformed_markup_is_tolerated():
    assert decode_markup("<b>unclosed <i>text") == "unclosed text"
    assert decode_markup("</b>stray</i> close") == "stray close"


def test_empty_input():
    assert decode_markup(None) == ""
    assert decode_markup("") == ""
    assert extract_text(None) == ""


def _reject_markup(markup, features):
    raise ParserRejectedMarkup("unknown status keyword in marked section")


def test_entities_are_decoded_once():
    assert decode_markup("gheul &amp;lt;or x&amp;gt; y") == "gheul &lt;or x&gt; y"


def test_rejected_marked_section_does_not_raise():
    text = decode_markup("aa <![foo bar")
    assert text.startswith("aa")


def test_rejected_markup_falls_back_to_tag_stripping(monkeypatch, caplog):
    monkeypatch.setattr(normalization, "BeautifulSoup", _reject_markup)
    assert decode_markup("<b>aa</b> &amp; bb") == "aa & bb"
    assert "rejected" in caplog.text


def test_rejected_markup_still_builds_entry(monkeypatch):
    monkeypatch.setattr(normalization, "BeautifulSoup", _reject_markup)
    entry = Entry("dy <b>hroggey</b>", " s. m. a rising")
    assert entry.word == "dy hroggey"
    assert derive_possible_words(entry.word, entry.heading, "") == ("dy hroggey",)


def test_decoding_leaves_warning_filters_alone():
    before = list(warnings.filters)
    decode_markup("fy-")
    assert warnings.filters == before
    assert not any(entry[2] is MarkupResemblesLocatorWarning for entry in warnings.filters)
