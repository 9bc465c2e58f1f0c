import pytest

from cregeen.parsing import Entry, link_by_depth, parse_entries


FRAGMENTS = [
    "aa, s. m. first",
    "  aaley, a. second",
    "    aaleyder, s. m. third",
    "  aalid, s. f. fourth",
    "bing, s. f. fifth",
]


def _all_entries(roots):
    for root in roots:
        yield from root.iter_tree()


def test_entries_are_nested_by_depth():
    roots = parse_entries(FRAGMENTS)
    assert [root.word for root in roots] == ["aa", "bing"]

    first = roots[0]
    assert [child.word.strip() for child in first.children] == ["aaley", "aalid"]
    assert [child.word.strip() for child in first.children[0].children] == ["aaleyder"]
    assert first.parent is None
    assert first.children[0].parent is first


def test_every_child_is_listed_once_by_its_parent():
    roots = parse_entries(FRAGMENTS)
    entries = list(_all_entries(roots))
    assert len(entries) == len(FRAGMENTS)
    for entry in entries:
        if entry.parent is not None:
            assert entry.parent.children.count(entry) == 1


def test_iter_tree_is_document_order():
    roots = parse_entries(FRAGMENTS)
    words = [entry.word.strip() for entry in _all_entries(roots)]
    assert words == ["aa", "aaley", "aaleyder", "aalid", "bing"]


def test_explicit_depth_is_used_for_linking():
    entries = [Entry.from_html("aa, first", depth=0), Entry.from_html("aaley, second", depth=1)]
    roots = link_by_depth(entries)
    assert roots == [entries[0]]
    assert entries[1].parent is entries[0]


def test_children_cannot_be_modified_directly():
    parent = Entry.from_html("aa, first")
    assert isinstance(parent.children, tuple)


def test_child_cannot_have_two_parents():
    parent = Entry.from_html("aa, first")
    other = Entry.from_html("bing, second")
    child = Entry.from_html("  aaley, third")
    parent.add_child(child)
    with pytest.raises(ValueError):
        other.add_child(child)
    assert other.children == ()
    assert child.parent is parent


def test_entry_cannot_contain_itself():
    parent = Entry.from_html("aa, first")
    child = Entry.from_html("  aaley, second")
    parent.add_child(child)
    with pytest.raises(ValueError):
        parent.add_child(parent)
    with pytest.raises(ValueError):
        child.add_child(parent)
