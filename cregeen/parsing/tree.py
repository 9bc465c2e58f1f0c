from __future__ import annotations

from typing import Iterable, List

from .entry import Entry


def link_by_depth(entries: Iterable[Entry]) -> List[Entry]:
    """Nest entries given in document order under the closest shallower entry.

    Returns the root entries. Linking mutates the entries and must run on a
    single thread once every entry has been parsed.
    """
    roots: List[Entry] = []
    stack: List[Entry] = []
    for entry in entries:
        while stack and stack[-1].depth >= entry.depth:
            stack.pop()
        if stack:
            stack[-1].add_child(entry)
        else:
            roots.append(entry)
        stack.append(entry)
    return roots
