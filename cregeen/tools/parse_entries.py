from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from cregeen.config import default_data_dir
from cregeen.parsing import Entry, parse_entries

LOGGER = logging.getLogger(__name__)

DEFAULT_INPUT = default_data_dir() / "entries.txt"


def split_fragments(content: str) -> List[str]:
    """Split raw dictionary text into entry fragments separated by empty lines."""

    fragments: List[str] = []
    current: List[str] = []

    for line in content.split("\n"):
        if not line.strip():
            if current:
                fragments.append("\n".join(current))
                current = []
            continue
        current.append(line)

    if current:
        fragments.append("\n".join(current))

    return fragments


def summarize(roots: Iterable[Entry]) -> Dict[str, Dict[str, int]]:
    summary: Dict[str, Dict[str, int]] = {
        "entries": {"total": 0, "without_definition": 0, "possible_words": 0},
        "tags": {},
    }
    for root in roots:
        for entry in root.iter_tree():
            summary["entries"]["total"] += 1
            if entry.raw_definition is None:
                summary["entries"]["without_definition"] += 1
            summary["entries"]["possible_words"] += len(entry.possible_words)
            for tag in entry.tags:
                summary["tags"][tag.value] = summary["tags"].get(tag.value, 0) + 1
    return summary


def _export_results(path: Path, roots: List[Entry]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [root.to_dict() for root in roots]
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse raw Cregeen dictionary entries and report their word forms.",
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=DEFAULT_INPUT,
        help="Text file with entry fragments separated by empty lines (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path to save the parsed entry tree as JSON",
    )
    parser.add_argument(
        "--show",
        type=int,
        default=3,
        help="Display first N parsed entries in the console (default: 3)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args(argv)
    if not args.input.is_file():
        parser.error(f"input file not found: {args.input}")
    return args


def main(argv: Optional[Iterable[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if not args.verbose else logging.DEBUG,
        format="%(levelname)s %(message)s",
    )

    fragments = split_fragments(args.input.read_text(encoding="utf-8"))
    LOGGER.info("Parsing %d fragments from %s", len(fragments), args.input)
    roots = parse_entries(fragments)
    summary = summarize(roots)

    print(f"Parsed entries: {summary['entries']['total']}")
    print(f"Without definition: {summary['entries']['without_definition']}")
    print(f"Possible words: {summary['entries']['possible_words']}")
    top_tags = sorted(summary["tags"].items(), key=lambda item: item[1], reverse=True)
    print("Tag usage (top 10):")
    for tag, count in top_tags[:10]:
        print(f"  {tag}: {count}")

    show_count = max(0, args.show or 0)
    if show_count:
        print("\nSample entries:")
        for root in roots[:show_count]:
            print(f"- {root.word.strip()} [{', '.join(tag.value for tag in root.tags)}]")
            print(f"    forms: {', '.join(root.possible_words)}")
            if root.gloss:
                print(f"    gloss: {root.gloss}")

    if args.output:
        _export_results(args.output, roots)
        print(f"\nSaved detailed results to {args.output}")


if __name__ == "__main__":
    main()
