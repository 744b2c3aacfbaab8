"""
Name Parser
===========
Turns free text returned by the model into (name, meaning) pairs.

Expected line format is "Name - Meaning", optionally numbered:
    1. Nuvia - Fresh and new beginnings
    3) Glim - Quick spark of light
Anything else is ignored.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List

SEPARATOR = " - "
NAME_DISPLAY_LIMIT = 32

# "12." / "3)" list numbering or a "- " bullet in front of the name
NUMBERING_PREFIX = re.compile(r"^(?:\d+[.)]\s*|[-•]\s+)")
# Markdown emphasis and quotes small models like to wrap names in
NAME_WRAPPERS = "*_\"'`"


@dataclass(frozen=True)
class NameCandidate:
    """A generated name. Identity is the lowercased name, meaning is not part of it."""
    name: str
    meaning: str

    @property
    def key(self) -> str:
        return self.name.lower()


def parse_line(line: str):
    """Parse a single line, returns None when the line is not a name entry"""
    line = line.strip()
    if SEPARATOR not in line:
        return None

    raw_name, meaning = line.split(SEPARATOR, 1)
    # wrappers can sit outside the numbering ("**1. Nova**") or inside it ("1. **Nova**")
    name = raw_name.strip().strip(NAME_WRAPPERS).strip()
    name = NUMBERING_PREFIX.sub("", name)
    name = name.strip().strip(NAME_WRAPPERS).strip()
    meaning = meaning.strip()

    if not name or not meaning:
        return None
    if len(name) > NAME_DISPLAY_LIMIT:
        return None
    return NameCandidate(name=name, meaning=meaning)


class ParsedNames:
    """
    Lazy view over the candidates in a model response.

    Iterating twice walks the text twice, so callers can consume it more than
    once without caching the list themselves.
    """

    def __init__(self, raw_text: str):
        self.raw_text = raw_text or ""

    def __iter__(self) -> Iterator[NameCandidate]:
        for line in self.raw_text.splitlines():
            candidate = parse_line(line)
            if candidate is not None:
                yield candidate


def parse_names(raw_text: str) -> ParsedNames:
    return ParsedNames(raw_text)


def dedupe_candidates(candidates: Iterable[NameCandidate]) -> List[NameCandidate]:
    """Drop repeated names (case-insensitive), first occurrence wins"""
    seen = set()
    unique = []
    for candidate in candidates:
        if candidate.key in seen:
            continue
        seen.add(candidate.key)
        unique.append(candidate)
    return unique
