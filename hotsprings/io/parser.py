from __future__ import annotations

import re
from typing import List

from hotsprings.core.exceptions import ParseError
from hotsprings.core.model import Groups, Pattern, Record, Symbol

_GROUP_RE = re.compile(r"[0-9]+")


def parse_pattern(text: str) -> Pattern:
    try:
        return tuple(Symbol(c) for c in text)
    except ValueError as exc:
        raise ParseError("pattern", text, "expected only '.', '#' and '?'") from exc


def parse_groups(text: str) -> Groups:
    groups = []
    for entry in text.split(","):
        if not _GROUP_RE.fullmatch(entry):
            raise ParseError("groups", text, f"{entry!r} is not a group length")
        value = int(entry)
        if value < 1:
            raise ParseError("groups", text, "group lengths must be positive")
        groups.append(value)
    return tuple(groups)


def parse_record(line: str) -> Record:
    """Decode a record such as ``"???.### 1,1,3"``."""
    # Only trailing whitespace is dropped; a leading space marks an empty pattern.
    pattern, sep, groups = line.rstrip().partition(" ")
    if not sep or not groups.strip():
        raise ParseError("groups", line, "missing group list after the pattern")
    return Record(parse_pattern(pattern), parse_groups(groups.strip()))


def parse_records(text: str) -> List[Record]:
    """Decode one record per non-blank line."""
    records = []
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            records.append(parse_record(line))
        except ParseError as exc:
            raise ParseError(exc.part, exc.text, f"line {number}: {exc.reason}") from exc
    return records
