"""Validation of fully resolved patterns."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .model import Symbol


def run_lengths(resolved: Iterable[Symbol]) -> List[int]:
    """Lengths of the maximal damaged runs, left to right."""
    runs = []
    current = 0
    for s in resolved:
        if s is Symbol.UNKNOWN:
            raise ValueError("resolution still contains unknown springs")
        if s is Symbol.DAMAGED:
            current += 1
        elif current:
            runs.append(current)
            current = 0
    if current:
        runs.append(current)
    return runs


def satisfies(resolved: Iterable[Symbol], groups: Sequence[int]) -> bool:
    return run_lengths(resolved) == list(groups)


def apply_constraints(
    resolutions: Iterable[Sequence[Symbol]], groups: Sequence[int]
) -> list[Sequence[Symbol]]:
    """Filter resolutions that match every group.

    This checks whole resolutions only; the search in ``search`` prunes
    partial ones as it goes.
    """
    result = []
    for r in resolutions:
        if satisfies(r, groups):
            result.append(r)
    return result
