"""Pruned search over the resolutions of a condition record."""

from __future__ import annotations

import itertools
import logging
from collections import Counter
from typing import Callable, Dict, Iterable, List, Sequence

from .constraints import apply_constraints
from .model import Record, Symbol
from .state import ResolutionState

logger = logging.getLogger(__name__)

_CHOICES = (Symbol.DAMAGED, Symbol.OPERATIONAL)

Strategy = Callable[[Record], int]

STRATEGY_REGISTRY: Dict[str, Strategy] = {}


def register_strategy(name: str) -> Callable[[Strategy], Strategy]:
    def decorator(fn: Strategy) -> Strategy:
        STRATEGY_REGISTRY[name] = fn
        return fn
    return decorator


def successors(
    state: ResolutionState,
    symbol: Symbol,
    groups: Sequence[int],
    *,
    track_prefix: bool = True,
) -> List[ResolutionState]:
    """Live states reachable from ``state`` by resolving ``symbol``.

    An unknown spring forks into a damaged and an operational child; dead
    children are dropped.
    """
    choices = _CHOICES if symbol is Symbol.UNKNOWN else (symbol,)
    children = []
    for choice in choices:
        child = state.extend(choice, groups, track_prefix=track_prefix)
        if child.is_valid(groups, partial=True):
            children.append(child)
        elif logger.isEnabledFor(logging.DEBUG):
            logger.debug("dropped %s", child)
    return children


def explore(record: Record, *, track_prefix: bool = True) -> List[ResolutionState]:
    """Run the whole pattern through the automaton.

    Returns the states that are still live after the last spring; they have
    not been checked for completeness yet.
    """
    groups = record.groups
    states = [ResolutionState()]
    for position, symbol in enumerate(record.pattern):
        states = [
            child
            for state in states
            for child in successors(state, symbol, groups, track_prefix=track_prefix)
        ]
        if not states:
            logger.debug("no live states left at %d/%d", position, len(record.pattern))
            return []
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%d/%d: |states| = %d", position, len(record.pattern), len(states))
    return states


@register_strategy("expand")
def count_expanded(record: Record) -> int:
    """Count by keeping one state per partial resolution."""
    states = explore(record, track_prefix=False)
    return sum(1 for s in states if s.is_valid(record.groups, partial=False))


@register_strategy("merged")
def count_merged(record: Record) -> int:
    """Count while merging equivalent states.

    Two states at the same position with equal run length and group index
    behave identically from here on, so only their multiplicity is kept.
    """
    groups = record.groups
    live: Counter[ResolutionState] = Counter({ResolutionState(): 1})
    for position, symbol in enumerate(record.pattern):
        following: Counter[ResolutionState] = Counter()
        for state, count in live.items():
            for child in successors(state, symbol, groups, track_prefix=False):
                following[child] += count
        if not following:
            logger.debug("no live states left at %d/%d", position, len(record.pattern))
            return 0
        live = following
    return sum(count for state, count in live.items() if state.is_valid(groups, partial=False))


@register_strategy("exhaustive")
def count_exhaustive(record: Record) -> int:
    """Count by validating every possible resolution (2**unknowns of them)."""
    positions = [i for i, s in enumerate(record.pattern) if s is Symbol.UNKNOWN]

    def resolutions():
        for choice in itertools.product(_CHOICES, repeat=len(positions)):
            resolved = list(record.pattern)
            for i, s in zip(positions, choice):
                resolved[i] = s
            yield resolved

    return len(apply_constraints(resolutions(), record.groups))


def num_arrangements(record: Record, strategy: str = "merged") -> int:
    """Number of ways to resolve the unknown springs of ``record``."""
    try:
        count = STRATEGY_REGISTRY[strategy]
    except KeyError:
        raise ValueError(
            f"unknown strategy {strategy!r}, expected one of {sorted(STRATEGY_REGISTRY)}"
        ) from None
    return count(record)


def arrangements(record: Record) -> List[str]:
    """Every valid resolution of ``record``, damaged branches first."""
    states = explore(record, track_prefix=True)
    return [s.prefix for s in states if s.is_valid(record.groups, partial=False)]


def total_arrangements(
    records: Iterable[Record], repeat: int = 1, strategy: str = "merged"
) -> int:
    total = 0
    for record in records:
        result = num_arrangements(record.repeat(repeat), strategy)
        logger.debug("%s (x%d): %d arrangements", record, repeat, result)
        total += result
    return total
