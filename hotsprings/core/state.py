"""Resolution states and the incremental constraint check."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence

from .model import Symbol


def _group_at(groups: Sequence[int], index: int) -> Optional[int]:
    if index < len(groups):
        return groups[index]
    return None


@dataclass(frozen=True)
class ResolutionState:
    """Immutable snapshot of a partially resolved pattern.

    ``run_length`` is the size of the damaged run ending at the last resolved
    spring, so it is non-zero exactly when that spring is damaged.
    ``group_index`` points at the group the open run (or the next run) has to
    match. A dead state has violated the groups and can never recover.
    """
    prefix: str = ""
    run_length: int = 0
    group_index: int = 0
    dead: bool = False

    def __str__(self) -> str:
        return (
            f"{self.prefix!r} (run = {self.run_length}, group = {self.group_index}, "
            f"dead = {self.dead})"
        )

    def extend(
        self, symbol: Symbol, groups: Sequence[int], *, track_prefix: bool = True
    ) -> ResolutionState:
        """Return the state after resolving one more spring to ``symbol``."""
        if self.dead:
            raise RuntimeError(f"cannot extend dead state {self}")
        if symbol is Symbol.UNKNOWN:
            raise ValueError("states can only be extended with a concrete symbol")

        prefix = self.prefix + symbol.value if track_prefix else self.prefix

        if symbol is Symbol.OPERATIONAL:
            if not self.run_length:
                return replace(self, prefix=prefix)
            # The open run closes here and has to match its group exactly.
            if _group_at(groups, self.group_index) != self.run_length:
                return replace(self, prefix=prefix, dead=True)
            return ResolutionState(prefix, 0, self.group_index + 1)

        run_length = self.run_length + 1
        expected = _group_at(groups, self.group_index)
        dead = expected is None or run_length > expected
        return ResolutionState(prefix, run_length, self.group_index, dead)

    def is_valid(self, groups: Sequence[int], partial: bool = True) -> bool:
        """Check the state against ``groups``.

        A partial check accepts anything that could still be completed; a full
        check requires every group to be matched with nothing left over.
        """
        if self.dead:
            return False
        if partial:
            return True
        if self.run_length:
            return (
                self.group_index == len(groups) - 1
                and groups[self.group_index] == self.run_length
            )
        return self.group_index == len(groups)
