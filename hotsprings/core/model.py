from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class Symbol(str, Enum):
    """Condition of a single spring in a record."""
    OPERATIONAL = "."
    DAMAGED = "#"
    UNKNOWN = "?"


Pattern = Tuple[Symbol, ...]
Groups = Tuple[int, ...]


@dataclass(frozen=True)
class Record:
    """A condition record: springs to resolve and the damaged group sizes."""
    pattern: Pattern
    groups: Groups

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", tuple(Symbol(s) for s in self.pattern))
        object.__setattr__(self, "groups", tuple(self.groups))
        if any(isinstance(g, bool) or not isinstance(g, int) for g in self.groups):
            raise ValueError(f"group lengths must be integers: {self.groups}")
        if any(g < 1 for g in self.groups):
            raise ValueError(f"group lengths must be positive: {self.groups}")

    def __str__(self) -> str:
        pattern = "".join(s.value for s in self.pattern)
        return f"{pattern} {','.join(str(g) for g in self.groups)}"

    @property
    def unknowns(self) -> int:
        return sum(1 for s in self.pattern if s is Symbol.UNKNOWN)

    def repeat(self, n: int) -> Record:
        """Unfold the record ``n`` times.

        Copies of the pattern are joined by a single unknown spring and the
        group list is repeated as is.
        """
        if n < 1:
            raise ValueError(f"repeat factor must be at least 1, got {n}")
        pattern: List[Symbol] = []
        for i in range(n):
            if i:
                pattern.append(Symbol.UNKNOWN)
            pattern.extend(self.pattern)
        return Record(tuple(pattern), self.groups * n)
