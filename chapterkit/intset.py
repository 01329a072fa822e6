"""A set of small non-negative integers backed by a bit vector."""

from __future__ import annotations

from dataclasses import dataclass, field

_WORD = 64


@dataclass
class IntSet:
    """A set of small non-negative integers; the default is the empty set."""

    words: list[int] = field(default_factory=list)

    @staticmethod
    def _locate(x: int) -> tuple[int, int]:
        if x < 0:
            raise ValueError(f"IntSet holds non-negative values only, got {x}")
        return divmod(x, _WORD)

    def has(self, x: int) -> bool:
        """Report whether the set contains x."""
        word, bit = self._locate(x)
        return word < len(self.words) and bool(self.words[word] & (1 << bit))

    __contains__ = has

    def add(self, x: int) -> None:
        """Add x to the set."""
        word, bit = self._locate(x)
        if word >= len(self.words):
            self.words.extend([0] * (word + 1 - len(self.words)))
        self.words[word] |= 1 << bit

    def union_with(self, other: IntSet) -> None:
        """Set this set to the union of itself and other."""
        for i, tword in enumerate(other.words):
            if i < len(self.words):
                self.words[i] |= tword
            else:
                self.words.append(tword)

    def __iter__(self):
        for i, word in enumerate(self.words):
            for j in range(_WORD):
                if word & (1 << j):
                    yield _WORD * i + j

    def __str__(self) -> str:
        return "{" + " ".join(str(x) for x in self) + "}"