"""
Next-character distributions.

A ``Distribution`` holds, for one window of the language model, every
character that was seen following that window together with its count.
After training it is normalized, which fills in each entry's probability
and cumulative probability so the distribution can be sampled by inverse CDF.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class CharFrequency:
    """
    One observed next character.

    Attributes:
        character: The character that followed the window
        count: Number of times it followed the window
        probability: count / total, set by ``Distribution.normalize``
        cumulative_probability: Running sum of probabilities up to this entry
    """
    character: str
    count: int = 0
    probability: float | None = None
    cumulative_probability: float | None = None

    def __str__(self) -> str:
        return f"({self.character} {self.count} {self.probability} {self.cumulative_probability})"


class Distribution:
    """Ordered next-character frequency table for a single window."""

    def __init__(self) -> None:
        # first-observed order matters for sampling
        self._entries: list[CharFrequency] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CharFrequency]:
        return iter(self._entries)

    def __str__(self) -> str:
        return " ".join(str(entry) for entry in self._entries)

    @property
    def total(self) -> int:
        return sum(entry.count for entry in self._entries)

    def get(self, character: str) -> CharFrequency | None:
        for entry in self._entries:
            if entry.character == character:
                return entry
        return None

    def record_observation(self, character: str) -> None:
        """Count one more occurrence of ``character`` after this window."""
        entry = self.get(character)
        if entry is None:
            entry = CharFrequency(character=character)
            self._entries.append(entry)
        entry.count += 1

    def normalize(self) -> None:
        """Turn the accumulated counts into probabilities and cumulative probabilities."""
        if not self._entries:
            return

        total = self.total
        cumulative = 0.0
        for entry in self._entries:
            entry.probability = entry.count / total
            cumulative += entry.probability
            entry.cumulative_probability = cumulative

    def sample(self, uniform_draw: float) -> str:
        """
        Pick a character using a uniform draw in [0, 1).

        Returns the first entry whose cumulative probability exceeds the draw.
        Rounding can leave the last cumulative value just under 1.0, in which
        case the first entry is returned.
        """
        if not self._entries:
            raise ValueError("cannot sample from an empty distribution")
        if any(entry.cumulative_probability is None for entry in self._entries):
            raise ValueError("distribution must be normalized before sampling")

        for entry in self._entries:
            if entry.cumulative_probability > uniform_draw:
                return entry.character
        return self._entries[0].character
