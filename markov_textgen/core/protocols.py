# markov_textgen/core/protocols.py
"""
Protocol interfaces for the collaborators the LanguageModel talks to.

The model never opens files or owns global random state itself; it depends on
these small interfaces so tests can feed it strings and seeded generators.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable
from typing_extensions import TypedDict


# Typed structures -----------------------------------------------------------

class DistributionRow(TypedDict):
    """
    One line of a model dump: a single (context, next char) observation.

    Example:
      {"context": "ab", "chr": "a", "count": 3, "p": 0.75, "cp": 0.75}
    """
    context: str
    chr: str
    count: int
    p: Optional[float]
    cp: Optional[float]


# Protocols ------------------------------------------------------------------

@runtime_checkable
class CharacterSource(Protocol):
    """Sequential supplier of characters, consumed once by the trainer."""

    def is_exhausted(self) -> bool:
        ...

    def read_char(self) -> str:
        """
        Return the next character.
        Raises SourceExhaustedError when called after exhaustion.
        """
        ...


class RandomSource(Protocol):
    """Anything with random.Random's random() method."""

    def random(self) -> float:
        """Uniform draw in [0.0, 1.0)."""
        ...
