# char_data.py
# Frequency records and the per-context distributions built from them.
# A distribution keeps its records in first-seen order; that order is what
# the cumulative probabilities (and so the sampler) walk through.

from __future__ import annotations
from typing import Dict, Iterator, List, Optional

from .errors import ModelStateError


class CharData:
    """
    One observed next character for some context.
    chr: the character
    count: how many times it followed the context during training
    p: count / total for the context (None until finalized)
    cp: running sum of p up to and including this record (None until finalized)
    """

    __slots__ = ("chr", "count", "p", "cp")

    def __init__(self, ch: str, count: int = 0) -> None:
        self.chr = ch
        self.count = count
        self.p: Optional[float] = None
        self.cp: Optional[float] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharData):
            return NotImplemented
        return (self.chr, self.count, self.p, self.cp) == (
            other.chr, other.count, other.p, other.cp
        )

    def __repr__(self) -> str:
        return f"CharData({self.chr!r}, count={self.count}, p={self.p}, cp={self.cp})"

    def __str__(self) -> str:
        return f"({self.chr} {self.count} {self.p} {self.cp})"


class CharDistribution:
    """
    Ordered CharData records for a single context.
    Each character appears at most once; repeated observations bump its count.
    Frozen once its probabilities are computed.
    """

    def __init__(self) -> None:
        self._records: List[CharData] = []
        self._index: Dict[str, int] = {}
        self._frozen = False

    # updates ---------------------------------------------------------
    def update(self, ch: str) -> CharData:
        """Count one more occurrence of `ch`, appending a record if it is new."""
        if self._frozen:
            raise ModelStateError("distribution is finalized and read-only")
        i = self._index.get(ch)
        if i is None:
            rec = CharData(ch)
            self._index[ch] = len(self._records)
            self._records.append(rec)
        else:
            rec = self._records[i]
        rec.count += 1
        return rec

    def freeze(self) -> None:
        self._frozen = True

    # lookups ---------------------------------------------------------
    def get(self, ch: str) -> Optional[CharData]:
        i = self._index.get(ch)
        return None if i is None else self._records[i]

    def index_of(self, ch: str) -> int:
        """Position of `ch` in first-seen order, -1 if never seen."""
        return self._index.get(ch, -1)

    def total_count(self) -> int:
        return sum(rec.count for rec in self._records)

    @property
    def is_finalized(self) -> bool:
        return bool(self._records) and self._records[-1].cp is not None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CharData]:
        return iter(self._records)

    def __contains__(self, ch: object) -> bool:
        return ch in self._index

    def __str__(self) -> str:
        return " ".join(str(rec) for rec in self._records)

    def __repr__(self) -> str:
        return f"CharDistribution({self})"
