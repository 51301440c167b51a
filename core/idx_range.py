"""Index range representation used by the windowing helpers."""

from dataclasses import dataclass
from typing import Dict, Iterator


@dataclass(frozen=True)
class IdxRange:
    """Half-open range of indexes in a larger collection.

    `low` is inclusive, `high` is exclusive.
    """

    low: int
    high: int

    @property
    def width(self) -> int:
        return self.high - self.low

    def as_slice(self) -> slice:
        """Return the range as a slice usable on any sequence."""
        return slice(self.low, self.high)

    def as_dict(self) -> Dict[str, int]:
        return {"low": self.low, "high": self.high}

    def __iter__(self) -> Iterator[int]:
        # allows `low, high = rng`
        yield self.low
        yield self.high

    def __str__(self) -> str:
        return f"{{{self.low}, {self.high}}}"
