from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Index:
    """Position in a displayed list.

    Stored zero-based; users see and type one-based positions.
    """

    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            raise ValueError(f"Index cannot be negative: {self.zero_based}")

    @classmethod
    def from_zero_based(cls, zero_based: int) -> Index:
        return cls(zero_based)

    @classmethod
    def from_one_based(cls, one_based: int) -> Index:
        if one_based < 1:
            raise ValueError(f"One-based index must be at least 1: {one_based}")
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1
