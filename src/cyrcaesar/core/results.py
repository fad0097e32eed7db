from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True, order=True)
class SolveResult:
    # sort_index comes first so dataclass ordering uses it automatically
    sort_index: tuple[float, int] = field(init=False, repr=False)

    cipher_name: str
    plaintext: str
    key: Optional[int] = None

    # Higher is better
    score: float = 0.0

    # Euclidean distance between frequency vectors; lower is better
    distance: Optional[float] = None

    notes: str = ""

    def __post_init__(self) -> None:
        # Ascending order: best score first, then the lowest key.
        key = self.key if self.key is not None else -1
        object.__setattr__(self, "sort_index", (-self.score, key))

    def to_dict(self) -> dict[str, Any]:
        return {
            "cipher_name": self.cipher_name,
            "plaintext": self.plaintext,
            "key": self.key,
            "score": self.score,
            "distance": self.distance,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class TextFeatures:
    length: int
    alphabet_chars: int  # characters that belong to the cipher alphabet
    unique_chars: int
    alphabet_ratio: float
    foreign_chars: int  # characters passed through unchanged by the cipher

    def to_dict(self) -> dict[str, Any]:
        return {
            "length": self.length,
            "alphabet_chars": self.alphabet_chars,
            "unique_chars": self.unique_chars,
            "alphabet_ratio": self.alphabet_ratio,
            "foreign_chars": self.foreign_chars,
        }
