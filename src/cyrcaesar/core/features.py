from __future__ import annotations

import math
from collections import Counter
from typing import Mapping, Sequence, Union

from cyrcaesar.classical.common import ALPHABET, ALPHABET_INDEX, in_alphabet

from .results import TextFeatures

FrequencyVector = tuple[float, ...]


def frequency_map(text: str) -> Counter[str]:
    """Occurrence count of every character in text, alphabet or not."""
    return Counter(text)


def frequency_vector(source: Union[str, Mapping[str, int]]) -> FrequencyVector:
    """
    Normalized symbol distribution, index-aligned to ALPHABET.

    Only alphabet symbols take part in the normalization, so the entries sum
    to 1. A text without any alphabet symbol gives the all-zero vector.
    """
    counts = frequency_map(source) if isinstance(source, str) else source
    raw = [counts.get(ch, 0) for ch in ALPHABET]
    total = sum(raw)
    if total == 0:
        return tuple(0.0 for _ in ALPHABET)
    return tuple(c / total for c in raw)


def euclidean_distance(v1: Sequence[float], v2: Sequence[float]) -> float:
    if len(v1) != len(v2):
        raise ValueError(f"Vectors differ in length: {len(v1)} != {len(v2)}")
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(v1, v2)))


def frequency_table(text: str) -> list[tuple[str, int, float]]:
    """
    (symbol, count, share) for every alphabet symbol that occurs in text,
    most frequent first; equal counts keep alphabet order.
    """
    counts = frequency_map(text)
    vec = frequency_vector(counts)
    rows = [(ch, counts[ch], vec[i]) for i, ch in enumerate(ALPHABET) if counts.get(ch, 0)]
    return sorted(rows, key=lambda r: (-r[1], ALPHABET_INDEX[r[0]]))


def analyze_text(text: str) -> dict:
    counts = frequency_map(text)
    n = len(text)
    in_alpha = sum(c for ch, c in counts.items() if in_alphabet(ch))

    feats = TextFeatures(
        length=n,
        alphabet_chars=in_alpha,
        unique_chars=len(counts),
        alphabet_ratio=(in_alpha / n) if n else 0.0,
        foreign_chars=n - in_alpha,
    )
    return feats.to_dict()
