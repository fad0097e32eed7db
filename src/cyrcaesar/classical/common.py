from __future__ import annotations

from typing import Dict, Union

from cyrcaesar.core.errors import InvalidKeyError

# 30 lowercase Cyrillic letters (no ё, й, ю), then punctuation and space.
ALPHABET = "абвгдежзиклмнопрстуфхцчшщъыьэя.,«»\"':!? "
ALPHABET_SIZE = len(ALPHABET)
if ALPHABET_SIZE != 40:
    raise RuntimeError(f"ALPHABET must be exactly 40 symbols (got {ALPHABET_SIZE})")

ALPHABET_INDEX: Dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}


def in_alphabet(ch: str) -> bool:
    return ch in ALPHABET_INDEX


def shift_char(ch: str, shift: int) -> str:
    """Shift one alphabet symbol by 'shift' (can be negative); others pass through."""
    idx = ALPHABET_INDEX.get(ch)
    if idx is None:
        return ch
    return ALPHABET[(idx + shift) % ALPHABET_SIZE]


def shift_text(text: str, shift: int) -> str:
    return "".join(shift_char(ch, shift) for ch in text)


def encrypt_text(text: str, key: int) -> str:
    return shift_text(text, key)


def decrypt_text(text: str, key: int) -> str:
    return shift_text(text, -key)


def parse_key(key: Union[int, str]) -> int:
    """
    Parse and validate a shift key.
    Accepts an int or a string like " 7 "; the key must lie in 0..ALPHABET_SIZE-1.
    """
    if isinstance(key, bool):
        raise InvalidKeyError(f"Key must be an integer, got {key!r}.")
    if isinstance(key, int):
        k = key
    else:
        try:
            k = int(str(key).strip())
        except ValueError as e:
            raise InvalidKeyError(f"Key must be an integer, got {key!r}.") from e

    if k < 0 or k >= ALPHABET_SIZE:
        raise InvalidKeyError(f"Key must be between 0 and {ALPHABET_SIZE - 1}")
    return k
