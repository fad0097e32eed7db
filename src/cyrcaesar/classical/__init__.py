from __future__ import annotations

from .caesar import CaesarCipher
from .common import (
    ALPHABET,
    ALPHABET_INDEX,
    ALPHABET_SIZE,
    decrypt_text,
    encrypt_text,
    parse_key,
    shift_char,
    shift_text,
)

__all__ = [
    "ALPHABET",
    "ALPHABET_INDEX",
    "ALPHABET_SIZE",
    "CaesarCipher",
    "decrypt_text",
    "encrypt_text",
    "parse_key",
    "shift_char",
    "shift_text",
]
