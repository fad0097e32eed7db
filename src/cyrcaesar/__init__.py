from .engine import (
    BRUTE_FORCE_FAILED,
    brute_force_file,
    decrypt_file,
    encrypt_file,
    statistical_file,
)

__version__ = "0.1.0"

__all__ = [
    "BRUTE_FORCE_FAILED",
    "brute_force_file",
    "decrypt_file",
    "encrypt_file",
    "statistical_file",
]
