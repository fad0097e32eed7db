"""
File-level operations: each reads one input file fully, transforms it in
memory and writes (overwrites) one output file.

Validation (existing input file, key range, required sample) always runs
before anything is read or written.
"""
from __future__ import annotations

import logging
from typing import Optional

from cyrcaesar.classical.caesar import CaesarCipher
from cyrcaesar.classical.common import parse_key
from cyrcaesar.core.errors import MissingSampleError
from cyrcaesar.core.fileio import DEFAULT_ENCODING, PathLike, read_text, require_file, write_text
from cyrcaesar.core.results import SolveResult

logger = logging.getLogger(__name__)

BRUTE_FORCE_FAILED = "Brute force failed to find the correct key."

_CIPHER = CaesarCipher()


def _validate_input(input_file: PathLike, key: int | str) -> int:
    require_file(input_file)
    return parse_key(key)


def encrypt_file(
    input_file: PathLike,
    output_file: PathLike,
    key: int | str,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    k = _validate_input(input_file, key)
    content = read_text(input_file, encoding)
    write_text(output_file, _CIPHER.encrypt(content, k), encoding)
    logger.info("Encrypted %s -> %s with key %d", input_file, output_file, k)


def decrypt_file(
    input_file: PathLike,
    output_file: PathLike,
    key: int | str,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    k = _validate_input(input_file, key)
    content = read_text(input_file, encoding)
    write_text(output_file, _CIPHER.decrypt(content, k), encoding)
    logger.info("Decrypted %s -> %s with key %d", input_file, output_file, k)


def _read_sample(sample_file: Optional[PathLike], encoding: str) -> Optional[str]:
    # An empty path string means "no sample", as entered at the menu prompt.
    if sample_file is None or str(sample_file) == "":
        return None
    require_file(sample_file)
    return read_text(sample_file, encoding)


def brute_force_file(
    input_file: PathLike,
    output_file: PathLike,
    sample_file: Optional[PathLike] = None,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> Optional[int]:
    """
    Write the first decryption containing the sample text and return its key.
    Without a sample or a match, the output file receives BRUTE_FORCE_FAILED
    and None is returned.
    """
    require_file(input_file)
    sample = _read_sample(sample_file, encoding)
    content = read_text(input_file, encoding)

    found = _CIPHER.brute_force(content, sample)
    if found is None:
        write_text(output_file, BRUTE_FORCE_FAILED, encoding)
        return None

    write_text(output_file, found.plaintext, encoding)
    return found.key


def rank_file(
    input_file: PathLike,
    sample_file: Optional[PathLike],
    *,
    encoding: str = DEFAULT_ENCODING,
) -> list[SolveResult]:
    require_file(input_file)
    sample = _read_sample(sample_file, encoding)
    if not sample:
        raise MissingSampleError("Sample file is required for statistical analysis.")
    return _CIPHER.rank_keys(read_text(input_file, encoding), sample)


def statistical_file(
    input_file: PathLike,
    output_file: PathLike,
    sample_file: Optional[PathLike],
    *,
    encoding: str = DEFAULT_ENCODING,
) -> int:
    """Recover the key by frequency distance to the sample, write the decryption, return the key."""
    require_file(input_file)
    sample = _read_sample(sample_file, encoding)
    if not sample:
        raise MissingSampleError("Sample file is required for statistical analysis.")

    best = _CIPHER.statistical(read_text(input_file, encoding), sample)
    write_text(output_file, best.plaintext, encoding)
    return best.key
