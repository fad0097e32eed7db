from __future__ import annotations

import logging
from typing import Optional

from cyrcaesar.classical.common import (
    ALPHABET_SIZE,
    decrypt_text,
    encrypt_text,
    parse_key,
)
from cyrcaesar.core.errors import MissingSampleError
from cyrcaesar.core.features import euclidean_distance, frequency_vector
from cyrcaesar.core.results import SolveResult

logger = logging.getLogger(__name__)


class CaesarCipher:
    name = "caesar"

    def encrypt(self, plaintext: str, key: int | str) -> str:
        return encrypt_text(plaintext, parse_key(key))

    def decrypt(self, ciphertext: str, key: int | str) -> str:
        return decrypt_text(ciphertext, parse_key(key))

    def crack(self, ciphertext: str) -> list[SolveResult]:
        out: list[SolveResult] = []
        for k in range(ALPHABET_SIZE):
            out.append(
                SolveResult(
                    cipher_name=self.name,
                    plaintext=decrypt_text(ciphertext, k),
                    key=k,
                    notes=f"Caesar shift {k}",
                )
            )
        return out

    def brute_force(self, ciphertext: str, sample: Optional[str]) -> Optional[SolveResult]:
        """
        Try every key from 0 upwards and return the first decryption that
        contains 'sample'. None when there is no sample or nothing matches.
        """
        if not sample:
            logger.info("Brute force skipped: no sample text")
            return None

        for k in range(ALPHABET_SIZE):
            pt = decrypt_text(ciphertext, k)
            if sample in pt:
                logger.info("Brute force matched sample with key %d", k)
                return SolveResult(
                    cipher_name=self.name,
                    plaintext=pt,
                    key=k,
                    score=1.0,
                    notes="sample found in plaintext",
                )

        logger.info("Brute force found no key among %d candidates", ALPHABET_SIZE)
        return None

    def rank_keys(self, ciphertext: str, sample: str) -> list[SolveResult]:
        """
        Every key scored by the Euclidean distance between the frequency
        vector of its decryption and that of 'sample', closest first.
        """
        sample_vec = frequency_vector(sample)
        if not any(sample_vec):
            raise MissingSampleError("Sample text contains no alphabet symbols.")

        out: list[SolveResult] = []
        for k in range(ALPHABET_SIZE):
            pt = decrypt_text(ciphertext, k)
            dist = euclidean_distance(sample_vec, frequency_vector(pt))
            logger.debug("key=%2d distance=%.6f", k, dist)
            out.append(
                SolveResult(
                    cipher_name=self.name,
                    plaintext=pt,
                    key=k,
                    score=-dist,
                    distance=dist,
                    notes=f"frequency distance {dist:.6f}",
                )
            )

        # sort_index is (-score, key): ties resolve to the lowest key
        return sorted(out)

    def statistical(self, ciphertext: str, sample: Optional[str]) -> SolveResult:
        """Decryption whose symbol frequencies are closest to those of 'sample'."""
        if not sample:
            raise MissingSampleError("Sample file is required for statistical analysis.")

        best = self.rank_keys(ciphertext, sample)[0]
        logger.info("Statistical analysis chose key %d (distance %.6f)", best.key, best.distance)
        return best
