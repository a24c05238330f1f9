"""
SHIFTCRACK - Known-plaintext attack on the Caesar cipher.
"""

import math
from typing import Optional
from loguru import logger

from ciphers.caesar import ALPHABET_SIZE, letter_index


def deduce_key(plaintext: str, ciphertext: str) -> Optional[int]:
    """Deduce the shift from aligned plaintext/ciphertext samples.

    Returns None when either sample is empty or the lengths differ. The
    index differences of letter pairs are averaged over the full sample
    length (non-letter positions add 0 but still count), reduced mod 26 and
    rounded. Exact for clean text under a single shift; approximate otherwise.
    """
    if not plaintext or not ciphertext or len(plaintext) != len(ciphertext):
        return None

    total = 0
    for plain_char, shifted_char in zip(plaintext, ciphertext):
        original_idx = letter_index(plain_char)
        shifted_idx = letter_index(shifted_char)
        if original_idx is None or shifted_idx is None:
            logger.debug(f"Skipping pair {plain_char!r}/{shifted_char!r}: not in alphabet")
            continue
        total += shifted_idx - original_idx

    avg_key = (total / len(plaintext)) % ALPHABET_SIZE
    key = math.floor(avg_key + 0.5) % ALPHABET_SIZE
    logger.debug(f"Known-plaintext: sum {total}, average mod 26 {avg_key:.3f}, key {key}")
    return key
