"""
SHIFTCRACK - Caesar shift cipher (rotation over the 26-letter Latin alphabet).
"""

from typing import Optional

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def normalize_shift(shift: int) -> int:
    """Reduce any integer shift into 0-25 (negative shifts wrap around)."""
    return shift % ALPHABET_SIZE


def letter_index(ch: str) -> Optional[int]:
    """Alphabet index of an ASCII letter (case-insensitive), None for anything else."""
    return _INDEX.get(ch.lower()) if ch.isascii() else None


def rotate(text: str, shift: int) -> str:
    """Rotate every ASCII letter by shift; letters come out lowercase, the rest unchanged."""
    shift = normalize_shift(shift)
    out = []
    for c in text:
        idx = letter_index(c)
        if idx is None:
            out.append(c)
        else:
            out.append(ALPHABET[(idx + shift) % ALPHABET_SIZE])
    return "".join(out)


def encrypt(text: str, shift: int) -> str:
    return rotate(text, shift)


def decrypt(text: str, shift: int) -> str:
    return rotate(text, -shift)
