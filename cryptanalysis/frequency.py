"""
SHIFTCRACK - Frequency analysis (ciphertext-only attack) for the Caesar cipher.

Each of the 26 shifts is tried: the ciphertext is decrypted, its letter
frequencies are profiled and compared against an English model with phi().
Candidates are ranked ascending by phi, so the first entry is the most
English-like decryption.

The English model follows D. Denning, S. Akl, M. Heckman, T. Lunt,
M. Morgenstern, P. Neumann and R. Schell, "Views for Multilevel Database
Security", IEEE Transactions on Software Engineering 13 (2), pp. 129-140
(Feb. 1987).
"""

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional
from loguru import logger

from ciphers.caesar import ALPHABET_SIZE, decrypt, letter_index
from core.config import settings
from core.models import AnalysisReport, ShiftCandidate
from cryptanalysis.errors import EmptyInputError, UnknownSymbolError

ENGLISH_MODEL: Mapping[str, float] = MappingProxyType({
    "a": 0.080, "b": 0.015, "c": 0.030, "d": 0.040, "e": 0.130,
    "f": 0.020, "g": 0.015, "h": 0.060, "i": 0.065, "j": 0.005,
    "k": 0.005, "l": 0.035, "m": 0.030, "n": 0.070, "o": 0.080,
    "p": 0.020, "q": 0.002, "r": 0.065, "s": 0.060, "t": 0.090,
    "u": 0.030, "v": 0.010, "w": 0.015, "x": 0.005, "y": 0.020,
    "z": 0.002,
})


def reference_frequency(letter: str) -> float:
    """English frequency of a letter (case-insensitive)."""
    try:
        return ENGLISH_MODEL[letter.lower()]
    except KeyError:
        raise UnknownSymbolError(letter) from None


def letter_frequency(text: str, strict: bool = False) -> Dict[str, float]:
    """Relative frequency of each ASCII letter in text, lowercased.

    Non-letters are ignored entirely. Only letters that occur are keys.
    Text without letters gives {} (or EmptyInputError when strict).
    """
    counts = Counter(c.lower() for c in text if letter_index(c) is not None)
    total = sum(counts.values())
    if not total:
        if strict:
            raise EmptyInputError()
        return {}
    return {k: v / total for k, v in counts.items()}


def phi(frequencies: Mapping[str, float]) -> float:
    """Signed deviation of a profile from the English model.

    Sums profile[letter] - english[letter] over the letters present in the
    profile only. Differences are not squared or made absolute, so they can
    cancel; letters missing from the profile add nothing.
    """
    total = 0.0
    for letter, freq in frequencies.items():
        total += freq - reference_frequency(letter)
    return total


def _score_shift(ciphertext: str, shift: int) -> ShiftCandidate:
    plaintext = decrypt(ciphertext, shift)
    return ShiftCandidate(shift=shift, score=phi(letter_frequency(plaintext)), plaintext=plaintext)


def frequency_analysis(ciphertext: str, workers: Optional[int] = None) -> List[ShiftCandidate]:
    """Rank all 26 shifts by phi, ascending (ties go to the smaller shift).

    Text without letters scores 0.0 under every shift, so the ranking is
    simply shifts 0-25 in order.
    """
    workers = workers or settings.ANALYSIS_WORKERS
    shifts = range(ALPHABET_SIZE)
    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            candidates = list(executor.map(lambda s: _score_shift(ciphertext, s), shifts))
    else:
        candidates = [_score_shift(ciphertext, s) for s in shifts]
    candidates.sort(key=lambda c: (c.score, c.shift))
    logger.debug(
        f"Frequency analysis: {len(ciphertext)} chars, best shift {candidates[0].shift} "
        f"(phi {candidates[0].score:.4f})"
    )
    return candidates


def analyze_report(ciphertext: str, workers: Optional[int] = None) -> AnalysisReport:
    """frequency_analysis() plus the letter count of the ciphertext."""
    letters = sum(1 for c in ciphertext if letter_index(c) is not None)
    if not letters:
        logger.warning("Ciphertext has no letters; every shift ties")
    return AnalysisReport(
        ciphertext=ciphertext,
        letter_count=letters,
        candidates=frequency_analysis(ciphertext, workers=workers),
    )


def suggest_caesar_shift(ciphertext: str) -> int:
    """Most likely shift for ciphertext."""
    return frequency_analysis(ciphertext)[0].shift


profile = letter_frequency
score = phi
analyze = frequency_analysis
