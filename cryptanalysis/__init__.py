"""
SHIFTCRACK - Key recovery for the Caesar cipher (frequency analysis, known plaintext).
"""

from cryptanalysis.errors import CipherError, EmptyInputError, UnknownSymbolError
from cryptanalysis.frequency import (
    ENGLISH_MODEL,
    reference_frequency,
    letter_frequency,
    profile,
    phi,
    score,
    frequency_analysis,
    analyze,
    analyze_report,
    suggest_caesar_shift,
)
from cryptanalysis.known_plaintext import deduce_key

__all__ = [
    "CipherError",
    "EmptyInputError",
    "UnknownSymbolError",
    "ENGLISH_MODEL",
    "reference_frequency",
    "letter_frequency",
    "profile",
    "phi",
    "score",
    "frequency_analysis",
    "analyze",
    "analyze_report",
    "suggest_caesar_shift",
    "deduce_key",
]
