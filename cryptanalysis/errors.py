"""
SHIFTCRACK - Cryptanalysis errors.
"""

from typing import Optional


class CipherError(Exception):
    """Base class for errors raised by the cipher and analysis modules."""


class EmptyInputError(CipherError, ValueError):
    """Text has no alphabetic characters to profile."""

    def __init__(self, message: str = "text contains no alphabetic characters"):
        super().__init__(message)


class UnknownSymbolError(CipherError, KeyError):
    """A symbol outside the 26-letter alphabet reached the reference model."""

    def __init__(self, symbol: str, message: Optional[str] = None):
        self.symbol = symbol
        super().__init__(message or f"symbol {symbol!r} is not in the alphabet")

    def __str__(self) -> str:
        return self.args[0]
