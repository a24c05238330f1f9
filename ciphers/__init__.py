"""
SHIFTCRACK - Classical ciphers.
"""

from ciphers.caesar import ALPHABET, encrypt, decrypt, rotate

__all__ = ["ALPHABET", "encrypt", "decrypt", "rotate"]
