"""
SHIFTCRACK - Pytest fixtures.
"""

import pytest

from ciphers.caesar import encrypt


# No j, q, x or z: phi only separates shifts by which letters are missing.
ENGLISH_SAMPLE = (
    "The history of cryptography is a long story of clever people trying to hide "
    "their secrets from curious eyes. Ancient generals sent orders to their troops "
    "in written form, and a messenger who was captured could betray the whole "
    "campaign. To protect these messages, a simple method was often used: every "
    "letter in the note was moved a set number of places along the alphabet. This "
    "method is weak, because the count of each letter in the message stays the same "
    "after the shift. A patient reader who tallies the letters can find the most "
    "common symbol, guess that it stands for the letter e, and work back to the key "
    "in a few minutes."
)


@pytest.fixture
def english_sample():
    """Long English paragraph (mixed case and punctuation)."""
    return ENGLISH_SAMPLE


@pytest.fixture
def sample_ciphertext(english_sample):
    """english_sample encrypted with shift 11."""
    return encrypt(english_sample, 11)
