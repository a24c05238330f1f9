"""
SHIFTCRACK - Result models for shift-cipher analysis.
"""

from typing import List, Optional, Tuple
from pydantic import BaseModel, Field


class ShiftCandidate(BaseModel):
    """One candidate key: shift (0-25), its score (lower = closer to English) and the decryption."""
    shift: int = Field(ge=0, le=25)
    score: float
    plaintext: str = ""

    def as_tuple(self) -> Tuple[int, float]:
        return self.shift, self.score


class AnalysisReport(BaseModel):
    """Ranked frequency-analysis result for one ciphertext."""
    ciphertext: str
    letter_count: int = 0
    candidates: List[ShiftCandidate] = Field(default_factory=list)

    @property
    def best(self) -> Optional[ShiftCandidate]:
        return self.candidates[0] if self.candidates else None

    def top(self, n: int) -> List[ShiftCandidate]:
        """First n candidates; n <= 0 returns all of them."""
        return list(self.candidates) if n <= 0 else self.candidates[:n]
