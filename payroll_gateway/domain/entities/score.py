"""Result of a credit score consultation."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ScoreSource(str, Enum):
    """Where the score used in a decision came from."""

    EXTERNAL = "external"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ScoreResult:
    """
    Either a score returned by the external provider or the reason it is unavailable.

    The provider value is passed through verbatim, with no range validation.
    """

    score: Optional[float] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, score: float) -> "ScoreResult":
        return cls(score=score)

    @classmethod
    def unavailable(cls, error: str) -> "ScoreResult":
        return cls(error=error)

    @property
    def available(self) -> bool:
        return self.score is not None
