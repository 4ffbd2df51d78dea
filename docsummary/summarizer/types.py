"""Summary tiers, methods and result models."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class LengthTier(str, Enum):
    """Summary length class."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @classmethod
    def coerce(cls, value: "str | LengthTier | None") -> "LengthTier":
        """Parse a tier; missing or unknown values fall back to MEDIUM."""
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            logger.warning("Unknown summary length %r, using medium", value)
            return cls.MEDIUM


class SummaryMethod(str, Enum):
    """Which summarizer produced the text."""

    GENERATIVE = "Generative"
    EXTRACTIVE = "Extractive"


@dataclass(frozen=True)
class ScoredSentence:
    """Candidate sentence with its sub-scores. Lives only during selection."""

    text: str
    index: int
    frequency: float
    position: float
    length: float
    score: float


class SummaryResult(BaseModel):
    """Summary text plus the method actually used."""

    model_config = ConfigDict(frozen=True)

    summary_text: str
    method: SummaryMethod

    def to_payload(self) -> dict[str, str]:
        return {"summary": self.summary_text, "method": self.method.value}
