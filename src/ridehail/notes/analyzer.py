"""Keyword analysis and validation of rider notes."""

import logging

from ridehail.core.latency import LatencySimulator
from ridehail.models import NotesAnalysis, NotesValidation

logger = logging.getLogger(__name__)

ACCESSIBILITY_KEYWORDS = (
    "wheelchair",
    "accessible",
    "disability",
    "disabled",
    "mobility",
    "assistance",
    "assist",
    "help",
    "cane",
    "walker",
    "aid",
)

SPECIAL_NEEDS_KEYWORDS = (
    "car seat",
    "carseat",
    "baby",
    "child",
    "infant",
    "pet",
    "dog",
    "cat",
    "animal",
    "luggage",
    "baggage",
    "suitcase",
    "groceries",
    "shopping",
)

DISPATCH_FLAG_KEYWORDS = (
    "urgent",
    "emergency",
    "medical",
    "hospital",
    "doctor",
    "appointment",
    "rush",
    "hurry",
    "quick",
    "fast",
    "asap",
    "immediately",
)

DISALLOWED_WORDS = ("inappropriate", "offensive")

NOTE_SUGGESTIONS = (
    "I have luggage",
    "I need help with groceries",
    "I have a car seat",
    "I need wheelchair accessibility",
    "I have a pet with me",
    "Please call when you arrive",
)

DEFAULT_MAX_LENGTH = 200


def _matching(text: str, keywords: tuple[str, ...]) -> frozenset[str]:
    return frozenset(keyword for keyword in keywords if keyword in text)


class NotesAnalyzer:
    """Classifies free-text rider notes by plain substring matching.

    Matching is case-insensitive and not word-bounded, so "cat" also matches
    inside "location". Categories are independent of each other.
    """

    def __init__(self, latency: LatencySimulator, max_length: int = DEFAULT_MAX_LENGTH):
        self.latency = latency
        self.max_length = max_length

    async def analyze(self, text: str) -> NotesAnalysis:
        await self.latency.delay(700)
        lowered = text.lower()
        analysis = NotesAnalysis(
            dispatch_flags=_matching(lowered, DISPATCH_FLAG_KEYWORDS),
            accessibility_needed=bool(_matching(lowered, ACCESSIBILITY_KEYWORDS)),
            special_needs=_matching(lowered, SPECIAL_NEEDS_KEYWORDS),
        )
        if analysis.dispatch_flags:
            logger.info(f"Note flagged for dispatch: {sorted(analysis.dispatch_flags)}")
        return analysis

    async def validate(self, text: str) -> NotesValidation:
        """Check length and disallowed content. Failures are results, not errors."""
        await self.latency.delay(400)
        if len(text) > self.max_length:
            return NotesValidation(
                valid=False, reason=f"Notes must be {self.max_length} characters or less"
            )

        lowered = text.lower()
        if any(word in lowered for word in DISALLOWED_WORDS):
            return NotesValidation(valid=False, reason="Notes contain inappropriate content")

        return NotesValidation(valid=True)

    async def suggestions(self) -> list[str]:
        await self.latency.delay(300)
        return list(NOTE_SUGGESTIONS)
