"""
Keyword-overlap confidence that a loss report describes a given item.
"""

from dataclasses import dataclass

MIN_WORD_LENGTH = 4
WORD_POINTS = 20
LOCATION_POINTS = 20

# Every claim stays reviewable, so nothing scores below the floor
MIN_SCORE = 20
MAX_SCORE = 100


@dataclass(frozen=True)
class MatchCandidate:
    item_title: str
    item_location: str
    report_description: str


def compute_match_score(candidate: MatchCandidate) -> int:
    description = (candidate.report_description or "").lower()
    words = (candidate.item_title or "").lower().split()

    overlap = sum(
        1 for word in words
        if len(word) >= MIN_WORD_LENGTH and word in description
    )
    score = overlap * WORD_POINTS

    location = (candidate.item_location or "").lower()
    if location and location in description:
        score += LOCATION_POINTS

    return max(MIN_SCORE, min(MAX_SCORE, score))
