"""
Heuristic trust score for a submitted loss report.

The score is additive over four independent signals. Only the presence of
the report number and image is considered, never their content.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from app.models.loss_report import VerificationStatus

POLICE_TERMS = ("jeshi", "police")
NATIONAL_TERMS = ("tanzania",)

POLICE_POINTS = 30
NATIONAL_POINTS = 20
REPORT_NUMBER_POINTS = 30
IMAGE_POINTS = 20

VERIFIED_THRESHOLD = 80
LIKELY_VALID_THRESHOLD = 50


@dataclass(frozen=True)
class LossReportEvidence:
    description: str = ""
    police_station: str = ""
    report_number: Optional[str] = None
    image_url: Optional[str] = None


@dataclass(frozen=True)
class VerificationResult:
    confidence_score: int
    verification_status: VerificationStatus
    verification_notes: List[str] = field(default_factory=list)


def _mentions(terms, *texts: str) -> bool:
    return any(term in text for term in terms for text in texts)


def status_for_score(score: int) -> VerificationStatus:
    if score >= VERIFIED_THRESHOLD:
        return VerificationStatus.verified
    if score >= LIKELY_VALID_THRESHOLD:
        return VerificationStatus.likely_valid
    return VerificationStatus.needs_review


def score_loss_report(evidence: LossReportEvidence) -> VerificationResult:
    description = (evidence.description or "").lower()
    station = (evidence.police_station or "").lower()

    score = 0
    notes: List[str] = []

    if _mentions(POLICE_TERMS, description, station):
        score += POLICE_POINTS
        notes.append("Police terminology detected")

    if _mentions(NATIONAL_TERMS, description, station):
        score += NATIONAL_POINTS
        notes.append("National context detected")

    if evidence.report_number:
        score += REPORT_NUMBER_POINTS
        notes.append("Report Reference Number provided")

    if evidence.image_url:
        score += IMAGE_POINTS
        notes.append("Document image attached")

    return VerificationResult(
        confidence_score=score,
        verification_status=status_for_score(score),
        verification_notes=notes,
    )
