"""
Tests for the loss report trust score:
- point values per signal and the notes they produce
- status thresholds at 50 and 80
- monotonicity in every signal
"""

import itertools

import pytest

from app.models.loss_report import VerificationStatus
from app.services.verification import LossReportEvidence, score_loss_report, status_for_score


def test_no_signals_needs_review():
    result = score_loss_report(LossReportEvidence())
    assert result.confidence_score == 0
    assert result.verification_status == VerificationStatus.needs_review
    assert result.verification_notes == []


def test_full_evidence_is_verified():
    """Police station in Tanzania, reference number and image attached."""
    result = score_loss_report(
        LossReportEvidence(
            description="Phone taken from my bag",
            police_station="Jeshi la Polisi Dar es Salaam, Tanzania",
            report_number="RB/44/2024",
            image_url="https://cdn.example.com/rb44.jpg",
        )
    )

    assert result.confidence_score == 100
    assert result.verification_status == VerificationStatus.verified
    assert result.verification_notes == [
        "Police terminology detected",
        "National context detected",
        "Report Reference Number provided",
        "Document image attached",
    ]


@pytest.mark.parametrize(
    "evidence, expected",
    [
        (LossReportEvidence(description="Reported to the POLICE today"), 30),
        (LossReportEvidence(police_station="Central Police Station"), 30),
        (LossReportEvidence(police_station="Jeshi la Polisi Arusha"), 30),
        (LossReportEvidence(description="lost in Tanzania"), 20),
        (LossReportEvidence(police_station="Mwanza, TANZANIA"), 20),
        (LossReportEvidence(report_number="RB/1/2024"), 30),
        (LossReportEvidence(image_url="file.jpg"), 20),
    ],
)
def test_single_signal_points(evidence, expected):
    assert score_loss_report(evidence).confidence_score == expected


def test_term_counted_once_across_fields():
    result = score_loss_report(
        LossReportEvidence(description="police report", police_station="jeshi police")
    )
    assert result.confidence_score == 30
    assert result.verification_notes == ["Police terminology detected"]


def test_empty_strings_are_absent():
    result = score_loss_report(LossReportEvidence(report_number="", image_url=""))
    assert result.confidence_score == 0


@pytest.mark.parametrize(
    "score, status",
    [
        (0, VerificationStatus.needs_review),
        (49, VerificationStatus.needs_review),
        (50, VerificationStatus.likely_valid),
        (79, VerificationStatus.likely_valid),
        (80, VerificationStatus.verified),
        (100, VerificationStatus.verified),
    ],
)
def test_status_thresholds(score, status):
    assert status_for_score(score) == status


def test_police_and_national_is_likely_valid():
    result = score_loss_report(LossReportEvidence(police_station="Police post, Tanzania"))
    assert result.confidence_score == 50
    assert result.verification_status == VerificationStatus.likely_valid


def test_score_is_monotonic_in_each_signal():
    signals = {
        "description": "jeshi",
        "police_station": "tanzania",
        "report_number": "RB/9",
        "image_url": "img.png",
    }

    for flags in itertools.product([False, True], repeat=len(signals)):
        base = {k: v for (k, v), on in zip(signals.items(), flags) if on}
        base_score = score_loss_report(LossReportEvidence(**base)).confidence_score

        for key, value in signals.items():
            more = dict(base, **{key: value})
            assert score_loss_report(LossReportEvidence(**more)).confidence_score >= base_score


def test_scoring_is_deterministic():
    evidence = LossReportEvidence(description="police", report_number="X")
    assert score_loss_report(evidence) == score_loss_report(evidence)
