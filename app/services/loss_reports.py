import logging
from datetime import timezone
from typing import List

from sqlmodel import Session, select

from app.models.loss_report import LossReport
from app.schemas.loss_report_schemas import LossReportCreateRequest
from app.services.verification import LossReportEvidence, score_loss_report

logger = logging.getLogger(__name__)


def _as_utc(value):
    # date-only or naive input is taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def create_loss_report(session: Session, owner_id: int, payload: LossReportCreateRequest) -> LossReport:
    """Score the report's evidence and persist it with the outcome."""
    result = score_loss_report(
        LossReportEvidence(
            description=payload.description,
            police_station=payload.police_station,
            report_number=payload.report_number,
            image_url=payload.image_url,
        )
    )

    report = LossReport(
        owner_id=owner_id,
        report_type=payload.report_type.strip(),
        incident_date=_as_utc(payload.incident_date),
        police_station=payload.police_station.strip(),
        report_number=payload.report_number or None,
        description=payload.description.strip(),
        image_url=payload.image_url or None,
        verification_status=result.verification_status,
        confidence_score=result.confidence_score,
        verification_notes=list(result.verification_notes),
    )

    session.add(report)
    session.commit()
    session.refresh(report)

    logger.info(
        "Loss report %s filed by user %s: score=%s status=%s",
        report.id, owner_id, report.confidence_score, report.verification_status.value,
    )

    return report


def list_loss_reports(session: Session, owner_id: int) -> List[LossReport]:
    return session.exec(
        select(LossReport)
        .where(LossReport.owner_id == owner_id)
        .order_by(LossReport.created_at.desc())
    ).all()
