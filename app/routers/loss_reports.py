from typing import List
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.db.db import get_session
from app.schemas.loss_report_schemas import (
    LossReportCreateRequest,
    LossReportCreateResponse,
    LossReportRead,
)
from app.services import loss_reports as loss_report_service
from app.utils.auth_helper import get_current_user_required, get_db_user


router = APIRouter()


@router.post("", response_model=LossReportCreateResponse, status_code=201)
def create_loss_report(
    payload: LossReportCreateRequest,
    session: Session = Depends(get_session),
    current_user=Depends(get_current_user_required),
):
    user = get_db_user(session, current_user)

    report = loss_report_service.create_loss_report(session, user.id, payload)

    return LossReportCreateResponse(
        id=report.id,
        status=report.verification_status,
        score=report.confidence_score,
    )


@router.get("", response_model=List[LossReportRead])
def get_my_loss_reports(
    session: Session = Depends(get_session),
    current_user=Depends(get_current_user_required),
):
    user = get_db_user(session, current_user)
    return loss_report_service.list_loss_reports(session, user.id)
