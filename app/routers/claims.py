import uuid
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.db.db import get_session
from app.schemas.claim_schemas import (
    ClaimCreateRequest,
    ClaimCreateResponse,
    ClaimDetail,
    ClaimRead,
    ClaimStatusUpdateRequest,
    ClaimStatusUpdateResponse,
)
from app.services import claims as claim_service
from app.services.claims import ClaimDirection
from app.utils.auth_helper import get_current_user_required, get_db_user


router = APIRouter()


@router.post("", response_model=ClaimCreateResponse, status_code=201)
def create_claim(
    payload: ClaimCreateRequest,
    session: Session = Depends(get_session),
    current_user=Depends(get_current_user_required),
):
    user = get_db_user(session, current_user)

    claim = claim_service.create_claim(
        session,
        item_id=payload.item_id,
        loss_report_id=payload.loss_report_id,
        claimant_id=user.id,
    )

    return ClaimCreateResponse(
        id=claim.id,
        match_score=claim.match_score,
        status=claim.status,
    )


@router.get("", response_model=List[ClaimDetail])
def get_my_claims(
    type: ClaimDirection = Query(ClaimDirection.filed),
    session: Session = Depends(get_session),
    current_user=Depends(get_current_user_required),
):
    user = get_db_user(session, current_user)
    return claim_service.list_claims(session, user.id, type)


@router.patch("/{claim_id}/status", response_model=ClaimStatusUpdateResponse)
def update_claim_status(
    claim_id: uuid.UUID,
    payload: ClaimStatusUpdateRequest,
    session: Session = Depends(get_session),
    current_user=Depends(get_current_user_required),
):
    # acting identity always comes from the token, never the body
    user = get_db_user(session, current_user)

    claim = claim_service.update_claim_status(
        session,
        claim_id=claim_id,
        new_status=payload.status,
        acting_user_id=user.id,
    )

    return ClaimStatusUpdateResponse(
        message=f"Claim {claim.status.value}",
        claim=ClaimRead.model_validate(claim),
    )
