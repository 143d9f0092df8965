import uuid
from datetime import datetime
from typing import Literal

from app.models.claim import ClaimStatus
from app.schemas.auth_schemas import UserPublic
from app.schemas.base import CamelModel
from app.schemas.item_schemas import ItemRead


class ClaimCreateRequest(CamelModel):
    item_id: uuid.UUID
    loss_report_id: uuid.UUID


class ClaimStatusUpdateRequest(CamelModel):
    status: Literal["accepted", "rejected", "returned"]


class ClaimCreateResponse(CamelModel):
    id: uuid.UUID
    match_score: int
    status: ClaimStatus
    message: str = "Claim submitted successfully"


class ClaimRead(CamelModel):
    id: uuid.UUID
    item_id: uuid.UUID
    finder_id: int
    claimant_id: int
    loss_report_id: uuid.UUID
    status: ClaimStatus
    match_score: int
    created_at: datetime
    updated_at: datetime


class ClaimDetail(ClaimRead):
    item: ItemRead
    other_party: UserPublic


class ClaimStatusUpdateResponse(CamelModel):
    message: str
    claim: ClaimRead
