import uuid
from datetime import datetime
from typing import List, Optional
from pydantic import Field

from app.models.loss_report import VerificationStatus
from app.schemas.base import CamelModel


class LossReportCreateRequest(CamelModel):
    report_type: str = Field(min_length=1, max_length=40)
    incident_date: datetime
    police_station: str = ""
    report_number: Optional[str] = None
    description: str = ""
    image_url: Optional[str] = None


class LossReportCreateResponse(CamelModel):
    id: uuid.UUID
    status: VerificationStatus
    score: int
    message: str = "Loss report submitted successfully"


class LossReportRead(CamelModel):
    id: uuid.UUID
    owner_id: int
    report_type: str
    incident_date: datetime
    police_station: str
    report_number: Optional[str] = None
    description: str
    image_url: Optional[str] = None
    verification_status: VerificationStatus
    confidence_score: int
    verification_notes: List[str]
    created_at: datetime
