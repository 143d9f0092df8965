from enum import Enum
from typing import List, Optional
import uuid
from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel
from datetime import datetime, timezone


class VerificationStatus(str, Enum):
    pending = "pending"
    needs_review = "needs_review"
    likely_valid = "likely_valid"
    verified = "verified"


class LossReport(SQLModel, table=True):
    __tablename__ = "loss_reports"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)

    # Owner
    owner_id: int = Field(foreign_key="users.id", index=True)

    # Report fields
    report_type: str  # e.g. "Theft", "Lost"
    incident_date: datetime
    police_station: str = ""
    report_number: Optional[str] = None
    description: str = ""
    image_url: Optional[str] = None

    # Verification outcome
    verification_status: VerificationStatus = Field(default=VerificationStatus.pending)
    confidence_score: int = Field(default=0)
    verification_notes: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
