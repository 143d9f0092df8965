from enum import Enum
import uuid
from sqlmodel import Field, SQLModel, UniqueConstraint
from datetime import datetime, timezone


class ClaimStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"
    returned = "returned"


class Claim(SQLModel, table=True):
    __tablename__ = "claims"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    item_id: uuid.UUID = Field(foreign_key="items.id", index=True, ondelete="CASCADE")

    # Finder snapshot taken from the item owner at claim time
    finder_id: int = Field(foreign_key="users.id", index=True)
    claimant_id: int = Field(foreign_key="users.id", index=True)

    loss_report_id: uuid.UUID = Field(foreign_key="loss_reports.id")

    status: ClaimStatus = Field(default=ClaimStatus.pending, index=True)
    match_score: int

    __table_args__ = (
        # One claim per claimant per item, whatever loss report backs it
        UniqueConstraint(
            "item_id",
            "claimant_id",
            name="uq_item_claimant_claim"
        ),
    )
