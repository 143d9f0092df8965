from enum import Enum
from typing import Optional
import uuid
from sqlmodel import Field, SQLModel
from datetime import datetime, timezone


class ItemStatus(str, Enum):
    lost = "lost"
    found = "found"


class ItemState(str, Enum):
    active = "active"
    recovered = "recovered"
    returned = "returned"
    archived = "archived"


class Item(SQLModel, table=True):
    __tablename__ = "items"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Reporter info
    owner_id: int = Field(foreign_key="users.id", index=True)

    # Item fields
    title: str
    description: str
    category: str = Field(index=True)
    location: str
    status: ItemStatus = Field(index=True)  # fixed at creation
    image_url: Optional[str] = None

    state: ItemState = Field(default=ItemState.active, index=True)
