import uuid
from datetime import datetime
from typing import Literal, Optional
from pydantic import Field

from app.models.item import ItemState, ItemStatus
from app.schemas.auth_schemas import UserPublic
from app.schemas.base import CamelModel


class ItemCreateRequest(CamelModel):
    title: str = Field(min_length=2, max_length=80)
    description: str = Field(min_length=1, max_length=500)
    category: str = Field(min_length=2, max_length=40)
    status: ItemStatus
    location: str = Field(min_length=2, max_length=120)
    image_url: Optional[str] = None


class ItemStateUpdateRequest(CamelModel):
    state: ItemState


class ItemQuery(CamelModel):
    status: Optional[ItemStatus] = None
    category: Optional[str] = None
    search: Optional[str] = None
    sort: Literal["newest", "oldest"] = "newest"


class ItemRead(CamelModel):
    id: uuid.UUID
    title: str
    description: str
    category: str
    location: str
    status: ItemStatus
    state: ItemState
    image_url: Optional[str] = None
    owner_id: int
    created_at: datetime
    updated_at: datetime


class ItemWithOwner(ItemRead):
    owner: UserPublic
