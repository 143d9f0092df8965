import uuid
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.db.db import get_session
from app.models.item import ItemStatus
from app.schemas.auth_schemas import UserPublic
from app.schemas.item_schemas import (
    ItemCreateRequest,
    ItemQuery,
    ItemRead,
    ItemStateUpdateRequest,
    ItemWithOwner,
)
from app.services import items as item_service
from app.utils.auth_helper import get_current_user_required, get_db_user


router = APIRouter()


def _with_owner(item, owner) -> ItemWithOwner:
    return ItemWithOwner(
        **ItemRead.model_validate(item).model_dump(),
        owner=UserPublic.model_validate(owner),
    )


@router.post("", response_model=ItemRead, status_code=201)
def add_item(
    payload: ItemCreateRequest,
    session: Session = Depends(get_session),
    current_user=Depends(get_current_user_required),
):
    user = get_db_user(session, current_user)
    return item_service.create_item(session, user.id, payload)


@router.get("", response_model=List[ItemWithOwner])
def get_items(
    status: Optional[ItemStatus] = None,
    category: Optional[str] = None,
    search: Optional[str] = None,
    sort: str = Query("newest", pattern="^(newest|oldest)$"),
    session: Session = Depends(get_session),
):
    query = ItemQuery(status=status, category=category, search=search, sort=sort)
    rows = item_service.list_items(session, query)

    return [_with_owner(item, owner) for item, owner in rows]


@router.get("/me", response_model=List[ItemRead])
def get_my_items(
    session: Session = Depends(get_session),
    current_user=Depends(get_current_user_required),
):
    user = get_db_user(session, current_user)
    return item_service.list_user_items(session, user.id)


@router.get("/{item_id}", response_model=ItemWithOwner)
def get_item(item_id: uuid.UUID, session: Session = Depends(get_session)):
    item, owner = item_service.get_item_with_owner(session, item_id)
    return _with_owner(item, owner)


@router.patch("/{item_id}", response_model=ItemRead)
def update_item_state(
    item_id: uuid.UUID,
    payload: ItemStateUpdateRequest,
    session: Session = Depends(get_session),
    current_user=Depends(get_current_user_required),
):
    user = get_db_user(session, current_user)
    return item_service.change_item_state(session, item_id, payload.state, user.id)


@router.delete("/{item_id}")
def delete_item(
    item_id: uuid.UUID,
    session: Session = Depends(get_session),
    current_user=Depends(get_current_user_required),
):
    user = get_db_user(session, current_user)
    item_service.delete_item(session, item_id, user.id)

    return {"message": "Item removed"}
