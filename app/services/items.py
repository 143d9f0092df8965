import logging
import uuid
from datetime import datetime, timezone
from typing import List, Tuple

from sqlalchemy import delete
from sqlmodel import Session, col, select

from app.models.claim import Claim
from app.models.item import Item, ItemState, ItemStatus
from app.models.user import User
from app.schemas.item_schemas import ItemCreateRequest, ItemQuery
from app.utils.errors import InvalidTransitionError, NotFoundError, UnauthorizedError

logger = logging.getLogger(__name__)

# Manual changes an owner may make; claims drive found items to returned on their own
OWNER_TRANSITIONS = {
    ItemState.active: {ItemState.recovered, ItemState.returned, ItemState.archived},
    ItemState.recovered: {ItemState.active},
    ItemState.returned: {ItemState.active},
    ItemState.archived: {ItemState.active},
}

# recovered means the owner found it themselves, returned means a finder handed it back
RESOLVED_STATE_FOR = {
    ItemStatus.lost: ItemState.recovered,
    ItemStatus.found: ItemState.returned,
}


def create_item(session: Session, owner_id: int, payload: ItemCreateRequest) -> Item:
    item = Item(
        owner_id=owner_id,
        title=payload.title.strip(),
        description=payload.description.strip(),
        category=payload.category.strip(),
        location=payload.location.strip(),
        status=payload.status,
        image_url=payload.image_url or None,
    )

    session.add(item)
    session.commit()
    session.refresh(item)

    logger.info("Item %s (%s) posted by user %s", item.id, item.status.value, owner_id)

    return item


def list_items(session: Session, query: ItemQuery) -> List[Tuple[Item, User]]:
    stmt = select(Item, User).join(User, User.id == Item.owner_id)

    if query.status:
        stmt = stmt.where(Item.status == query.status)

    if query.category:
        stmt = stmt.where(Item.category == query.category)

    if query.search:
        stmt = stmt.where(
            col(Item.title).icontains(query.search, autoescape=True)
            | col(Item.description).icontains(query.search, autoescape=True)
        )

    if query.sort == "oldest":
        stmt = stmt.order_by(col(Item.created_at).asc())
    else:
        stmt = stmt.order_by(col(Item.created_at).desc())

    return session.exec(stmt).all()


def list_user_items(session: Session, owner_id: int) -> List[Item]:
    return session.exec(
        select(Item)
        .where(Item.owner_id == owner_id)
        .order_by(col(Item.created_at).desc())
    ).all()


def get_item_with_owner(session: Session, item_id: uuid.UUID) -> Tuple[Item, User]:
    result = session.exec(
        select(Item, User)
        .join(User, User.id == Item.owner_id)
        .where(Item.id == item_id)
    ).first()

    if not result:
        raise NotFoundError("Item not found")

    return result


def _get_owned_item(session: Session, item_id: uuid.UUID, user_id: int) -> Item:
    item = session.get(Item, item_id)
    if not item:
        raise NotFoundError("Item not found")

    if item.owner_id != user_id:
        logger.warning("User %s is not the owner of item %s", user_id, item_id)
        raise UnauthorizedError("User not authorized")

    return item


def can_change_state(item: Item, new_state: ItemState) -> bool:
    if new_state not in OWNER_TRANSITIONS[item.state]:
        return False

    if item.state == ItemState.active and new_state in RESOLVED_STATE_FOR.values():
        return RESOLVED_STATE_FOR[item.status] == new_state

    return True


def change_item_state(
    session: Session,
    item_id: uuid.UUID,
    new_state: ItemState,
    user_id: int,
) -> Item:
    item = _get_owned_item(session, item_id, user_id)

    if not can_change_state(item, new_state):
        raise InvalidTransitionError(
            f"Cannot change a {item.status.value} item from '{item.state.value}' to '{new_state.value}'"
        )

    previous = item.state
    item.state = new_state
    item.updated_at = datetime.now(timezone.utc)

    session.add(item)
    session.commit()
    session.refresh(item)

    logger.info("Item %s moved %s -> %s by owner", item.id, previous.value, new_state.value)

    return item


def delete_item(session: Session, item_id: uuid.UUID, user_id: int) -> None:
    item = _get_owned_item(session, item_id, user_id)

    session.exec(delete(Claim).where(Claim.item_id == item.id))
    session.delete(item)
    session.commit()

    logger.info("Item %s deleted by owner", item_id)
