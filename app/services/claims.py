"""
Claim lifecycle: creation with match scoring, listing by direction, and
finder-driven status transitions.

    pending -> accepted -> returned
    pending -> rejected

``rejected`` and ``returned`` are terminal. Reaching ``returned`` also
moves the claimed item to its ``returned`` state in the same commit.
"""

import logging
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, FrozenSet, List, Union

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.models.claim import Claim, ClaimStatus
from app.models.item import Item, ItemState
from app.models.loss_report import LossReport
from app.models.user import User
from app.schemas.auth_schemas import UserPublic
from app.schemas.claim_schemas import ClaimDetail, ClaimRead
from app.schemas.item_schemas import ItemRead
from app.services.matching import MatchCandidate, compute_match_score
from app.utils.errors import ConflictError, InvalidTransitionError, NotFoundError, UnauthorizedError

logger = logging.getLogger(__name__)


class ClaimDirection(str, Enum):
    filed = "filed"        # claims the user made
    received = "received"  # claims against the user's items


CLAIM_TRANSITIONS: Dict[ClaimStatus, FrozenSet[ClaimStatus]] = {
    ClaimStatus.pending: frozenset({ClaimStatus.accepted, ClaimStatus.rejected}),
    ClaimStatus.accepted: frozenset({ClaimStatus.returned}),
    ClaimStatus.rejected: frozenset(),
    ClaimStatus.returned: frozenset(),
}


def can_transition(current: ClaimStatus, new: ClaimStatus) -> bool:
    return new in CLAIM_TRANSITIONS[current]


def create_claim(
    session: Session,
    item_id: uuid.UUID,
    loss_report_id: uuid.UUID,
    claimant_id: int,
) -> Claim:
    item = session.get(Item, item_id)
    report = session.get(LossReport, loss_report_id)

    if not item or not report:
        raise NotFoundError("Item or Report not found")

    existing = session.exec(
        select(Claim)
        .where(Claim.item_id == item.id)
        .where(Claim.claimant_id == claimant_id)
    ).first()

    if existing:
        logger.warning("Duplicate claim on item %s by user %s", item.id, claimant_id)
        raise ConflictError("You have already claimed this item")

    match_score = compute_match_score(
        MatchCandidate(
            item_title=item.title,
            item_location=item.location,
            report_description=report.description,
        )
    )

    claim = Claim(
        item_id=item.id,
        finder_id=item.owner_id,
        claimant_id=claimant_id,
        loss_report_id=report.id,
        status=ClaimStatus.pending,
        match_score=match_score,
    )

    session.add(claim)

    # the unique constraint catches a concurrent insert that slipped past the check above
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        logger.warning("Duplicate claim on item %s by user %s (constraint)", item_id, claimant_id)
        raise ConflictError("You have already claimed this item")

    session.refresh(claim)

    logger.info(
        "Claim %s created on item %s by user %s: match_score=%s",
        claim.id, claim.item_id, claimant_id, match_score,
    )

    return claim


def list_claims(
    session: Session,
    user_id: int,
    direction: Union[ClaimDirection, str] = ClaimDirection.filed,
) -> List[ClaimDetail]:
    direction = ClaimDirection(direction)

    if direction == ClaimDirection.received:
        own_column, other_column = Claim.finder_id, Claim.claimant_id
    else:
        own_column, other_column = Claim.claimant_id, Claim.finder_id

    rows = session.exec(
        select(Claim, Item, User)
        .join(Item, Item.id == Claim.item_id)
        .join(User, User.id == other_column)
        .where(own_column == user_id)
        .order_by(Claim.created_at.desc())
    ).all()

    return [
        ClaimDetail(
            **ClaimRead.model_validate(claim).model_dump(),
            item=ItemRead.model_validate(item),
            other_party=UserPublic.model_validate(other_party),
        )
        for claim, item, other_party in rows
    ]


def update_claim_status(
    session: Session,
    claim_id: uuid.UUID,
    new_status: Union[ClaimStatus, str],
    acting_user_id: int,
) -> Claim:
    new_status = ClaimStatus(new_status)

    claim = session.get(Claim, claim_id)
    if not claim:
        raise NotFoundError("Claim not found")

    # Only the finder adjudicates
    if claim.finder_id != acting_user_id:
        logger.warning("User %s tried to update claim %s owned by finder %s", acting_user_id, claim.id, claim.finder_id)
        raise UnauthorizedError("Not authorized to update this claim")

    current = claim.status
    if not can_transition(current, new_status):
        logger.warning("Rejected claim %s transition %s -> %s", claim.id, current.value, new_status.value)
        raise InvalidTransitionError(
            f"Cannot change claim from '{current.value}' to '{new_status.value}'"
        )

    now = datetime.now(timezone.utc)

    # conditional on the status we validated against
    result = session.exec(
        update(Claim)
        .where(Claim.id == claim.id)
        .where(Claim.status == current)
        .values(status=new_status, updated_at=now)
    )

    if result.rowcount != 1:
        session.rollback()
        logger.warning("Claim %s changed concurrently, %s not applied", claim_id, new_status.value)
        raise ConflictError("Claim was updated by another request, reload and retry")

    if new_status == ClaimStatus.returned:
        item = session.get(Item, claim.item_id)
        if item:
            item.state = ItemState.returned
            item.updated_at = now
            session.add(item)
        else:
            logger.warning("Claim %s returned but item %s no longer exists", claim.id, claim.item_id)

    session.commit()
    session.refresh(claim)

    logger.info("Claim %s moved %s -> %s by user %s", claim.id, current.value, new_status.value, acting_user_id)

    return claim
