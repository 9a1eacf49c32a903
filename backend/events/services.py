from __future__ import annotations

import logging
from typing import List

from models import db
from models.financial_event_model import FinancialEvent


logger = logging.getLogger(__name__)


def insert_event(user_id: int, value, event_type: str) -> FinancialEvent:
    event = FinancialEvent(user_id=user_id, value=value, type=event_type)

    db.session.add(event)
    db.session.commit()

    logger.debug("Recorded %s event %s for user %s", event_type, event.id, user_id)
    return event


def list_events(user_id: int) -> List[FinancialEvent]:
    """A user's events, newest first."""
    return (
        FinancialEvent.query.filter_by(user_id=user_id)
        .order_by(FinancialEvent.id.desc())
        .all()
    )
