from __future__ import annotations

import logging

from cinedata.models.base import utcnow
from cinedata.models.session import Session
from cinedata.services.durability import write_concern_for
from cinedata.utils.base import InvalidArgument, Operation


logger = logging.getLogger(__name__)


def create_session(user_id: str, token: str) -> bool:
    """Create or refresh the session stored under ``token``.

    A single upsert keyed on the token: an existing session is handed over to
    ``user_id``, otherwise a new one is inserted. Concurrent calls with the same
    token therefore never leave two documents behind.
    """
    if not token:
        raise InvalidArgument("Session token is required")
    if not user_id:
        raise InvalidArgument("Session user id is required")

    now = utcnow()
    Session.objects(token=token).update_one(
        upsert=True,
        set__user_id=user_id,
        set__updated_at=now,
        set_on_insert__created_at=now,
        write_concern=write_concern_for(Operation.CREATE_SESSION),
    )
    logger.debug("Session stored for user %s", user_id)
    return True


def get_session(user_id: str) -> Session | None:
    return Session.objects(user_id=user_id).first()


def delete_sessions(user_id: str) -> bool:
    """Remove every session of ``user_id``. Succeeds when there was nothing to remove."""
    deleted = Session.objects(user_id=user_id).delete(
        write_concern=write_concern_for(Operation.DELETE_SESSIONS),
    )
    logger.debug("Removed %s session(s) for user %s", deleted, user_id)
    return True
