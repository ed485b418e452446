from __future__ import annotations

import logging
from typing import Mapping

from mongoengine import NotUniqueError, ValidationError

from cinedata.models.user import User
from cinedata.models.session import Session
from cinedata.services.durability import write_concern_for
from cinedata.utils.base import InvalidArgument, Operation, WriteConflict


logger = logging.getLogger(__name__)


def add_user(user: User) -> bool:
    """Insert a new user. Raises WriteConflict when the email is already registered."""
    if user is None:
        raise InvalidArgument("User must not be null")
    try:
        user.validate()
    except ValidationError as exc:
        raise InvalidArgument(f"Invalid user: {exc}") from exc

    try:
        user.save(force_insert=True, write_concern=write_concern_for(Operation.ADD_USER))
    except NotUniqueError as exc:
        logger.warning("User %s already exists", user.email)
        raise WriteConflict(f"Email already registered: {user.email}") from exc
    return True


def get_user(email: str) -> User | None:
    return User.objects(email=email).first()


def delete_user(email: str) -> bool:
    """Remove the user and every session it owns. Idempotent."""
    write_concern = write_concern_for(Operation.DELETE_USER)
    User.objects(email=email).delete(write_concern=write_concern)
    # Sessions are keyed by the user's email
    Session.objects(user_id=email).delete(write_concern=write_concern)
    logger.debug("Deleted user %s", email)
    return True


def _validate_preferences(preferences: Mapping) -> dict[str, str]:
    if preferences is None:
        raise InvalidArgument("Preferences must not be null")
    if not isinstance(preferences, Mapping):
        raise InvalidArgument("Preferences must be a mapping of strings")
    for key, value in preferences.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise InvalidArgument(f"Preference {key!r} must map a string to a string")
        if key.startswith("$"):
            raise InvalidArgument(f"Preference key {key!r} may not start with '$'")
    return dict(preferences)


def update_preferences(email: str, preferences: Mapping[str, str] | None) -> bool:
    """Merge ``preferences`` into the user's stored preferences.

    Keys present in the payload overwrite stored values; stored keys missing
    from the payload are kept. Returns False when the user does not exist.

    This is a read-modify-write of the whole map: two concurrent updates for
    the same user can lose one of them. Callers needing strict guarantees must
    serialize updates per user.
    """
    overlay = _validate_preferences(preferences)

    user: User | None = User.objects(email=email).first()
    if not user:
        logger.warning("Cannot update preferences of unknown user %s", email)
        return False

    merged = dict(user.preferences or {})
    merged.update(overlay)
    user.preferences = merged
    try:
        user.save(write_concern=write_concern_for(Operation.UPDATE_PREFERENCES))
    except ValidationError as exc:
        raise InvalidArgument(f"Invalid preferences for {email}: {exc}") from exc
    return True
