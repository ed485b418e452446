"""Static read/write concern per operation.

Writes whose loss after a primary failover would be visible to users (a new
comment, a new account) and the commenter report wait for a majority of the
replica set. Everything else runs with the connection defaults.
"""
from cinedata.utils.base import Durability, Operation


POLICY: dict[Operation, Durability] = {
    Operation.GET_COMMENT: Durability.DEFAULT,
    Operation.ADD_COMMENT: Durability.MAJORITY,
    Operation.UPDATE_COMMENT: Durability.DEFAULT,
    Operation.DELETE_COMMENT: Durability.DEFAULT,
    Operation.TOP_COMMENTERS: Durability.MAJORITY,
    Operation.ADD_USER: Durability.MAJORITY,
    Operation.GET_USER: Durability.DEFAULT,
    Operation.DELETE_USER: Durability.DEFAULT,
    Operation.UPDATE_PREFERENCES: Durability.DEFAULT,
    Operation.CREATE_SESSION: Durability.DEFAULT,
    Operation.GET_SESSION: Durability.DEFAULT,
    Operation.DELETE_SESSIONS: Durability.DEFAULT,
}


def durability_for(operation: Operation) -> Durability:
    return POLICY[operation]


def write_concern_for(operation: Operation) -> dict:
    """Return the ``write_concern`` argument mongoengine expects for this operation."""
    if durability_for(operation) is Durability.MAJORITY:
        return {"w": "majority"}
    return {}


def read_concern_for(operation: Operation) -> dict | None:
    """Return the ``read_concern`` argument for this operation, or None for the default."""
    if durability_for(operation) is Durability.MAJORITY:
        return {"level": "majority"}
    return None
