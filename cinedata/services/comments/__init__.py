"""Comment reads, inserts, ownership-checked mutations and the commenter report.

Update and delete carry the ownership check inside the store filter
(``_id = id AND email = caller``), so the store applies check and write as one
single-document operation. A comment that does not exist and a comment owned
by someone else both yield ``False``.
"""
from __future__ import annotations

import logging

from bson.objectid import ObjectId
from mongoengine import NotUniqueError, ValidationError

from cinedata.models.base import utcnow
from cinedata.models.comment import Comment
from cinedata.models.critic import Critic
from cinedata.services.durability import read_concern_for, write_concern_for
from cinedata.utils.base import InvalidArgument, Operation, WriteConflict
from cinedata.utils.config import settings


logger = logging.getLogger(__name__)


def _object_id(comment_id: str | ObjectId) -> ObjectId | None:
    if isinstance(comment_id, ObjectId):
        return comment_id
    if comment_id and ObjectId.is_valid(comment_id):
        return ObjectId(comment_id)
    return None


def get_comment(comment_id: str | ObjectId) -> Comment | None:
    oid = _object_id(comment_id)
    if oid is None:
        return None
    return Comment.objects(id=oid).first()


def add_comment(comment: Comment) -> Comment:
    """Insert a comment that already carries its identifier.

    Raises InvalidArgument without contacting the store when the id is missing
    or the document does not validate; WriteConflict when the id is taken.
    """
    if comment is None or comment.id is None:
        raise InvalidArgument("Comment must have an id")
    try:
        comment.validate()
    except ValidationError as exc:
        raise InvalidArgument(f"Invalid comment: {exc}") from exc

    try:
        comment.save(force_insert=True, write_concern=write_concern_for(Operation.ADD_COMMENT))
    except NotUniqueError as exc:
        logger.warning("Comment %s already exists: %s", comment.id, exc)
        raise WriteConflict(f"Comment {comment.id} already exists") from exc
    logger.debug("Added comment %s by %s", comment.id, comment.email)
    return comment


def update_comment(comment_id: str | ObjectId, text: str, email: str) -> bool:
    """Replace the text of a comment owned by ``email`` and refresh its date."""
    if not isinstance(text, str):
        raise InvalidArgument("Comment text must be a string")
    oid = _object_id(comment_id)
    if oid is None:
        return False

    now = utcnow()
    result = Comment.objects(id=oid, email=email).update_one(
        set__text=text,
        set__date=now,
        set__updated_at=now,
        write_concern=write_concern_for(Operation.UPDATE_COMMENT),
        full_result=True,
    )
    if result.matched_count != 1:
        logger.warning(
            "Not able to update comment %s for user %s: not the owner or no such comment",
            oid, email,
        )
        return False
    logger.debug("Updated comment %s", oid)
    return True


def delete_comment(comment_id: str | ObjectId, email: str) -> bool:
    """Delete a comment owned by ``email``. Deleting twice returns False the second time."""
    oid = _object_id(comment_id)
    if oid is None:
        return False

    deleted = Comment.objects(id=oid, email=email).delete(
        write_concern=write_concern_for(Operation.DELETE_COMMENT),
    )
    if deleted != 1:
        logger.warning(
            "Not able to delete comment %s for user %s: not the owner or already deleted",
            oid, email,
        )
        return False
    logger.debug("Deleted comment %s", oid)
    return True


def top_commenters(limit: int | None = None) -> list[Critic]:
    """Rank authors by number of comments, highest first, at most ``limit`` entries.

    Grouping, sorting and truncation run inside the store; ties come back in
    whatever order the store produces.
    """
    if limit is None:
        limit = settings.top_commenters_limit
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidArgument("limit must be a positive integer")

    pipeline = [
        {"$group": {"_id": "$email", "count": {"$sum": 1}}},
        {"$sort": {"count": -1}},
        {"$limit": limit},
    ]
    cursor = Comment.objects.read_concern(read_concern_for(Operation.TOP_COMMENTERS)).aggregate(pipeline)
    return [Critic.from_group(doc) for doc in cursor]


def count_comments(email: str) -> int:
    """Number of comments written by ``email``, counted by the store."""
    return Comment.objects(email=email).count()
