from mongoengine import DateTimeField, EmailField, ObjectIdField, StringField

from cinedata.models.base import BaseDocument, utcnow


class Comment(BaseDocument):
    """Comment left by a user on a movie.

    Fields:
    - id (ObjectId): Assigned by the caller before insert, never changes
    - name (str): Author display name at the time of writing
    - email (str): Author email; the ownership key for update/delete
    - movie_id (ObjectId): Movie the comment belongs to
    - text (str): The only field callers may change
    - date (datetime): Written on insert, refreshed on every text update
    """
    name = StringField(required=False, null=True)
    email = EmailField(required=True, null=False)
    movie_id = ObjectIdField(required=False, null=True)
    text = StringField(required=True, null=False)
    date = DateTimeField(default=utcnow, null=False)

    meta = {
        "collection": "comments",
        "indexes": [
            {"fields": ["email"]},
            {"fields": ["movie_id", "-date"]},
        ],
    }
