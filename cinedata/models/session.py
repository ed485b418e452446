from mongoengine import StringField

from cinedata.models.base import BaseDocument


class Session(BaseDocument):
    """Login session.

    Fields:
    - token (str, unique): Token value handed out at login
    - user_id (str): Owner of the session; the user's email
    """
    token = StringField(required=True, null=False, unique=True)
    user_id = StringField(required=True, null=False)

    meta = {
        "collection": "sessions",
        "indexes": [
            {"fields": ["user_id"]},
        ],
    }
