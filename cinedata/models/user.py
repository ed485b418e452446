from mongoengine import EmailField, MapField, StringField

from cinedata.models.base import BaseDocument


class User(BaseDocument):
    """User document.

    Fields:
    - name (str): Display name
    - email (str, unique): Identifies the user everywhere, sessions included
    - password (str): Hash produced by the authentication layer, stored as-is
    - preferences (dict[str, str]): Merge-updated; keys absent from an update survive it
    """
    name = StringField(required=True, null=False)
    email = EmailField(required=True, null=False, unique=True)
    password = StringField(required=True, null=False)
    preferences = MapField(StringField(), required=False, null=True)

    meta = {
        "collection": "users",
    }

    def to_output(self, fields=None, exclude=None):
        # Never hand the password hash to callers
        return super().to_output(fields, list(exclude or []) + ["password"])
