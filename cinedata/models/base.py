from datetime import datetime, timezone
from typing import Any

from bson.objectid import ObjectId
from mongoengine import Document, DateTimeField


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseDocumentMixin:
    """Serialization shared by every stored entity.

    ObjectIds become strings and datetimes ISO-8601 so the output can be handed
    to any JSON encoder by the caller.
    """

    def _sanitize_value(self, value: Any) -> Any:
        if isinstance(value, Document):
            return value.to_output() if hasattr(value, "to_output") else str(value.id)
        if isinstance(value, list):
            return [self._sanitize_value(v) for v in value]
        if isinstance(value, dict):
            return {k: self._sanitize_value(v) for k, v in value.items()}
        if isinstance(value, datetime):
            return value.isoformat()
        if isinstance(value, ObjectId):
            return str(value)
        return value

    def to_output(self, fields=None, exclude=None):
        data: dict[str, Any] = {}
        exclude = exclude or []
        fields = fields or self._fields.keys()

        for field in fields:
            if field in exclude or field == "id":
                continue
            data[field] = self._sanitize_value(getattr(self, field))

        data["id"] = str(self.id) if self.id is not None else None
        return data

    def to_dict(self, fields=None, exclude=None):
        return self.to_output(fields=fields, exclude=exclude)


class BaseDocument(Document, BaseDocumentMixin):
    created_at = DateTimeField(default=utcnow, null=False)
    updated_at = DateTimeField(default=utcnow, null=False)

    meta = {
        "abstract": True,
    }

    def save(self, *args, **kwargs):
        self.updated_at = utcnow()
        return super().save(*args, **kwargs)
