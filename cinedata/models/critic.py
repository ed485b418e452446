from pydantic import BaseModel


class Critic(BaseModel):
    """A user ranked by number of comments written. Built per report, never stored."""
    email: str
    count: int

    @classmethod
    def from_group(cls, doc: dict) -> "Critic":
        """Build from a ``$group`` output document keyed by author email."""
        return cls(email=doc["_id"], count=int(doc["count"]))
