"""
Shared fixtures.

Every test that touches the store runs against mongomock through mongoengine's
``mongo_client_class`` hook, so no MongoDB server is needed. Collections are
dropped after each test.
"""
from datetime import datetime, timezone

import mongomock
import pytest
from bson.objectid import ObjectId
from mongoengine import connect, disconnect

from cinedata.models.comment import Comment
from cinedata.models.session import Session
from cinedata.models.user import User


@pytest.fixture
def mongo():
    connect(
        "cinedata-test",
        host="mongodb://localhost",
        alias="default",
        mongo_client_class=mongomock.MongoClient,
        tz_aware=True,
    )
    yield
    for document in (Comment, User, Session):
        document.drop_collection()
    disconnect(alias="default")


@pytest.fixture
def make_comment():
    def _make(email: str = "alice@example.com", text: str = "Great movie", **kwargs) -> Comment:
        return Comment(
            id=kwargs.pop("id", ObjectId()),
            name=kwargs.pop("name", email.split("@")[0].title()),
            email=email,
            movie_id=kwargs.pop("movie_id", ObjectId()),
            text=text,
            date=kwargs.pop("date", datetime(2020, 1, 1, tzinfo=timezone.utc)),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_user():
    def _make(email: str = "alice@example.com", **kwargs) -> User:
        return User(
            name=kwargs.pop("name", email.split("@")[0].title()),
            email=email,
            password=kwargs.pop("password", "$2b$12$hashedpasswordvalue"),
            **kwargs,
        )

    return _make
