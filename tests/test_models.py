"""Entity serialization and the derived Critic record."""
import pytest
from bson.objectid import ObjectId

from cinedata.models.critic import Critic
from cinedata.models.session import Session


def test_comment_to_output_stringifies_ids_and_dates(make_comment):
    movie_id = ObjectId()
    comment = make_comment(movie_id=movie_id)

    output = comment.to_output()

    assert output["id"] == str(comment.id)
    assert output["movie_id"] == str(movie_id)
    assert output["date"] == "2020-01-01T00:00:00+00:00"
    assert output["text"] == "Great movie"


def test_user_to_output_hides_password(make_user):
    output = make_user(preferences={"theme": "dark"}).to_output()

    assert "password" not in output
    assert output["preferences"] == {"theme": "dark"}
    assert output["email"] == "alice@example.com"


def test_unsaved_session_has_no_id():
    assert Session(token="t", user_id="alice@example.com").to_dict()["id"] is None


def test_critic_from_group_document():
    critic = Critic.from_group({"_id": "carol@example.com", "count": 20})

    assert critic == Critic(email="carol@example.com", count=20)
    assert critic.model_dump() == {"email": "carol@example.com", "count": 20}


def test_critic_requires_email():
    with pytest.raises(KeyError):
        Critic.from_group({"count": 3})


def test_comment_output_carries_only_comment_fields(make_comment):
    output = make_comment().to_output()

    assert set(output) == {"id", "name", "email", "movie_id", "text", "date", "created_at", "updated_at"}
