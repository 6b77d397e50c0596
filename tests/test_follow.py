"""Tests for follow / unfollow handlers."""
import asyncio
import json
from conftest import make_user, user_command
from core.follow import follow, unfollow
from models.interactions import Interaction, User


def data_for(name, target_id):
    return Interaction.model_validate(user_command(name, make_user(), target_id)).data


def followers_of(store, target_id):
    return json.loads(store.data[target_id])


def test_follow_creates_set(ctx, followers):
    response = asyncio.run(follow(ctx, User.model_validate(make_user(user_id="A")), data_for("Follow", "B")))
    assert followers_of(followers, "B") == ["A"]
    assert response.data.content == "followed <@B>!"
    assert response.data.flags == 64


def test_follow_is_idempotent(ctx, followers):
    user = User.model_validate(make_user(user_id="A"))
    asyncio.run(follow(ctx, user, data_for("Follow", "B")))
    asyncio.run(follow(ctx, user, data_for("Follow", "B")))
    assert followers_of(followers, "B") == ["A"]


def test_follow_keeps_existing_followers(ctx, followers):
    followers.put_json("B", ["X", "Y"])
    asyncio.run(follow(ctx, User.model_validate(make_user(user_id="A")), data_for("Follow", "B")))
    assert sorted(followers_of(followers, "B")) == ["A", "X", "Y"]


def test_unfollow_removes(ctx, followers):
    followers.put_json("B", ["A", "C"])
    response = asyncio.run(unfollow(ctx, User.model_validate(make_user(user_id="A")), data_for("Unfollow", "B")))
    assert followers_of(followers, "B") == ["C"]
    assert response.data.content == "unfollowed <@B>!"


def test_unfollow_non_follower_is_noop(ctx, followers):
    followers.put_json("B", ["C"])
    asyncio.run(unfollow(ctx, User.model_validate(make_user(user_id="A")), data_for("Unfollow", "B")))
    assert followers_of(followers, "B") == ["C"]


def test_unfollow_unknown_target(ctx, followers):
    asyncio.run(unfollow(ctx, User.model_validate(make_user(user_id="A")), data_for("Unfollow", "B")))
    assert followers_of(followers, "B") == []
