import pytest

from app.domains.thoughts.entities import Thought, validate_message


def test_create_thought_defaults():
    thought = Thought.create_thought("  Sunny day  ")
    assert thought.message == "Sunny day"
    assert thought.hearts == 0
    assert thought.liked_by == []
    assert thought.category == "General"
    assert thought.created_at is not None


@pytest.mark.parametrize("message", ["", "ab", "   ab   ", None])
def test_short_messages_are_rejected(message):
    with pytest.raises(ValueError):
        validate_message(message)


def test_like_and_unlike_move_together():
    thought = Thought.create_thought("Coffee time", "Food")

    thought.like("u1")
    thought.like("u2")
    assert thought.hearts == 2
    assert thought.liked_by == ["u1", "u2"]

    thought.unlike("u1")
    assert thought.hearts == 1
    assert thought.liked_by == ["u2"]


def test_double_like_leaves_state_unchanged():
    thought = Thought.create_thought("Only one like")
    thought.like("u1")

    with pytest.raises(ValueError, match="already liked"):
        thought.like("u1")

    assert thought.hearts == 1
    assert thought.liked_by == ["u1"]


def test_unlike_without_like_leaves_state_unchanged():
    thought = Thought.create_thought("Nobody likes me")

    with pytest.raises(ValueError, match="haven't liked"):
        thought.unlike("u1")

    assert thought.hearts == 0
    assert thought.liked_by == []


def test_hearts_never_go_below_zero():
    # Старые записи могут хранить счетчик, не совпадающий со списком
    thought = Thought(uuid=None, message="Legacy", hearts=0, liked_by=["u1"])
    thought.unlike("u1")
    assert thought.hearts == 0
    assert thought.liked_by == []


def test_update_message_validates():
    thought = Thought.create_thought("Original")
    with pytest.raises(ValueError):
        thought.update_message("no")
    assert thought.message == "Original"

    thought.update_message("Edited text")
    assert thought.message == "Edited text"


def test_matches_category_is_case_insensitive():
    thought = Thought.create_thought("Tacos", "Food")
    assert thought.matches_category("food")
    assert thought.matches_category("FOOD")
    assert not thought.matches_category("foo")
