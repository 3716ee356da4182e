import asyncio

from app.db.repositories.thought_repository import ThoughtRepository
from app.domains.thoughts.entities import Thought


async def like_from_two_sessions(database):
    await database.connect()
    try:
        await database.create_tables()
        async with database.session() as session:
            thought = await ThoughtRepository(session).create(
                Thought.create_thought("Race for the heart")
            )

        # Обе сессии прошли проверку сущности до вставки лайка
        async with database.session() as first, database.session() as second:
            first_result = await ThoughtRepository(first).add_like(thought.uuid, "u1")
            second_result = await ThoughtRepository(second).add_like(thought.uuid, "u1")

        async with database.session() as session:
            stored = await ThoughtRepository(session).get_by_uuid(thought.uuid)
        return first_result, second_result, stored
    finally:
        await database.disconnect()


def test_second_like_from_stale_session_is_rejected(database):
    first, second, stored = asyncio.run(like_from_two_sessions(database))

    assert (first, second) == (True, False)
    assert stored.hearts == 1
    assert stored.liked_by == ["u1"]
