import asyncio
import json
from datetime import datetime
from pathlib import Path

from app.domains.thoughts.services import ThoughtService, ThoughtListQuery


async def seed_twice(database, path):
    await database.connect()
    try:
        await database.create_tables()
        async with database.session() as session:
            first = await ThoughtService(session).seed_from_file(str(path))
        async with database.session() as session:
            second = await ThoughtService(session).seed_from_file(str(path))
            thoughts, total = await ThoughtService(session).list_thoughts(
                ThoughtListQuery(sort_by="date")
            )
        return first, second, thoughts, total
    finally:
        await database.disconnect()


def test_seed_loads_once(database, tmp_path):
    path = tmp_path / "thoughts.json"
    path.write_text(json.dumps([
        {"message": "Berlin baby", "hearts": 37, "category": "Travel",
         "createdAt": "2023-05-22T22:23:49.158Z"},
        {"message": "cold beer", "hearts": 2, "createdAt": "2023-05-21T19:05:34.113Z"},
    ]))

    first, second, thoughts, total = asyncio.run(seed_twice(database, path))

    assert first == 2
    assert second == 0
    assert total == 2
    assert [t.message for t in thoughts] == ["Berlin baby", "cold beer"]
    assert thoughts[0].hearts == 37
    assert thoughts[0].liked_by == []
    assert thoughts[1].category == "General"
    assert thoughts[0].created_at == datetime(2023, 5, 22, 22, 23, 49, 158000)


def test_bundled_seed_file_is_valid():
    path = Path(__file__).parent.parent / "app" / "data" / "thoughts.json"
    records = json.loads(path.read_text(encoding="utf-8"))
    assert records
    for record in records:
        thought = ThoughtService._from_seed_record(record)
        assert len(thought.message) >= 3
        assert thought.hearts >= 0


def test_seed_record_with_null_hearts():
    thought = ThoughtService._from_seed_record({"message": "Null hearts", "hearts": None})
    assert thought.hearts == 0
