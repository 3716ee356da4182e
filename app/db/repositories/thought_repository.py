from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func, case
from sqlalchemy.exc import IntegrityError
import uuid

from app.db.models.thought import Thought as ThoughtModel, ThoughtLike as ThoughtLikeModel

if TYPE_CHECKING:
    from app.domains.thoughts.entities import Thought


class ThoughtRepository:
    """Репозиторий для работы с мыслями"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, thought: "Thought") -> "Thought":
        """Создание новой мысли"""
        db_thought = self._to_model(thought)

        self.session.add(db_thought)
        await self.session.commit()
        return await self.get_by_uuid(thought.uuid)

    async def create_many(self, thoughts: List["Thought"]) -> None:
        """Пакетная вставка мыслей"""
        self.session.add_all([self._to_model(thought) for thought in thoughts])
        await self.session.commit()

    async def get_by_uuid(self, thought_uuid: uuid.UUID) -> Optional["Thought"]:
        """Получение мысли по UUID"""
        # populate_existing перечитывает счетчик и лайки после атомарных UPDATE
        result = await self.session.execute(
            select(ThoughtModel)
            .where(ThoughtModel.uuid == thought_uuid)
            .execution_options(populate_existing=True)
        )
        db_thought = result.scalar_one_or_none()
        return self._to_domain(db_thought) if db_thought else None

    async def get_all(self) -> List["Thought"]:
        """Получение всех мыслей в порядке создания"""
        result = await self.session.execute(
            select(ThoughtModel)
            .order_by(ThoughtModel.created_at.asc())
            .execution_options(populate_existing=True)
        )
        return [self._to_domain(db_thought) for db_thought in result.scalars().all()]

    async def get_liked_by(self, user_id: str) -> List["Thought"]:
        """Мысли, в лайках которых есть пользователь"""
        result = await self.session.execute(
            select(ThoughtModel)
            .join(ThoughtLikeModel, ThoughtLikeModel.thought_id == ThoughtModel.uuid)
            .where(ThoughtLikeModel.user_id == user_id)
            .order_by(ThoughtModel.created_at.asc())
            .execution_options(populate_existing=True)
        )
        return [self._to_domain(db_thought) for db_thought in result.scalars().unique().all()]

    async def count(self) -> int:
        """Подсчет количества мыслей"""
        result = await self.session.execute(select(func.count(ThoughtModel.uuid)))
        return result.scalar()

    async def update_message(self, thought_uuid: uuid.UUID, message: str) -> Optional["Thought"]:
        """Обновление текста мысли"""
        stmt = (
            update(ThoughtModel)
            .where(ThoughtModel.uuid == thought_uuid)
            .values(message=message)
        )

        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            return None
        return await self.get_by_uuid(thought_uuid)

    async def delete(self, thought_uuid: uuid.UUID) -> Optional["Thought"]:
        """Удаление мысли вместе с лайками"""
        result = await self.session.execute(
            select(ThoughtModel)
            .where(ThoughtModel.uuid == thought_uuid)
            .execution_options(populate_existing=True)
        )
        db_thought = result.scalar_one_or_none()

        if not db_thought:
            return None

        deleted = self._to_domain(db_thought)
        await self.session.delete(db_thought)
        await self.session.commit()
        return deleted

    async def add_like(self, thought_uuid: uuid.UUID, user_id: str) -> bool:
        """Добавление лайка и увеличение счетчика в одной транзакции"""
        self.session.add(ThoughtLikeModel(thought_id=thought_uuid, user_id=user_id))
        try:
            await self.session.flush()
        except IntegrityError:
            await self.session.rollback()
            return False

        await self.session.execute(
            update(ThoughtModel)
            .where(ThoughtModel.uuid == thought_uuid)
            .values(hearts=ThoughtModel.hearts + 1)
        )
        await self.session.commit()
        return True

    async def remove_like(self, thought_uuid: uuid.UUID, user_id: str) -> bool:
        """Удаление лайка и уменьшение счетчика (не ниже нуля)"""
        result = await self.session.execute(
            delete(ThoughtLikeModel).where(
                ThoughtLikeModel.thought_id == thought_uuid,
                ThoughtLikeModel.user_id == user_id
            )
        )

        if result.rowcount == 0:
            await self.session.rollback()
            return False

        await self.session.execute(
            update(ThoughtModel)
            .where(ThoughtModel.uuid == thought_uuid)
            .values(hearts=case((ThoughtModel.hearts > 0, ThoughtModel.hearts - 1), else_=0))
        )
        await self.session.commit()
        return True

    def _to_model(self, thought: "Thought") -> ThoughtModel:
        """Преобразование доменной сущности в модель БД"""
        return ThoughtModel(
            uuid=thought.uuid,
            message=thought.message,
            hearts=thought.hearts,
            category=thought.category,
            created_at=thought.created_at,
            likes=[
                ThoughtLikeModel(thought_id=thought.uuid, user_id=user_id)
                for user_id in thought.liked_by
            ]
        )

    def _to_domain(self, db_thought: ThoughtModel) -> "Thought":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.thoughts.entities import Thought

        return Thought(
            uuid=db_thought.uuid,
            message=db_thought.message,
            hearts=db_thought.hearts,
            liked_by=[like.user_id for like in db_thought.likes],
            category=db_thought.category,
            created_at=db_thought.created_at
        )
