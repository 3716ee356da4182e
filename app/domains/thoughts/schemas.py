from pydantic import BaseModel, Field, field_validator, field_serializer, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime, timezone
import uuid

from app.core.schemas import ApiResponse
from app.domains.thoughts.entities import DEFAULT_CATEGORY, MIN_MESSAGE_LENGTH


class ThoughtCreate(BaseModel):
    """Схема для создания мысли"""
    message: str = Field(..., min_length=MIN_MESSAGE_LENGTH)
    category: Optional[str] = Field(None, max_length=100)

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator('category')
    @classmethod
    def default_category(cls, v):
        return v or DEFAULT_CATEGORY


class ThoughtUpdate(BaseModel):
    """Схема для обновления текста мысли"""
    new_message: str = Field(..., min_length=MIN_MESSAGE_LENGTH)

    model_config = ConfigDict(
        str_strip_whitespace=True, alias_generator=to_camel, populate_by_name=True
    )


class ThoughtResponse(BaseModel):
    """Схема для ответа с данными мысли"""
    id: uuid.UUID = Field(..., validation_alias="uuid", serialization_alias="id")
    message: str
    hearts: int
    liked_by: List[str]
    category: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    @field_serializer('created_at')
    def serialize_created_at(self, value: datetime) -> str:
        # В БД хранится наивное UTC время, наружу отдаем со смещением
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat()


class ThoughtListResponse(ApiResponse[List[ThoughtResponse]]):
    """Схема для страницы мыслей"""
    page: Optional[int] = None
    limit: Optional[int] = None
    total: Optional[int] = None
