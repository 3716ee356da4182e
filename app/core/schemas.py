from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Общий конверт ответа API"""
    success: bool
    message: str
    response: Optional[T] = None
