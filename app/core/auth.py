import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.domains.identity.entities import User
from app.domains.identity.services import IdentityService

logger = logging.getLogger(__name__)

# auto_error=False: отсутствие заголовка отдаем как 401, а не 403
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Зависимость для получения текущего пользователя по bearer токену"""
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")

    identity_service = IdentityService(db)
    user = await identity_service.get_current_user_from_token(credentials.credentials)

    if not user:
        logger.info("Rejected bearer token")
        raise _unauthorized("Could not validate credentials")

    return user


def caller_identity(user: User) -> str:
    """Идентификатор вызывающего, которым помечаются лайки"""
    return str(user.uuid)
