from fastapi import APIRouter, Depends, HTTPException, status, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import uuid

from app.core.auth import get_current_user, caller_identity
from app.core.db import get_db
from app.core.schemas import ApiResponse
from app.domains.identity.entities import User
from app.domains.thoughts.entities import Thought
from app.domains.thoughts.schemas import (
    ThoughtCreate, ThoughtUpdate, ThoughtResponse, ThoughtListResponse
)
from app.domains.thoughts.services import ThoughtService, ThoughtListQuery

router = APIRouter(prefix="/thoughts", tags=["thoughts"])


def _to_response(thought: Thought) -> ThoughtResponse:
    return ThoughtResponse.model_validate(thought)


@router.get(
    "",
    response_model=ThoughtListResponse,
    responses={404: {"model": ThoughtListResponse}},
)
async def list_thoughts(
    category: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    """Список мыслей с фильтром по категории, сортировкой и пагинацией"""
    thought_service = ThoughtService(db)

    query = ThoughtListQuery(category=category, sort_by=sort_by, page=page, limit=limit)
    thoughts, total = await thought_service.list_thoughts(query)

    if not thoughts:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "success": False,
                "message": "No thoughts found for that query.",
                "response": [],
            },
        )

    return ThoughtListResponse(
        success=True,
        message="Thoughts retrieved successfully.",
        page=page,
        limit=limit,
        total=total,
        response=[_to_response(thought) for thought in thoughts]
    )


@router.get("/liked/{client_id}", response_model=ApiResponse[List[ThoughtResponse]])
async def get_liked_thoughts(
    client_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Мысли, которые лайкнул пользователь"""
    thought_service = ThoughtService(db)

    thoughts = await thought_service.get_liked_thoughts(client_id)

    return ApiResponse(
        success=True,
        message="Liked thoughts retrieved.",
        response=[_to_response(thought) for thought in thoughts]
    )


@router.get("/{thought_uuid}", response_model=ApiResponse[ThoughtResponse])
async def get_thought(
    thought_uuid: uuid.UUID,
    db: AsyncSession = Depends(get_db)
):
    """Получение мысли по UUID"""
    thought_service = ThoughtService(db)

    thought = await thought_service.get_thought(thought_uuid)

    if not thought:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Thought not found."
        )

    return ApiResponse(success=True, message="Thought found.", response=_to_response(thought))


@router.post("", response_model=ApiResponse[ThoughtResponse])
async def create_thought(
    thought_data: ThoughtCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Создание новой мысли"""
    thought_service = ThoughtService(db)

    try:
        thought = await thought_service.create_thought(thought_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return ApiResponse(
        success=True,
        message="Thought created successfully.",
        response=_to_response(thought)
    )


@router.patch("/{thought_uuid}", response_model=ApiResponse[ThoughtResponse])
async def update_thought(
    thought_uuid: uuid.UUID,
    update_data: ThoughtUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Обновление текста мысли"""
    thought_service = ThoughtService(db)

    try:
        thought = await thought_service.update_message(thought_uuid, update_data.new_message)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if not thought:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Thought couldn't be found."
        )

    return ApiResponse(
        success=True,
        message="Thought updated successfully.",
        response=_to_response(thought)
    )


@router.delete("/{thought_uuid}", response_model=ApiResponse[ThoughtResponse])
async def delete_thought(
    thought_uuid: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Удаление мысли"""
    thought_service = ThoughtService(db)

    thought = await thought_service.delete_thought(thought_uuid)

    if not thought:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Thought could not be found. Can't delete."
        )

    return ApiResponse(
        success=True,
        message="Thought successfully deleted.",
        response=_to_response(thought)
    )


@router.post("/{thought_uuid}/like", response_model=ApiResponse[ThoughtResponse])
async def like_thought(
    thought_uuid: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Лайк мысли"""
    thought_service = ThoughtService(db)

    try:
        thought = await thought_service.like_thought(thought_uuid, caller_identity(current_user))
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if not thought:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Thought not found"
        )

    return ApiResponse(success=True, message="Thought liked", response=_to_response(thought))


@router.delete("/{thought_uuid}/like", response_model=ApiResponse[ThoughtResponse])
async def unlike_thought(
    thought_uuid: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Снятие лайка"""
    thought_service = ThoughtService(db)

    try:
        thought = await thought_service.unlike_thought(thought_uuid, caller_identity(current_user))
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if not thought:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Thought not found"
        )

    return ApiResponse(success=True, message="Thought unliked", response=_to_response(thought))
