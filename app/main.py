import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.http import health_router, auth_router, thoughts_router
from app.core.config import settings
from app.core.db import Database
from app.core.logging import setup_logging
from app.domains.thoughts.services import ThoughtService

logger = logging.getLogger(__name__)


def _envelope(status_code: int, message: str, response=None, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "response": response},
        headers=headers,
    )


def list_endpoints(app: FastAPI) -> list:
    """Список маршрутов API для корневого эндпоинта"""
    # Схема OpenAPI собирает маршруты и из вложенных роутеров
    paths = app.openapi().get("paths", {})
    return [
        {"path": path, "methods": sorted(method.upper() for method in operations)}
        for path, operations in paths.items()
    ]


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Фабрика приложения"""
    setup_logging(settings.log_level)
    database = database or Database()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await database.connect()
        if settings.auto_create_tables:
            await database.create_tables()
        if settings.seed_data_path:
            async with database.session() as session:
                await ThoughtService(session).seed_from_file(settings.seed_data_path)
        logger.info("Happy Thoughts API started")
        yield
        await database.disconnect()
        logger.info("Happy Thoughts API stopped")

    app = FastAPI(
        title="Happy Thoughts API",
        description="API для коротких позитивных сообщений с лайками",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.database = database

    # Настройка CORS для работы с frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
            for error in exc.errors()
        ]
        return _envelope(400, "Invalid request.", errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _envelope(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Storage error on %s %s", request.method, request.url.path)
        return _envelope(500, "Database error.", str(exc))

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(thoughts_router)

    @app.get("/")
    async def root():
        """Корневой эндпоинт со списком маршрутов"""
        return {
            "message": "Welcome to the Happy Thoughts API",
            "version": "1.0.0",
            "docs": "/docs",
            "endpoints": list_endpoints(app)
        }

    return app


app = create_app()
