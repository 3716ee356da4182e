from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    sql_echo: bool = False
    log_level: str = "INFO"

    # create_all при старте, для разработки и тестов; в проде миграции alembic
    auto_create_tables: bool = True
    seed_data_path: Optional[str] = None

    cors_origins: List[str] = ["*"]

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
