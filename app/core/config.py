from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from fastapi import Depends
from pydantic_settings import BaseSettings
from typing_extensions import Annotated

load_dotenv()


class Settings(BaseSettings):
    app_title: str = "Task Management API"
    app_version: str = "1.0.0"
    api_prefix: str = "/api/tasks"

    database_url: str = "sqlite+aiosqlite:///./tasks.db"
    database_echo: bool = False
    create_tables_on_startup: bool = True

    # "sql" persists through the database, "memory" keeps tasks in process
    task_store: Literal["sql", "memory"] = "sql"

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()


SettingsDep = Annotated[Settings, Depends(get_settings)]
