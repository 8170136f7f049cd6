from __future__ import annotations

from collections.abc import Generator
from functools import lru_cache

from sqlalchemy.orm import Session

from careercoach.config import Settings, get_settings
from careercoach.db.session import get_db_session
from careercoach.llm.gemini import GeminiClient


def get_db() -> Generator[Session, None, None]:
    yield from get_db_session()


@lru_cache(maxsize=1)
def get_generator() -> GeminiClient:
    return GeminiClient(get_settings())


def get_app_settings() -> Settings:
    return get_settings()
