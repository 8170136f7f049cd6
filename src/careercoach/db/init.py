from __future__ import annotations

from careercoach.config import get_settings
from careercoach.db.base import Base
from careercoach.db.session import SessionLocal, engine
from careercoach.db import models  # noqa: F401
from careercoach.db.seed import seed_demo_profile


def ensure_data_directories() -> None:
    settings = get_settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def init_database(*, demo: bool = False) -> dict[str, int]:
    ensure_data_directories()
    Base.metadata.create_all(bind=engine)

    seeded = 0
    if demo:
        with SessionLocal() as session:
            seeded = int(seed_demo_profile(session))
    return {"tables": len(Base.metadata.tables), "seeded_users": seeded}
