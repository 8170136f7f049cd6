from __future__ import annotations

import logging
from typing import Any, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from careercoach.db.base import Base
from careercoach.db.models import Education, Skill, User
from careercoach.errors import PersistenceError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Base)


class Repository:
    def __init__(self, session: Session):
        self.session = session

    def create_user(self, *, user_id: str | None = None, name: str = "", email: str = "", headline: str = "") -> User:
        user = User(name=name, email=email, headline=headline)
        if user_id:
            user.id = user_id
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def add_skill(self, user_id: str, name: str, level: str = "", years: float = 0.0) -> Skill:
        skill = Skill(user_id=user_id, name=name, level=level, years=years)
        self.session.add(skill)
        self.session.commit()
        self.session.refresh(skill)
        return skill

    def add_education(
        self,
        user_id: str,
        institution: str,
        degree: str = "",
        field: str = "",
        graduation_year: int | None = None,
    ) -> Education:
        education = Education(
            user_id=user_id,
            institution=institution,
            degree=degree,
            field=field,
            graduation_year=graduation_year,
        )
        self.session.add(education)
        self.session.commit()
        self.session.refresh(education)
        return education

    def get_user(self, user_id: str) -> User | None:
        return self.session.get(User, user_id)

    def get_profile(self, user_id: str) -> User | None:
        statement = (
            select(User)
            .where(User.id == user_id)
            .options(selectinload(User.skills), selectinload(User.education))
        )
        return self.session.scalar(statement)

    def insert(self, model: type[RecordT], values: dict[str, Any]) -> RecordT:
        record = model(**values)
        self.session.add(record)
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.warning("Insert into %s failed: %s", model.__tablename__, exc)
            raise PersistenceError(f"failed to insert into {model.__tablename__}: {exc}") from exc
        self.session.refresh(record)
        return record

    def list_records(self, model: type[RecordT], user_id: str | None = None) -> list[RecordT]:
        statement = select(model)
        if user_id is not None:
            statement = statement.where(model.user_id == user_id)
        statement = statement.order_by(model.created_at)
        return list(self.session.scalars(statement).all())

    def count_records(self, model: type[Base]) -> int:
        return int(self.session.scalar(select(func.count()).select_from(model)) or 0)


def serialize_profile(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "headline": user.headline,
        "skills": [
            {"name": skill.name, "level": skill.level, "years": skill.years}
            for skill in user.skills
        ],
        "education": [
            {
                "institution": item.institution,
                "degree": item.degree,
                "field": item.field,
                "graduationYear": item.graduation_year,
            }
            for item in user.education
        ],
    }
