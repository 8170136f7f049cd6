from __future__ import annotations

from sqlalchemy.orm import Session

from careercoach.db.repositories import Repository

DEMO_USER: dict[str, object] = {
    "id": "u1",
    "name": "Demo User",
    "email": "demo@example.com",
    "headline": "Analyst moving into data science",
    "skills": [
        {"name": "Python", "level": "advanced", "years": 4.0},
        {"name": "SQL", "level": "advanced", "years": 5.0},
        {"name": "Statistics", "level": "intermediate", "years": 2.0},
    ],
    "education": [
        {
            "institution": "State University",
            "degree": "BSc",
            "field": "Economics",
            "graduation_year": 2019,
        },
    ],
}


def seed_demo_profile(session: Session, user_id: str | None = None) -> bool:
    """Insert the demo user with skills and education. Returns False when it already exists."""
    repo = Repository(session)
    target_id = user_id or str(DEMO_USER["id"])
    if repo.get_user(target_id) is not None:
        return False

    repo.create_user(
        user_id=target_id,
        name=str(DEMO_USER["name"]),
        email=str(DEMO_USER["email"]),
        headline=str(DEMO_USER["headline"]),
    )
    for skill in DEMO_USER["skills"]:
        repo.add_skill(target_id, **skill)
    for item in DEMO_USER["education"]:
        repo.add_education(target_id, **item)
    return True
