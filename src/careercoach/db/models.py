from __future__ import annotations

from typing import Any
from uuid import uuid4

from sqlalchemy import JSON, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from careercoach.db.base import Base, TimestampMixin

DRAFT_STATUS = "draft"


def new_id() -> str:
    return uuid4().hex


class User(TimestampMixin, Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    email: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    headline: Mapped[str] = mapped_column(String(255), default="", nullable=False)

    skills: Mapped[list[Skill]] = relationship(
        back_populates="user", order_by="Skill.id", cascade="all, delete-orphan"
    )
    education: Mapped[list[Education]] = relationship(
        back_populates="user", order_by="Education.id", cascade="all, delete-orphan"
    )
    job_applications: Mapped[list[JobApplication]] = relationship(
        back_populates="user", order_by="JobApplication.created_at"
    )


class Skill(TimestampMixin, Base):
    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    level: Mapped[str] = mapped_column(String(80), default="", nullable=False)
    years: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)

    user: Mapped[User] = relationship(back_populates="skills")


class Education(TimestampMixin, Base):
    __tablename__ = "education"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    institution: Mapped[str] = mapped_column(String(255), nullable=False)
    degree: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    field: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    graduation_year: Mapped[int | None] = mapped_column(Integer, nullable=True)

    user: Mapped[User] = relationship(back_populates="education")


class DraftRecordMixin(TimestampMixin):
    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    status: Mapped[str] = mapped_column(String(40), default=DRAFT_STATUS, nullable=False)


class CareerGuidance(DraftRecordMixin, Base):
    __tablename__ = "career_guidance"

    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    target_role: Mapped[str] = mapped_column(String(255), nullable=False)
    industry: Mapped[str] = mapped_column(String(255), nullable=False)
    guidance: Mapped[Any] = mapped_column(JSON, nullable=True)
    strategic_advice: Mapped[Any] = mapped_column(JSON, nullable=True)
    growth_suggestions: Mapped[Any] = mapped_column(JSON, nullable=True)


class CareerPath(DraftRecordMixin, Base):
    __tablename__ = "career_paths"

    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    target_role: Mapped[str] = mapped_column(String(255), nullable=False)
    industry: Mapped[str] = mapped_column(String(255), nullable=False)
    milestones: Mapped[Any] = mapped_column(JSON, nullable=True)
    required_skills: Mapped[Any] = mapped_column(JSON, nullable=True)
    estimated_completion_time: Mapped[Any] = mapped_column(JSON, nullable=True)
    progress_tracking: Mapped[Any] = mapped_column(JSON, nullable=True)


class CoverLetter(DraftRecordMixin, Base):
    __tablename__ = "cover_letters"

    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    job_description: Mapped[str] = mapped_column(Text, nullable=False)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    job_title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[Any] = mapped_column(JSON, nullable=True)
    feedback: Mapped[Any] = mapped_column(JSON, nullable=True)
    improvement_tip: Mapped[Any] = mapped_column(JSON, nullable=True)


class IndustryInsight(DraftRecordMixin, Base):
    __tablename__ = "industry_insights"

    industry: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    salary_range: Mapped[Any] = mapped_column(JSON, nullable=True)
    growth_rate: Mapped[Any] = mapped_column(JSON, nullable=True)
    demand_level: Mapped[Any] = mapped_column(JSON, nullable=True)
    key_trends: Mapped[Any] = mapped_column(JSON, nullable=True)
    insights: Mapped[Any] = mapped_column(JSON, nullable=True)
    learning_suggestions: Mapped[Any] = mapped_column(JSON, nullable=True)


class InterviewSession(DraftRecordMixin, Base):
    __tablename__ = "interview_sessions"

    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    target_role: Mapped[str] = mapped_column(String(255), nullable=False)
    industry: Mapped[str] = mapped_column(String(255), nullable=False)
    questions: Mapped[Any] = mapped_column(JSON, nullable=True)
    feedback: Mapped[Any] = mapped_column(JSON, nullable=True)
    tips: Mapped[Any] = mapped_column(JSON, nullable=True)
    common_questions: Mapped[Any] = mapped_column(JSON, nullable=True)
    strategic_advice: Mapped[Any] = mapped_column(JSON, nullable=True)


class JobApplication(DraftRecordMixin, Base):
    __tablename__ = "job_applications"

    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    company: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[str] = mapped_column(String(255), nullable=False)
    application_status: Mapped[str] = mapped_column(String(80), nullable=False)
    source: Mapped[str] = mapped_column(String(120), nullable=False)
    applied_date: Mapped[str] = mapped_column(String(64), nullable=False)
    job_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    parsed_emails: Mapped[Any] = mapped_column(JSON, nullable=True)
    interview_event: Mapped[Any] = mapped_column(JSON, nullable=True)

    user: Mapped[User] = relationship(back_populates="job_applications")


class JobSearch(DraftRecordMixin, Base):
    __tablename__ = "job_searches"

    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    target_role: Mapped[str] = mapped_column(String(255), nullable=False)
    industry: Mapped[str] = mapped_column(String(255), nullable=False)
    strategies: Mapped[Any] = mapped_column(JSON, nullable=True)
    recommendations: Mapped[Any] = mapped_column(JSON, nullable=True)
    insights: Mapped[Any] = mapped_column(JSON, nullable=True)


class LinkedInProfile(DraftRecordMixin, Base):
    __tablename__ = "linkedin_profiles"

    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    linked_in_url: Mapped[str] = mapped_column(String(500), nullable=False)
    target_role: Mapped[str] = mapped_column(String(255), nullable=False)
    industry: Mapped[str] = mapped_column(String(255), nullable=False)
    analysis: Mapped[Any] = mapped_column(JSON, nullable=True)
    growth_suggestions: Mapped[Any] = mapped_column(JSON, nullable=True)
    optimization_tips: Mapped[Any] = mapped_column(JSON, nullable=True)


class Onboarding(DraftRecordMixin, Base):
    __tablename__ = "onboarding"

    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    preferences: Mapped[Any] = mapped_column(JSON, nullable=False)
    goals: Mapped[Any] = mapped_column(JSON, nullable=False)
    content: Mapped[Any] = mapped_column(JSON, nullable=True)
    recommendations: Mapped[Any] = mapped_column(JSON, nullable=True)
    next_steps: Mapped[Any] = mapped_column(JSON, nullable=True)


class Resume(DraftRecordMixin, Base):
    __tablename__ = "resumes"

    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    target_role: Mapped[str] = mapped_column(String(255), nullable=False)
    industry: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[Any] = mapped_column(JSON, nullable=True)
    feedback: Mapped[Any] = mapped_column(JSON, nullable=True)
    improvement_tip: Mapped[Any] = mapped_column(JSON, nullable=True)
    ats_score: Mapped[Any] = mapped_column(JSON, nullable=True)
    evaluation: Mapped[Any] = mapped_column(JSON, nullable=True)
