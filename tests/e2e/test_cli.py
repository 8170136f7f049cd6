from __future__ import annotations

import json

from typer.testing import CliRunner

from careercoach.cli.app import app
from careercoach.db.models import CareerGuidance
from careercoach.db.repositories import Repository
from careercoach.db.session import SessionLocal

runner = CliRunner()


def test_endpoints_lists_every_route() -> None:
    result = runner.invoke(app, ["endpoints"])

    assert result.exit_code == 0
    assert "/api/career-guidance" in result.output
    assert "GET" in result.output
    assert "/api/job-application-tracker" in result.output


def test_user_create_then_show() -> None:
    created = runner.invoke(
        app,
        [
            "user",
            "create",
            "--id",
            "u2",
            "--name",
            "Second",
            "--skill",
            "Go",
            "--education",
            "MIT:MSc:CS",
        ],
    )
    assert created.exit_code == 0, created.output

    shown = runner.invoke(app, ["user", "show", "--id", "u2"])
    assert shown.exit_code == 0, shown.output
    profile = json.loads(shown.output)
    assert profile["skills"][0]["name"] == "Go"
    assert profile["education"][0] == {
        "institution": "MIT",
        "degree": "MSc",
        "field": "CS",
        "graduationYear": None,
    }


def test_generate_runs_the_pipeline(monkeypatch, fake_generator) -> None:
    fake_generator.reply_json({"guidance": "g", "strategicAdvice": ["s"], "growthSuggestions": []})
    monkeypatch.setattr("careercoach.cli.app.get_generator", lambda: fake_generator)

    result = runner.invoke(
        app,
        ["generate", "career-guidance", "-p", "userId=u1", "-p", "targetRole=Analyst", "-p", "industry=Retail"],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["careerGuidance"]["guidance"] == "g"
    with SessionLocal() as db:
        assert Repository(db).count_records(CareerGuidance) == 1


def test_generate_reports_validation_errors(monkeypatch, fake_generator) -> None:
    monkeypatch.setattr("careercoach.cli.app.get_generator", lambda: fake_generator)

    result = runner.invoke(app, ["generate", "career-guidance", "-p", "userId=u1"])

    assert result.exit_code == 1


def test_generate_rejects_unknown_endpoint() -> None:
    result = runner.invoke(app, ["generate", "horoscope"])

    assert result.exit_code != 0
