from __future__ import annotations

import json
from typing import Any

import typer
import uvicorn

from careercoach.api.app import create_app
from careercoach.api.deps import get_generator
from careercoach.config import get_settings
from careercoach.core.endpoints import ENDPOINTS, get_endpoint
from careercoach.core.pipeline import GenerationPipeline
from careercoach.db.init import init_database
from careercoach.db.repositories import Repository, serialize_profile
from careercoach.db.session import SessionLocal
from careercoach.errors import CoachError
from careercoach.logging_config import configure_logging

app = typer.Typer(help="Career coach CLI")
user_app = typer.Typer(help="Manage user profiles")

app.add_typer(user_app, name="user")

_INITIALIZED = False


def ensure_initialized() -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return
    init_database()
    _INITIALIZED = True


def parse_param(raw: str) -> tuple[str, Any]:
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise typer.BadParameter(f"expected key=value, got '{raw}'")
    try:
        return key.strip(), json.loads(value)
    except json.JSONDecodeError:
        return key.strip(), value


@app.command("init")
def init_cmd(demo: bool = typer.Option(False, "--demo", help="Also insert the demo user 'u1'")) -> None:
    """Create tables and the data directory."""
    configure_logging()
    result = init_database(demo=demo)
    typer.echo(json.dumps({"ok": True, **result}, indent=2))


@user_app.command("create")
def user_create(
    user_id: str | None = typer.Option(None, "--id"),
    name: str = typer.Option("", "--name"),
    email: str = typer.Option("", "--email"),
    headline: str = typer.Option("", "--headline"),
    skills: list[str] = typer.Option([], "--skill", help="Skill name, repeatable"),
    education: list[str] = typer.Option([], "--education", help="institution:degree:field, repeatable"),
) -> None:
    configure_logging()
    ensure_initialized()
    with SessionLocal() as db:
        repo = Repository(db)
        if user_id and repo.get_user(user_id):
            raise typer.BadParameter(f"user {user_id} already exists")

        user = repo.create_user(user_id=user_id, name=name, email=email, headline=headline)
        for skill in skills:
            repo.add_skill(user.id, skill)
        for item in education:
            institution, _, rest = item.partition(":")
            degree, _, field = rest.partition(":")
            repo.add_education(user.id, institution, degree=degree, field=field)
        typer.echo(json.dumps({"id": user.id, "name": user.name}, indent=2))


@user_app.command("show")
def user_show(user_id: str = typer.Option(..., "--id")) -> None:
    configure_logging()
    ensure_initialized()
    with SessionLocal() as db:
        user = Repository(db).get_profile(user_id)
        if user is None:
            raise typer.BadParameter(f"user {user_id} not found")
        typer.echo(json.dumps(serialize_profile(user), indent=2))


@app.command("endpoints")
def endpoints_list() -> None:
    """List the generation routes."""
    for endpoint in ENDPOINTS:
        typer.echo(f"{endpoint.method:<5} /api{endpoint.path:<26} {', '.join(endpoint.required)}")


@app.command("generate")
def generate(
    name: str = typer.Argument(..., help="Endpoint name, e.g. career-guidance"),
    params: list[str] = typer.Option([], "--param", "-p", help="key=value, repeatable; values may be JSON"),
) -> None:
    """Run one endpoint pipeline without HTTP and print its reply."""
    configure_logging()
    ensure_initialized()
    try:
        endpoint = get_endpoint(name)
    except KeyError as exc:
        raise typer.BadParameter(str(exc)) from exc

    payload = dict(parse_param(raw) for raw in params)
    with SessionLocal() as db:
        try:
            body = GenerationPipeline(db, get_generator()).run(endpoint, payload)
        except CoachError as exc:
            typer.echo(json.dumps({"error": str(exc)}, indent=2), err=True)
            raise typer.Exit(code=1) from exc
    typer.echo(json.dumps(body, indent=2, default=str))


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host"),
    port: int | None = typer.Option(None, "--port"),
) -> None:
    configure_logging()
    ensure_initialized()
    settings = get_settings()
    app_instance = create_app()
    uvicorn.run(app_instance, host=host or settings.app_host, port=port or settings.app_port)


if __name__ == "__main__":
    app()
