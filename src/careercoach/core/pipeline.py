from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.orm import Session

from careercoach.db.base import Base
from careercoach.db.models import DRAFT_STATUS
from careercoach.db.repositories import Repository, serialize_profile
from careercoach.errors import GenerationError, NotFoundError, ValidationError
from careercoach.llm.gemini import GeminiClient, parse_artifact
from careercoach.types import Artifact, DegradedArtifact, GenerationRequest

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields"
INVALID_BODY_MESSAGE = "Invalid JSON body"

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (dict, list)):
        return False
    return not value


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Declarative description of one generate-and-store route."""

    name: str
    model: type[Base]
    required: tuple[str, ...]
    stored_fields: tuple[str, ...]
    response_fields: tuple[str, ...]
    response_key: str = ""
    prompt: str = ""
    summary: str = ""
    optional: tuple[str, ...] = ()
    method: str = "POST"
    requires_profile: bool = True
    missing_message: str = MISSING_FIELDS_MESSAGE
    columns: Mapping[str, str] = field(default_factory=dict)
    context: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    produce: Callable[[GenerationPipeline, Endpoint, GenerationRequest], Artifact] | None = None
    respond: Callable[[GenerationRequest, dict[str, Any]], dict[str, Any]] | None = None

    @property
    def path(self) -> str:
        return f"/{self.name}"

    @property
    def params(self) -> tuple[str, ...]:
        return self.required + self.optional

    def column_for(self, key: str) -> str:
        return self.columns.get(key) or to_snake(key)

    def render_prompt(self, request: GenerationRequest) -> str:
        values: dict[str, Any] = {
            "profile_json": compact_json(request.profile),
            "context_json": compact_json(request.context),
        }
        for key, value in request.params.items():
            values[to_snake(key)] = value
            values[f"{to_snake(key)}_json"] = compact_json(value)
        return self.prompt.format(**values)


def validate_payload(endpoint: Endpoint, payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationError(INVALID_BODY_MESSAGE)

    missing = [key for key in endpoint.required if is_blank(payload.get(key))]
    if missing:
        logger.info("Rejected %s request; missing=%s", endpoint.name, missing)
        raise ValidationError(endpoint.missing_message)

    return {key: payload[key] for key in endpoint.params if key in payload}


class GenerationPipeline:
    def __init__(self, session: Session, generator: GeminiClient):
        self.session = session
        self.repo = Repository(session)
        self.generator = generator

    def run(self, endpoint: Endpoint, payload: Any) -> dict[str, Any]:
        params = validate_payload(endpoint, payload)

        profile = None
        if endpoint.requires_profile:
            user = self.repo.get_profile(str(params["userId"]))
            if user is None:
                raise NotFoundError()
            profile = serialize_profile(user)

        context = endpoint.context(params) if endpoint.context else {}
        request = GenerationRequest(params=params, profile=profile, context=context)

        if endpoint.produce is not None:
            artifact = endpoint.produce(self, endpoint, request)
        else:
            artifact = self.generate(endpoint.render_prompt(request))

        record = self.repo.insert(endpoint.model, self.record_values(endpoint, request, artifact))
        logger.info(
            "Stored %s record id=%s user=%s degraded=%s",
            endpoint.name,
            record.id,
            request.user_id,
            isinstance(artifact, DegradedArtifact),
        )
        return self.shape_response(endpoint, request, artifact)

    def generate(self, prompt: str) -> Artifact:
        try:
            envelope = self.generator.generate(prompt)
        except GenerationError as exc:
            logger.warning("Generation call failed: %s", exc)
            raise
        return parse_artifact(envelope)

    @staticmethod
    def record_values(endpoint: Endpoint, request: GenerationRequest, artifact: Artifact) -> dict[str, Any]:
        values: dict[str, Any] = {"status": DRAFT_STATUS}
        for key in endpoint.params:
            values[endpoint.column_for(key)] = request.params.get(key)

        source = {**artifact.fields, **request.context}
        for key in endpoint.stored_fields:
            values[endpoint.column_for(key)] = source.get(key)
        return values

    @staticmethod
    def shape_response(endpoint: Endpoint, request: GenerationRequest, artifact: Artifact) -> dict[str, Any]:
        if isinstance(artifact, DegradedArtifact):
            view = artifact.as_dict()
        else:
            source = {**artifact.fields, **request.params, **request.context}
            view = {key: source[key] for key in endpoint.response_fields if key in source}

        if endpoint.respond is not None:
            return endpoint.respond(request, view)
        return {"userId": request.params.get("userId"), endpoint.response_key: view}
