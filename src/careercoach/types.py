from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, Field

PARSE_FAILURE_MESSAGE = "Failed to parse response"


class GeneratedArtifact(BaseModel):
    """A reply whose text decoded to a JSON object. Keys are whatever the model sent."""

    kind: Literal["generated"] = "generated"
    fields: dict[str, Any] = Field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return dict(self.fields)


class DegradedArtifact(BaseModel):
    """Stand-in for a reply that arrived but could not be decoded."""

    kind: Literal["degraded"] = "degraded"
    error: str = PARSE_FAILURE_MESSAGE
    raw: Any = None

    @property
    def fields(self) -> dict[str, Any]:
        return {}

    def as_dict(self) -> dict[str, Any]:
        return {"error": self.error, "raw": self.raw}


Artifact = Union[GeneratedArtifact, DegradedArtifact]


class GenerationRequest(BaseModel):
    params: dict[str, Any] = Field(default_factory=dict)
    profile: dict[str, Any] | None = None
    context: dict[str, Any] = Field(default_factory=dict)

    @property
    def user_id(self) -> str | None:
        value = self.params.get("userId")
        return None if value is None else str(value)
