from __future__ import annotations

import json
import logging
from time import monotonic
from typing import Any

import requests

from careercoach.config import Settings, get_settings
from careercoach.errors import GenerationError
from careercoach.types import Artifact, DegradedArtifact, GeneratedArtifact

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


def encode_request(prompt: str) -> bytes:
    body = {"contents": [{"parts": [{"text": prompt}]}]}
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON value")


def loads_strict(text: str | bytes) -> Any:
    """json.loads that refuses NaN, Infinity and -Infinity."""
    return json.loads(text, parse_constant=reject_constant)


class GeminiClient:
    """Single-shot client for the generateContent REST endpoint.

    Every call opens its own connection through ``requests.post``, so one
    client can be shared by threadpool workers.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def generate(self, prompt: str) -> dict[str, Any]:
        """POST one prompt and return the decoded response envelope.

        ``gemini_timeout_sec`` bounds the whole exchange: connect, each read,
        and the total time spent receiving the body. Raises GenerationError
        on timeouts, transport failures, non-2xx statuses and bodies that are
        not JSON. Nothing is retried.
        """
        if not self.settings.gemini_api_key:
            logger.warning("GEMINI_API_KEY is empty; the request will likely be rejected")

        timeout = self.settings.gemini_timeout_sec
        deadline = monotonic() + timeout
        try:
            response = requests.post(
                self.settings.generate_content_url,
                params={"key": self.settings.gemini_api_key},
                data=encode_request(prompt),
                headers={"Content-Type": "application/json"},
                timeout=timeout,
                stream=True,
            )
            with response:
                if not 200 <= response.status_code < 300:
                    raise GenerationError(f"generation service returned HTTP {response.status_code}")
                body = self._read_body(response, deadline)
        except requests.Timeout as exc:
            raise GenerationError(f"generation request timed out after {timeout}s") from exc
        except requests.RequestException as exc:
            raise GenerationError(f"generation request failed: {type(exc).__name__}") from exc

        try:
            envelope = loads_strict(body)
        except ValueError as exc:
            raise GenerationError("generation service returned a non-JSON body") from exc

        if not isinstance(envelope, dict):
            raise GenerationError("generation service returned an unexpected envelope")
        return envelope

    def _read_body(self, response: requests.Response, deadline: float) -> bytes:
        chunks: list[bytes] = []
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            if monotonic() > deadline:
                raise GenerationError(
                    f"generation request timed out after {self.settings.gemini_timeout_sec}s"
                )
            chunks.append(chunk)
        return b"".join(chunks)


def extract_text(envelope: Any) -> str | None:
    if not isinstance(envelope, dict):
        return None
    candidates = envelope.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return None

    content = candidates[0].get("content")
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None

    text = parts[0].get("text")
    return text if isinstance(text, str) else None


def strip_code_fence(text: str) -> str:
    candidate = text.strip()
    if "```" not in candidate:
        return candidate

    for part in candidate.split("```"):
        part = part.strip()
        if part.startswith("json"):
            part = part[4:].strip()
        if part.startswith("{") and part.endswith("}"):
            return part
    return candidate


def parse_artifact(envelope: Any) -> Artifact:
    text = extract_text(envelope)
    if text is None:
        logger.warning("Generation envelope carried no candidate text")
        return DegradedArtifact(raw=envelope)

    try:
        value = loads_strict(strip_code_fence(text))
    except ValueError:
        logger.warning("Failed to parse generated text as JSON")
        return DegradedArtifact(raw=envelope)

    if not isinstance(value, dict):
        logger.warning("Generated JSON was a %s, not an object", type(value).__name__)
        return DegradedArtifact(raw=envelope)
    return GeneratedArtifact(fields=value)
