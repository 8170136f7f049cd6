import pytest

from careercoach.llm.gemini import extract_text, parse_artifact, strip_code_fence
from careercoach.types import DegradedArtifact, GeneratedArtifact


def test_parses_first_candidate_text_as_object(envelope) -> None:
    raw = envelope('{"guidance": "Go", "strategicAdvice": ["a", "b"]}')

    artifact = parse_artifact(raw)

    assert isinstance(artifact, GeneratedArtifact)
    assert artifact.fields == {"guidance": "Go", "strategicAdvice": ["a", "b"]}


def test_markdown_fenced_json_is_accepted(envelope) -> None:
    artifact = parse_artifact(envelope('```json\n{"tips": ["x"]}\n```'))

    assert isinstance(artifact, GeneratedArtifact)
    assert artifact.fields == {"tips": ["x"]}


def test_malformed_text_degrades_with_raw_envelope(envelope) -> None:
    raw = envelope("Sure! Here is your guidance: be brave.")

    artifact = parse_artifact(raw)

    assert isinstance(artifact, DegradedArtifact)
    assert artifact.fields == {}
    assert artifact.as_dict() == {"error": "Failed to parse response", "raw": raw}


def test_json_that_is_not_an_object_degrades(envelope) -> None:
    assert isinstance(parse_artifact(envelope('["a", "b"]')), DegradedArtifact)
    assert isinstance(parse_artifact(envelope("42")), DegradedArtifact)


def test_missing_candidates_degrades() -> None:
    raw = {"promptFeedback": {"blockReason": "SAFETY"}}

    artifact = parse_artifact(raw)

    assert isinstance(artifact, DegradedArtifact)
    assert artifact.raw == raw


def test_extract_text_tolerates_partial_envelopes() -> None:
    assert extract_text(None) is None
    assert extract_text({"candidates": []}) is None
    assert extract_text({"candidates": [{"content": {}}]}) is None
    assert extract_text({"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]}) is None
    assert extract_text({"candidates": [{"content": {"parts": [{"text": "hi"}]}}]}) == "hi"


def test_strip_code_fence_leaves_plain_text_alone() -> None:
    assert strip_code_fence('  {"a": 1}  ') == '{"a": 1}'
    assert strip_code_fence("```\nnot json\n```") == "```\nnot json\n```"


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_numbers_degrade(envelope, constant) -> None:
    raw = envelope('{"guidance": %s, "strategicAdvice": []}' % constant)

    artifact = parse_artifact(raw)

    assert isinstance(artifact, DegradedArtifact)
    assert artifact.raw == raw
