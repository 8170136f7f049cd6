import pytest

from careercoach.core.endpoints import get_endpoint
from careercoach.core.pipeline import GenerationPipeline, is_blank, to_snake, validate_payload
from careercoach.errors import ValidationError
from careercoach.types import GeneratedArtifact, GenerationRequest


def test_missing_required_field_is_rejected() -> None:
    endpoint = get_endpoint("career-guidance")

    with pytest.raises(ValidationError, match="Missing required fields"):
        validate_payload(endpoint, {"targetRole": "X"})


@pytest.mark.parametrize("blank", [None, "", 0, False])
def test_blank_values_count_as_missing(blank) -> None:
    endpoint = get_endpoint("career-guidance")

    with pytest.raises(ValidationError):
        validate_payload(endpoint, {"userId": "u1", "targetRole": blank, "industry": "Tech"})


def test_non_object_payload_is_rejected() -> None:
    endpoint = get_endpoint("career-guidance")

    with pytest.raises(ValidationError, match="Invalid JSON body"):
        validate_payload(endpoint, ["userId", "u1"])


def test_industry_pulse_uses_its_own_message() -> None:
    with pytest.raises(ValidationError, match="Missing industry parameter"):
        validate_payload(get_endpoint("industry-pulse"), {})


def test_only_declared_params_are_kept() -> None:
    endpoint = get_endpoint("job-tracker")
    payload = {
        "userId": "u1",
        "company": "Acme",
        "position": "Engineer",
        "status": "applied",
        "source": "referral",
        "appliedDate": "2026-10-01",
        "notes": "follow up",
        "unexpected": "dropped",
    }

    params = validate_payload(endpoint, payload)

    assert "unexpected" not in params
    assert params["notes"] == "follow up"
    assert "jobUrl" not in params


def test_empty_objects_are_present_values() -> None:
    assert not is_blank({})
    assert not is_blank([])
    assert is_blank("")


def test_to_snake_maps_request_keys_to_columns() -> None:
    assert to_snake("userId") == "user_id"
    assert to_snake("linkedInUrl") == "linked_in_url"
    assert to_snake("industry") == "industry"
    assert get_endpoint("job-tracker").column_for("status") == "application_status"


def test_request_and_market_data_take_precedence_over_generated_keys() -> None:
    endpoint = get_endpoint("job-tracker")
    request = GenerationRequest(
        params={"userId": "u1", "company": "Acme", "status": "applied"},
        profile={},
        context={},
    )
    artifact = GeneratedArtifact(fields={"company": "Spoofed", "parsedEmails": []})

    view = GenerationPipeline.shape_response(endpoint, request, artifact)["jobApplication"]

    assert view["company"] == "Acme"
    assert view["parsedEmails"] == []

    pulse = get_endpoint("industry-pulse")
    market = GenerationRequest(params={"industry": "Tech"}, profile=None, context={"growthRate": 15})
    values = GenerationPipeline.record_values(pulse, market, GeneratedArtifact(fields={"growthRate": 99}))
    assert values["growth_rate"] == 15
