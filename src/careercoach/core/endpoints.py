from __future__ import annotations

from typing import Any

from careercoach.core.integrations import needs_interview, parse_application_emails, schedule_interview
from careercoach.core.market_data import fetch_market_data
from careercoach.core.pipeline import Endpoint, GenerationPipeline, compact_json
from careercoach.db.models import (
    CareerGuidance,
    CareerPath,
    CoverLetter,
    IndustryInsight,
    InterviewSession,
    JobApplication,
    JobSearch,
    LinkedInProfile,
    Onboarding,
    Resume,
)
from careercoach.llm import prompts
from careercoach.types import Artifact, DegradedArtifact, GeneratedArtifact, GenerationRequest

ROLE_FIELDS = ("userId", "targetRole", "industry")


def _market_context(params: dict[str, Any]) -> dict[str, Any]:
    return fetch_market_data(str(params["industry"]))


def _industry_response(request: GenerationRequest, view: dict[str, Any]) -> dict[str, Any]:
    return {"industry": request.params["industry"], "marketData": request.context, **view}


def _resume_with_evaluation(
    pipeline: GenerationPipeline, endpoint: Endpoint, request: GenerationRequest
) -> Artifact:
    resume = pipeline.generate(endpoint.render_prompt(request))
    if isinstance(resume, DegradedArtifact):
        return resume

    evaluation = pipeline.generate(
        prompts.RESUME_EVALUATION_PROMPT.format(
            target_role=request.params["targetRole"],
            industry=request.params["industry"],
            resume_json=compact_json(resume.fields),
        )
    )
    return GeneratedArtifact(
        fields={
            **resume.fields,
            "atsScore": evaluation.fields.get("atsScore"),
            "evaluation": evaluation.as_dict(),
        }
    )


def _track_application(
    pipeline: GenerationPipeline, endpoint: Endpoint, request: GenerationRequest
) -> Artifact:
    user_id = request.user_id or ""
    interview_event = None
    if needs_interview(request.params.get("status")):
        interview_event = schedule_interview(
            user_id,
            {
                "company": request.params["company"],
                "position": request.params["position"],
                "date": request.params["appliedDate"],
            },
        )
    return GeneratedArtifact(
        fields={
            "parsedEmails": parse_application_emails(user_id),
            "interviewEvent": interview_event,
        }
    )


_JOB_APPLICATION_REQUIRED = ("userId", "company", "position", "status", "source", "appliedDate")
_JOB_APPLICATION_OPTIONAL = ("jobUrl", "description", "notes")


def _job_application_endpoint(name: str) -> Endpoint:
    return Endpoint(
        name=name,
        summary="Record a job application with parsed emails and interview scheduling",
        model=JobApplication,
        required=_JOB_APPLICATION_REQUIRED,
        optional=_JOB_APPLICATION_OPTIONAL,
        stored_fields=("parsedEmails", "interviewEvent"),
        response_fields=(
            *_JOB_APPLICATION_REQUIRED[1:],
            *_JOB_APPLICATION_OPTIONAL,
            "parsedEmails",
            "interviewEvent",
        ),
        response_key="jobApplication",
        columns={"status": "application_status"},
        produce=_track_application,
    )


ENDPOINTS: tuple[Endpoint, ...] = (
    Endpoint(
        name="career-guidance",
        summary="Personalized career guidance for a target role",
        model=CareerGuidance,
        required=ROLE_FIELDS,
        stored_fields=("guidance", "strategicAdvice", "growthSuggestions"),
        response_fields=("guidance", "strategicAdvice", "growthSuggestions"),
        response_key="careerGuidance",
        prompt=prompts.CAREER_GUIDANCE_PROMPT,
    ),
    Endpoint(
        name="career-path",
        summary="Milestones and skills on the way to a target role",
        model=CareerPath,
        required=ROLE_FIELDS,
        stored_fields=("milestones", "requiredSkills", "estimatedCompletionTime", "progressTracking"),
        response_fields=("milestones", "requiredSkills", "estimatedCompletionTime", "progressTracking"),
        response_key="careerPath",
        prompt=prompts.CAREER_PATH_PROMPT,
    ),
    Endpoint(
        name="cover-letter",
        summary="ATS-optimized cover letter for a job posting",
        model=CoverLetter,
        required=("userId", "jobDescription", "companyName", "jobTitle"),
        stored_fields=("content", "feedback", "improvementTip"),
        response_fields=("content", "feedback", "improvementTip"),
        response_key="coverLetter",
        prompt=prompts.COVER_LETTER_PROMPT,
    ),
    Endpoint(
        name="industry-pulse",
        summary="Market data and insights for an industry",
        method="GET",
        model=IndustryInsight,
        required=("industry",),
        requires_profile=False,
        missing_message="Missing industry parameter",
        stored_fields=(
            "salaryRange",
            "growthRate",
            "demandLevel",
            "keyTrends",
            "insights",
            "learningSuggestions",
        ),
        response_fields=("insights", "learningSuggestions"),
        prompt=prompts.INDUSTRY_PULSE_PROMPT,
        context=_market_context,
        respond=_industry_response,
    ),
    Endpoint(
        name="interview-prep",
        summary="Interview questions with model answers",
        model=InterviewSession,
        required=ROLE_FIELDS,
        stored_fields=("questions", "feedback", "tips"),
        response_fields=("questions", "feedback", "tips"),
        response_key="interviewPrep",
        prompt=prompts.INTERVIEW_PREP_PROMPT,
    ),
    Endpoint(
        name="interview",
        summary="Interview tips, common questions and strategy",
        model=InterviewSession,
        required=ROLE_FIELDS,
        stored_fields=("tips", "commonQuestions", "strategicAdvice"),
        response_fields=("tips", "commonQuestions", "strategicAdvice"),
        response_key="interviewPrep",
        prompt=prompts.INTERVIEW_PROMPT,
    ),
    Endpoint(
        name="job-search",
        summary="Job search strategies for a target role",
        model=JobSearch,
        required=ROLE_FIELDS,
        stored_fields=("strategies", "recommendations", "insights"),
        response_fields=("strategies", "recommendations", "insights"),
        response_key="jobSearch",
        prompt=prompts.JOB_SEARCH_PROMPT,
    ),
    _job_application_endpoint("job-tracker"),
    _job_application_endpoint("job-application-tracker"),
    Endpoint(
        name="linkedin-optimizer",
        summary="LinkedIn profile analysis and optimization tips",
        model=LinkedInProfile,
        required=("userId", "linkedInUrl", "targetRole", "industry"),
        stored_fields=("analysis", "growthSuggestions", "optimizationTips"),
        response_fields=("analysis", "growthSuggestions", "optimizationTips"),
        response_key="linkedInProfile",
        prompt=prompts.LINKEDIN_OPTIMIZER_PROMPT,
    ),
    Endpoint(
        name="onboarding",
        summary="Onboarding content from preferences and goals",
        model=Onboarding,
        required=("userId", "preferences", "goals"),
        stored_fields=("content", "recommendations", "nextSteps"),
        response_fields=("content", "recommendations", "nextSteps"),
        response_key="onboarding",
        prompt=prompts.ONBOARDING_PROMPT,
    ),
    Endpoint(
        name="resume",
        summary="ATS-optimized resume with an automated evaluation",
        model=Resume,
        required=ROLE_FIELDS,
        stored_fields=("content", "feedback", "improvementTip", "atsScore", "evaluation"),
        response_fields=("content", "feedback", "improvementTip", "atsScore"),
        response_key="resume",
        prompt=prompts.RESUME_PROMPT,
        produce=_resume_with_evaluation,
    ),
)

ENDPOINTS_BY_NAME: dict[str, Endpoint] = {endpoint.name: endpoint for endpoint in ENDPOINTS}


def get_endpoint(name: str) -> Endpoint:
    try:
        return ENDPOINTS_BY_NAME[name]
    except KeyError as exc:
        raise KeyError(f"unknown endpoint '{name}'") from exc
