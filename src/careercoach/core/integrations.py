from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

INTERVIEW_STATUS = "interview"


def parse_application_emails(user_id: str) -> list[dict[str, str]]:
    """Application emails found in the user's mailbox (canned until a mail provider is connected)."""
    logger.debug("Returning canned application emails for user=%s", user_id)
    return [
        {"subject": "Application Confirmation", "body": "Your application has been received."},
        {"subject": "Interview Invitation", "body": "You are invited for an interview."},
    ]


def schedule_interview(user_id: str, details: dict[str, Any]) -> dict[str, Any]:
    logger.debug("Returning canned calendar event for user=%s details=%s", user_id, details)
    return {"eventId": "event123", "status": "scheduled", **details}


def needs_interview(status: Any) -> bool:
    return isinstance(status, str) and status.strip().lower() == INTERVIEW_STATUS
