from __future__ import annotations


class CoachError(Exception):
    """Base for failures the request pipeline classifies itself."""

    status_code = 500
    public_message = "Internal server error"
    expose_message = False

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)

    @property
    def client_message(self) -> str:
        return str(self) if self.expose_message else self.public_message


class ValidationError(CoachError):
    status_code = 400
    public_message = "Missing required fields"
    expose_message = True


class NotFoundError(CoachError):
    status_code = 404
    public_message = "User not found"
    expose_message = True


class GenerationError(CoachError):
    public_message = "Content generation failed"


class PersistenceError(CoachError):
    public_message = "Failed to store generated content"
