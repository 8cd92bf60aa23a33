"""
Domain errors raised by the service layer.
Each carries the HTTP status the API boundary answers with.
"""
from fastapi import status


class ResumeBuilderError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ResumeBuilderError):
    """Target row of an update (or a document export) does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ForeignKeyViolationError(ResumeBuilderError):
    """A referenced parent row (user, resume, template) does not exist."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str, value: int):
        super().__init__(f"Referenced {field}={value} does not exist")
        self.field = field
        self.value = value


class UniqueConstraintViolationError(ResumeBuilderError):
    """A unique column (user email) already holds the submitted value."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, field: str, value: str):
        super().__init__(f"{field} '{value}' already exists")
        self.field = field
        self.value = value
