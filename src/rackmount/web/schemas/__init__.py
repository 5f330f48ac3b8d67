"""Request and response schemas for the REST API."""

from rackmount.web.schemas.requests import ConfigRequest, GenerateRequest
from rackmount.web.schemas.responses import (
    SolveResponse,
    ValidationIssueSchema,
    ValidationResultSchema,
)

__all__ = [
    "ConfigRequest",
    "GenerateRequest",
    "SolveResponse",
    "ValidationIssueSchema",
    "ValidationResultSchema",
]
