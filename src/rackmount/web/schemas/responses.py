"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class SolveResponse(BaseModel):
    """Solved dimensions and the mounting holes that will be cut."""

    dimensions: dict[str, Any] = Field(..., description="Solved enclosure dimensions")
    mounting_holes: list[dict[str, Any]] = Field(
        default_factory=list, description="Emitted mounting holes"
    )


class ValidationIssueSchema(BaseModel):
    path: str = Field(..., description="JSON path of the offending field")
    message: str = Field(..., description="Human-readable description")


class ValidationResultSchema(BaseModel):
    """Result of validating a configuration."""

    is_valid: bool = Field(..., description="True when there are no errors")
    errors: list[ValidationIssueSchema] = Field(default_factory=list)
    warnings: list[ValidationIssueSchema] = Field(default_factory=list)
