"""Configuration validation endpoint."""

from fastapi import APIRouter

from rackmount.application.config import load_config_from_dict, validate_config
from rackmount.web.schemas.requests import ConfigRequest
from rackmount.web.schemas.responses import ValidationIssueSchema, ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(request: ConfigRequest) -> ValidationResultSchema:
    """Validate an enclosure configuration without generating.

    Schema violations are reported by the ConfigError handler; structural
    errors and fit advisories come back in the body.
    """
    result = validate_config(load_config_from_dict(request.config))
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[ValidationIssueSchema(path=e.path, message=e.message) for e in result.errors],
        warnings=[
            ValidationIssueSchema(path=w.path, message=w.message) for w in result.warnings
        ],
    )
