"""
Error envelope shared by every router, used for OpenAPI `responses`.
"""
from typing import Any, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """`{code, message, details}` body of all 4xx/5xx responses."""
    code: str = Field(examples=["IMPORT_SHAPE_ERROR"])
    message: str
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Machine-readable context, e.g. `errors` for import/validation failures.",
    )
