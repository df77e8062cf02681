# authserver/application/dtos/oauth2_error_dto.py

"""
Schemas for OAuth2 error responses.

Defines the Pydantic DTO used to report a failed client authentication
back to the caller.
"""

from typing import Optional

from pydantic import BaseModel, Field


class OAuth2ErrorResponse(BaseModel):
    """
    Schema for an OAuth2 error response body.

    Serialize with ``model_dump(exclude_none=True)`` so unset optional
    fields are omitted.
    """
    error: str = Field(..., description="OAuth2 error code, e.g. invalid_client")
    error_description: Optional[str] = Field(None, description="Human-readable explanation")
    error_uri: Optional[str] = Field(None, description="URI of a page describing the error")
