"""
Output models for API responses using Pydantic.
"""

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, Field


class DatabaseCheckOutput(BaseModel):
    """Response model for a successful database connectivity check."""

    message: Annotated[str, Field(
        description='Connection status message',
        examples=['Connected!']
    )] = 'Connected!'

    time: Annotated[str, Field(
        description='Database server time',
        examples=['2024-01-01 12:00:00.000000+00']
    )]


class ErrorDetail(BaseModel):
    """Error description returned to API callers."""

    code: Annotated[str, Field(
        description='Machine readable error code',
        examples=['VALIDATION_ERROR', 'FORBIDDEN', 'INTERNAL_SERVER_ERROR']
    )]

    message: Annotated[str, Field(
        description='Human readable error message',
        examples=['Invalid input provided', 'Internal server error']
    )]

    error_id: Annotated[Optional[str], Field(
        description='Unique identifier of the error occurrence'
    )] = None

    field_errors: Annotated[Optional[list[dict[str, Any]]], Field(
        description='Detailed validation error information',
        examples=[[{
            'field': 'body.database',
            'message': 'String should have at least 1 character',
            'type': 'string_too_short'
        }]]
    )] = None


class ErrorOutput(BaseModel):
    """Response model for error responses (4xx and 5xx)."""

    error: ErrorDetail

    timestamp: Annotated[datetime, Field(
        description='Timestamp when the error occurred'
    )]

    request_id: Annotated[Optional[str], Field(
        description='Request correlation ID for debugging',
        examples=['c6af9ac6-7b61-11e6-9a41-93e8deadbeef']
    )] = None
