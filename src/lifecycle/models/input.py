"""
Event schemas validated by the API Gateway handlers.

A schema describes the derived event, whose ``body`` is already the parsed
JSON mapping.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, Field, field_validator


class DatabaseCheckBody(BaseModel):
    """Optional request body of the database connectivity check."""

    database: Annotated[Optional[str], Field(
        min_length=1,
        max_length=63,
        description='Database name overriding the configured default',
        examples=['devdb']
    )] = None

    @field_validator('database')
    @classmethod
    def validate_database_name(cls, v: Optional[str]) -> Optional[str]:
        """Validate that the database name is a plain PostgreSQL identifier."""
        import re
        if v is not None and not re.match(r'^[A-Za-z_][A-Za-z0-9_]*$', v):
            raise ValueError('database must be a plain identifier')
        return v


class DatabaseCheckEvent(BaseModel):
    """Event schema of the database connectivity check."""

    body: DatabaseCheckBody
