"""
Service Models Package

This package contains the Pydantic models used by the bundled handlers,
including event schemas and response bodies.
"""

from .input import DatabaseCheckBody, DatabaseCheckEvent
from .output import DatabaseCheckOutput, ErrorDetail, ErrorOutput

__all__ = [
    # Input models
    "DatabaseCheckBody",
    "DatabaseCheckEvent",

    # Output models
    "DatabaseCheckOutput",
    "ErrorDetail",
    "ErrorOutput",
]
