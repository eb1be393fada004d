"""
Mediators used by the API Gateway base handler.

Each mediator handles one cross-cutting concern and takes everything it needs
as arguments, so it can be tested without a handler instance.
"""

from .error_handler import handle_error
from .json_body_parser import parse_json_body
from .response import ResponseInput, format_response
from .schema_parser import parse_schema

__all__ = [
    "handle_error",
    "parse_json_body",
    "ResponseInput",
    "format_response",
    "parse_schema",
]
