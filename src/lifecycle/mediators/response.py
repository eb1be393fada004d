"""
API Gateway proxy response formatter.

Formatting is a pure function of its input: bodies are serialized with sorted
keys and compact separators so equal inputs always produce identical output.
"""

import json
from typing import Annotated, Any, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import to_jsonable_python

DEFAULT_HEADERS: Dict[str, str] = {
    'Content-Type': 'application/json',
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token',
    'Access-Control-Allow-Methods': 'OPTIONS,POST,GET,PUT,DELETE',
}


class ResponseInput(BaseModel):
    """Status code, body and extra headers of a handler response."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    status_code: Annotated[int, Field(alias='statusCode', ge=100, le=599)] = 200
    body: Any = None
    headers: Dict[str, str] = Field(default_factory=dict)


def serialize_body(body: Any) -> str:
    """Serialize a response body to its wire string."""
    if body is None:
        return ''
    if isinstance(body, str):
        return body
    return json.dumps(to_jsonable_python(body), sort_keys=True, separators=(',', ':'))


def format_response(response: Union[ResponseInput, Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Build an API Gateway proxy response.

    Args:
        response: ``ResponseInput`` or a mapping with ``statusCode``, ``body`` and ``headers``

    Returns:
        API Gateway response dictionary
    """
    if not isinstance(response, ResponseInput):
        response = ResponseInput.model_validate(response)

    return {
        'statusCode': response.status_code,
        'headers': {**DEFAULT_HEADERS, **response.headers},
        'body': serialize_body(response.body),
    }
