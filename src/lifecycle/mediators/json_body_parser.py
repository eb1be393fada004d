"""
JSON request body parser.

An absent or blank body parses to an empty mapping. A body sent with a
non-JSON content type, malformed JSON, or a JSON value that is not an object
raises ``ParseError``.
"""

import json
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from lifecycle.errors import ParseError

if TYPE_CHECKING:
    from lifecycle.context import ContextContainer


def get_header(headers: Optional[Mapping[str, str]], name: str) -> Optional[str]:
    """Look up a header by case-insensitive name."""
    if not headers:
        return None
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def is_json_content_type(content_type: str) -> bool:
    """Check for ``application/json`` or a ``+json`` structured syntax suffix."""
    media_type = content_type.split(';', 1)[0].strip().lower()
    return media_type == 'application/json' or media_type.endswith('+json')


def parse_json_body(
    context: 'ContextContainer',
    body: Optional[str],
    headers: Optional[Mapping[str, str]],
) -> Dict[str, Any]:
    """
    Parse a raw request body into a mapping.

    Args:
        context: Context container of the current invocation
        body: Raw body string from the event
        headers: Request headers

    Returns:
        Parsed JSON object, or an empty mapping when no body was sent

    Raises:
        ParseError: If the body is not a JSON object
    """
    if body is None or not body.strip():
        return {}

    content_type = get_header(headers, 'Content-Type')
    if content_type is not None and not is_json_content_type(content_type):
        context.logger.debug('Rejected body with unsupported content type', extra={'content_type': content_type})
        raise ParseError(f'Unsupported content type: {content_type}')

    try:
        parsed = json.loads(body)
    except json.JSONDecodeError as e:
        raise ParseError(f'Malformed JSON body: {e.msg} at position {e.pos}') from e
    except (ValueError, RecursionError) as e:
        # Integer digit limit or nesting deeper than the interpreter stack
        raise ParseError('Malformed JSON body') from e

    if not isinstance(parsed, dict):
        raise ParseError(f'JSON body must be an object, got {type(parsed).__name__}')

    return parsed
