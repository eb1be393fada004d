"""
Schema validation of API Gateway events with Pydantic.

Schemas are Pydantic models describing the parts of the event a handler needs,
typically ``body``, ``pathParameters`` and ``queryStringParameters``. Event keys
the schema does not declare are ignored.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from lifecycle.errors import ValidationError

if TYPE_CHECKING:
    from lifecycle.context import ContextContainer

TSchema = TypeVar('TSchema', bound=BaseModel)


def _field_errors(error: PydanticValidationError) -> List[Dict[str, str]]:
    return [
        {
            'field': '.'.join(str(part) for part in detail['loc']),
            'message': detail['msg'],
            'type': detail['type'],
        }
        for detail in error.errors()
    ]


def parse_schema(context: 'ContextContainer', schema: Type[TSchema], event: Mapping[str, Any]) -> TSchema:
    """
    Validate an event against a schema.

    Args:
        context: Context container of the current invocation
        schema: Pydantic model describing the event
        event: Event with an already parsed body

    Returns:
        Validated schema instance

    Raises:
        ValidationError: If the event does not match the schema
    """
    try:
        return schema.model_validate(dict(event))
    except PydanticValidationError as e:
        field_errors = _field_errors(e)
        context.logger.debug('Schema validation failed', extra={
            'schema': schema.__name__,
            'field_errors': field_errors,
        })
        raise ValidationError(
            f'Event does not match schema {schema.__name__}',
            field_errors=field_errors,
        ) from e
