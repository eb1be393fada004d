"""
Base handler for API Gateway proxy integrations.

Subclasses bind the Pydantic schema of their event at construction and build
the response in ``handle_request``. Every failure is turned into a response by
the error classifier, so ``execute`` never raises for an HTTP handler.
"""

from typing import Any, Dict, Generic, Iterable, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from lifecycle.context import ContextContainer
from lifecycle.handlers.base.base_handler import BaseHandler
from lifecycle.mediators.error_handler import handle_error
from lifecycle.mediators.json_body_parser import parse_json_body
from lifecycle.mediators.response import ResponseInput, format_response
from lifecycle.mediators.schema_parser import parse_schema
from lifecycle.security.auth import RoleLike, check_access

TSchema = TypeVar('TSchema', bound=BaseModel)

APIGatewayEvent = Dict[str, Any]
APIGatewayResult = Dict[str, Any]


class APIGatewayBaseHandler(BaseHandler[APIGatewayEvent, APIGatewayResult], Generic[TSchema]):
    """Lifecycle of a handler bound to an API Gateway route."""

    def __init__(self, context: ContextContainer, event: APIGatewayEvent, schema: Type[TSchema]) -> None:
        super().__init__(context, event)
        self._schema = schema

    @property
    def schema(self) -> Type[TSchema]:
        """Schema bound to this handler."""
        return self._schema

    async def check_access(self, roles: Iterable[RoleLike]) -> None:
        await check_access(self.context, self.event, roles)

    def parse_json_body(self, body: Optional[str], headers: Optional[Mapping[str, str]]) -> Dict[str, Any]:
        return parse_json_body(self.context, body, headers)

    def parse_schema(self) -> TSchema:
        """Validate the event, with its body parsed as JSON, against the bound schema."""
        raw_body = self.event.get('body')
        parsed_event = {
            **self.event,
            'body': self.parse_json_body(raw_body, self.event.get('headers')) if raw_body else {},
        }
        return parse_schema(self.context, self._schema, parsed_event)

    def format_response(self, response: Union[ResponseInput, Mapping[str, Any]]) -> APIGatewayResult:
        return format_response(response)

    def handle_error(self, error: Exception) -> APIGatewayResult:
        return handle_error(self.context, error, self.event)
