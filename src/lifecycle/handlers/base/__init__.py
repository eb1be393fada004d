"""Base handlers implementing the invocation lifecycle."""

from .api_gateway_handler import APIGatewayBaseHandler
from .base_handler import BaseHandler
from .cognito_handler import CognitoBaseHandler

__all__ = [
    "BaseHandler",
    "APIGatewayBaseHandler",
    "CognitoBaseHandler",
]
