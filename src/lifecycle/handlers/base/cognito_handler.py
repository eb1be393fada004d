"""
Base handler for Cognito user pool triggers.

A trigger succeeds by returning the (possibly updated) event. Failures are
logged and raised again so that Cognito rejects the operation.
"""

from typing import Any, Dict, NoReturn

from lifecycle.handlers.base.base_handler import BaseHandler

CognitoEvent = Dict[str, Any]


class CognitoBaseHandler(BaseHandler[CognitoEvent, CognitoEvent]):
    """Lifecycle of a handler bound to a Cognito trigger."""

    def handle_error(self, error: Exception) -> NoReturn:
        self.context.logger.error('Error occurred in Cognito handler', extra={
            'error': repr(error),
            'event': self.event,
        })
        raise error
