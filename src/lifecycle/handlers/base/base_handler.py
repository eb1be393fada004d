"""
Lifecycle orchestrator shared by every Lambda handler.

A handler instance serves exactly one invocation: it is built with the
context container and the event, ``execute`` runs it once, and the subclass
decides through ``handle_error`` whether a failure resolves to a result or
propagates to the platform.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from lifecycle.context import ContextContainer
from lifecycle.errors import UNKNOWN_ERROR_MESSAGE, UnknownError

TEvent = TypeVar('TEvent')
TResult = TypeVar('TResult')

# Interpreter and event loop signals are owned by the hosting runtime
RUNTIME_SIGNALS = (KeyboardInterrupt, SystemExit, GeneratorExit, asyncio.CancelledError)


class BaseHandler(ABC, Generic[TEvent, TResult]):
    """Template for handling a single event."""

    def __init__(self, context: ContextContainer, event: TEvent) -> None:
        self.context = context
        self.event = event

    @abstractmethod
    async def handle_request(self) -> TResult:
        """Produce the invocation result."""

    @abstractmethod
    def handle_error(self, error: Exception) -> TResult:
        """Resolve a failure to a result, or raise."""

    async def execute(self) -> TResult:
        """
        Run the handler once.

        Returns:
            The result of ``handle_request``, or of ``handle_error`` on failure
        """
        self.context.logger.info('Execution started')

        try:
            result = await self.handle_request()
        except Exception as error:
            return self.handle_error(error)
        except RUNTIME_SIGNALS:
            raise
        except BaseException as error:
            self.context.logger.error(UNKNOWN_ERROR_MESSAGE, extra={'data': {'error': repr(error)}})
            return self.handle_error(UnknownError(UNKNOWN_ERROR_MESSAGE))

        self.context.logger.info('Request handled successfully')
        return result
