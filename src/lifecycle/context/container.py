"""
Context container shared by reference through one handler invocation.

The invocation bootstrap builds one container per event and hands it to the
handler; handlers and mediators only read from it.
"""

from dataclasses import dataclass
from typing import Optional

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from lifecycle.dal import DalHandler, get_dal_handler
from lifecycle.handlers.models.env_vars import HandlerEnvVars, get_handler_env_vars
from lifecycle.handlers.utils.observability import logger as default_logger


@dataclass(frozen=True)
class ContextContainer:
    """Cross-cutting services available to a handler and its mediators."""

    logger: Logger
    env: HandlerEnvVars
    db: Optional[DalHandler] = None
    lambda_context: Optional[LambdaContext] = None

    @property
    def request_id(self) -> Optional[str]:
        """Lambda request id when running inside the platform."""
        if self.lambda_context is None:
            return None
        return self.lambda_context.aws_request_id


def create_context_container(
    lambda_context: Optional[LambdaContext] = None,
    env: Optional[HandlerEnvVars] = None,
    logger: Optional[Logger] = None,
    db: Optional[DalHandler] = None,
) -> ContextContainer:
    """
    Build the context container for one invocation.

    Args:
        lambda_context: Lambda context object of the current invocation
        env: Environment settings, read from the process environment when omitted
        logger: Logger, the shared Powertools logger when omitted
        db: Data access handler, built from ``env`` when omitted

    Returns:
        A read-only context container
    """
    env = env or get_handler_env_vars()
    return ContextContainer(
        logger=logger or default_logger,
        env=env,
        db=db if db is not None else get_dal_handler(env),
        lambda_context=lambda_context,
    )
