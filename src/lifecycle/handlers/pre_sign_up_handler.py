"""
Cognito pre sign-up trigger.

Sign-ups from allowed email domains are confirmed and their email marked as
verified; any other sign-up is rejected by raising, which Cognito reports to
the client as a failed sign-up.
"""

import asyncio
import copy
from typing import Any, Dict

from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes.cognito_user_pool_event import PreSignUpTriggerEvent
from aws_lambda_powertools.utilities.typing import LambdaContext

from lifecycle.context import create_context_container
from lifecycle.errors import BusinessLogicError
from lifecycle.handlers.base import CognitoBaseHandler
from lifecycle.handlers.utils.observability import logger, metrics, tracer


class PreSignUpHandler(CognitoBaseHandler):
    """Gate user pool sign-ups by email domain."""

    async def handle_request(self) -> Dict[str, Any]:
        # Cognito reads the result from the returned event, the input stays untouched
        event = PreSignUpTriggerEvent(copy.deepcopy(self.event))
        email = (event.request.user_attributes.get('email') or '').strip().lower()
        domain = email.rpartition('@')[2]
        allowed_domains = self.context.env.allowed_sign_up_domains

        if not email or '@' not in email:
            raise BusinessLogicError(
                f'Sign-up for {event.user_name} has no email address',
                error_code='SIGN_UP_EMAIL_MISSING',
                user_message='An email address is required to sign up.',
            )

        if allowed_domains and domain not in allowed_domains:
            metrics.add_metric(name='SignUpRejected', unit=MetricUnit.Count, value=1)
            raise BusinessLogicError(
                f'Email domain {domain} is not allowed to sign up',
                error_code='SIGN_UP_DOMAIN_NOT_ALLOWED',
                user_message='Sign-up is not available for this email domain.',
            )

        event.response.auto_confirm_user = True
        event.response.auto_verify_email = True
        metrics.add_metric(name='SignUpConfirmed', unit=MetricUnit.Count, value=1)
        self.context.logger.info('Sign-up confirmed', extra={'user_name': event.user_name, 'domain': domain})
        return event.raw_event


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the Cognito pre sign-up trigger.

    Args:
        event: Cognito pre sign-up event
        context: Lambda context object

    Returns:
        The event with the sign-up decision in its ``response``
    """
    container = create_context_container(lambda_context=context)
    return asyncio.run(PreSignUpHandler(container, event).execute())
