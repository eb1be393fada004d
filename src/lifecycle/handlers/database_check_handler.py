"""
Database connectivity check - Lambda function behind API Gateway.

Checks the cluster secret in Secrets Manager, runs ``SELECT NOW()`` against the
Aurora cluster through the RDS Data API and returns the server time. The
secret names the default database. Restricted to administrators.
"""

import asyncio
from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from lifecycle.context import ContextContainer, create_context_container
from lifecycle.dal.db_secret import get_db_credentials
from lifecycle.errors import ConfigurationError
from lifecycle.handlers.base import APIGatewayBaseHandler
from lifecycle.handlers.utils.observability import logger, metrics, tracer
from lifecycle.mediators.response import ResponseInput
from lifecycle.models.input import DatabaseCheckEvent
from lifecycle.models.output import DatabaseCheckOutput
from lifecycle.security.auth import AuthRole


class DatabaseCheckHandler(APIGatewayBaseHandler[DatabaseCheckEvent]):
    """Report whether the function can reach its database."""

    def __init__(self, context: ContextContainer, event: Dict[str, Any]) -> None:
        super().__init__(context, event, DatabaseCheckEvent)

    async def handle_request(self) -> Dict[str, Any]:
        await self.check_access([AuthRole.ADMIN])
        request = self.parse_schema()

        if self.context.db is None:
            raise ConfigurationError('Missing DB_CLUSTER_ARN or DB_SECRET_ARN environment variable')

        credentials = get_db_credentials(self.context.env.DB_SECRET_ARN)
        database = request.body.database or credentials.dbname
        self.context.logger.info(
            'Running database connectivity check',
            extra={'database': database, 'db_user': credentials.username},
        )
        current_time = self.context.db.current_time(database=database)

        metrics.add_metric(name='DatabaseCheckSuccess', unit=MetricUnit.Count, value=1)
        return self.format_response(ResponseInput(
            status_code=200,
            body=DatabaseCheckOutput(time=current_time),
            headers={'Access-Control-Allow-Origin': self.context.env.CORS_ALLOW_ORIGIN},
        ))


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the database connectivity check.

    Args:
        event: API Gateway event
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    container = create_context_container(lambda_context=context)
    return asyncio.run(DatabaseCheckHandler(container, event).execute())
