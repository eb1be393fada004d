"""
Database credentials stored in AWS Secrets Manager.

The Aurora cluster secret is a JSON document with at least ``username`` and
``password``; the remaining connection fields fall back to cluster defaults.
"""

from typing import Annotated, Optional

from aws_lambda_powertools.utilities.parameters import get_secret
from aws_lambda_powertools.utilities.parameters.exceptions import (
    GetParameterError,
    TransformParameterError,
)
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from lifecycle.errors import ConfigurationError, ExternalServiceError
from lifecycle.handlers.utils.observability import logger, tracer

# Seconds a fetched secret is cached by Powertools between invocations
SECRET_MAX_AGE_SECONDS = 300


class DbSecret(BaseModel):
    """Database secret structure generated for the Aurora cluster."""

    username: Annotated[str, Field(min_length=1, description='Database user name')]
    password: Annotated[str, Field(min_length=1, description='Database password')]
    engine: Annotated[Optional[str], Field(description='Database engine')] = None
    host: Annotated[Optional[str], Field(description='Cluster endpoint hostname')] = None
    port: Annotated[int, Field(ge=1, le=65535, description='Database port')] = 5432
    dbname: Annotated[str, Field(min_length=1, description='Database name')] = 'devdb'


@tracer.capture_method
def get_db_credentials(secret_arn: Optional[str], max_age: int = SECRET_MAX_AGE_SECONDS) -> DbSecret:
    """
    Fetch and validate database credentials from AWS Secrets Manager.

    Args:
        secret_arn: ARN or name of the secret
        max_age: Seconds to cache the secret value

    Returns:
        Validated database secret

    Raises:
        ConfigurationError: If the ARN is missing or the secret has the wrong shape
        ExternalServiceError: If the secret cannot be fetched or decoded
    """
    if not secret_arn:
        raise ConfigurationError('Missing DB_SECRET_ARN environment variable')

    try:
        raw_secret = get_secret(secret_arn, transform='json', max_age=max_age)
    except TransformParameterError as e:
        logger.error('Database secret is not valid JSON', extra={'secret_arn': secret_arn})
        raise ExternalServiceError(f'Secret {secret_arn} is not valid JSON: {e}', service_name='secretsmanager') from e
    except GetParameterError as e:
        logger.error('Failed to fetch database secret', extra={'secret_arn': secret_arn, 'error': str(e)})
        raise ExternalServiceError(f'Unable to fetch secret {secret_arn}: {e}', service_name='secretsmanager') from e

    if not raw_secret:
        raise ConfigurationError(f'Secret {secret_arn} is empty')

    try:
        secret = DbSecret.model_validate(raw_secret)
    except PydanticValidationError as e:
        raise ConfigurationError(f'Secret {secret_arn} is missing database credentials') from e

    logger.debug('Database credentials retrieved', extra={'dbname': secret.dbname, 'port': secret.port})
    return secret
