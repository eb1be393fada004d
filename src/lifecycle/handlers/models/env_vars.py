"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for environment variables read by the
invocation bootstrap when it builds the context container.
"""

from typing import Annotated, List, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class HandlerEnvVars(BaseModel):
    """Environment variables for Lambda handlers."""

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools'
    )] = 'handler-lifecycle'

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    # Environment name (dev, test, staging, prod)
    ENVIRONMENT: Annotated[str, Field(
        description='Deployment environment name',
        pattern=r'^(dev|test|staging|prod)$'
    )] = 'dev'

    # Aurora cluster credentials and endpoint
    DB_SECRET_ARN: Annotated[Optional[str], Field(
        description='Secrets Manager ARN holding the database credentials'
    )] = None

    DB_CLUSTER_ARN: Annotated[Optional[str], Field(
        description='Aurora cluster ARN used by the RDS Data API'
    )] = None

    DB_NAME: Annotated[str, Field(
        description='Default database name',
        min_length=1
    )] = 'devdb'

    # API Gateway settings
    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        description='CORS allowed origins for API responses'
    )] = '*'

    # Cognito pre sign-up settings
    SIGN_UP_ALLOWED_DOMAINS: Annotated[str, Field(
        description='Comma separated email domains allowed to sign up, empty allows any'
    )] = ''

    @property
    def database_configured(self) -> bool:
        """Check if both the cluster and its secret are configured."""
        return bool(self.DB_CLUSTER_ARN and self.DB_SECRET_ARN)

    @property
    def allowed_sign_up_domains(self) -> List[str]:
        """Normalized list of allowed sign-up email domains."""
        return [
            domain.strip().lower()
            for domain in self.SIGN_UP_ALLOWED_DOMAINS.split(',')
            if domain.strip()
        ]


def get_handler_env_vars() -> HandlerEnvVars:
    """
    Get typed environment variables for Lambda handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=HandlerEnvVars)
