"""
Data Access Layer (DAL) for the handler lifecycle.

This module provides the data access interface handed to handlers through the
context container, and the factory that builds it from environment settings.
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from lifecycle.handlers.models.env_vars import HandlerEnvVars


@runtime_checkable
class DalHandler(Protocol):
    """Protocol defining the data access layer interface."""

    def query(self, sql: str, database: Optional[str] = None) -> List[Dict[str, Any]]:
        """Run a SQL statement and return its rows."""
        ...

    def current_time(self, database: Optional[str] = None) -> str:
        """Return the database server time."""
        ...


def get_dal_handler(env: HandlerEnvVars) -> Optional[DalHandler]:
    """
    Factory function to get the DAL handler for the configured cluster.

    Args:
        env: Validated handler environment variables

    Returns:
        DAL handler instance, or None when no cluster is configured
    """
    if not env.database_configured:
        return None

    # Import here to avoid creating boto3 clients for handlers without a database
    from lifecycle.dal.rds_data_handler import RdsDataHandler

    return RdsDataHandler(
        cluster_arn=env.DB_CLUSTER_ARN,
        secret_arn=env.DB_SECRET_ARN,
        database=env.DB_NAME,
    )


__all__ = [
    'DalHandler',
    'get_dal_handler',
]
