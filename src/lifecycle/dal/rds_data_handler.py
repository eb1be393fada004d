"""
Aurora Serverless implementation of the Data Access Layer (DAL).

Statements run through the RDS Data API, authenticated with the cluster secret,
so the function needs no VPC attachment or connection pool.
"""

import json
from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import ClientError

from lifecycle.errors import ExternalServiceError
from lifecycle.handlers.utils.observability import logger, tracer


class RdsDataHandler:
    """RDS Data API implementation of the data access layer."""

    def __init__(self, cluster_arn: str, secret_arn: str, database: str = 'devdb', client: Any = None) -> None:
        """
        Initialize the RDS Data API handler.

        Args:
            cluster_arn: ARN of the Aurora cluster
            secret_arn: ARN of the Secrets Manager secret for the cluster
            database: Default database name
            client: Optional preconfigured ``rds-data`` client
        """
        self.cluster_arn = cluster_arn
        self.secret_arn = secret_arn
        self.database = database
        self.client = client or boto3.client('rds-data')
        logger.debug(f'RDS Data handler initialized for database: {database}')

    @tracer.capture_method
    def query(self, sql: str, database: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Execute a SQL statement and return its rows.

        Args:
            sql: SQL statement to execute
            database: Database name overriding the default

        Returns:
            Rows as dictionaries keyed by column name

        Raises:
            ExternalServiceError: If the Data API call fails
        """
        try:
            response = self.client.execute_statement(
                resourceArn=self.cluster_arn,
                secretArn=self.secret_arn,
                database=database or self.database,
                sql=sql,
                formatRecordsAs='JSON',
            )
        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.error(f'RDS Data API error: {error_code}', extra={'error': str(e)})
            raise ExternalServiceError(f'RDS Data API call failed: {error_code}', service_name='rds-data') from e

        return json.loads(response.get('formattedRecords') or '[]')

    @tracer.capture_method
    def current_time(self, database: Optional[str] = None) -> str:
        """Return the server time reported by ``SELECT NOW()``."""
        rows = self.query('SELECT NOW() AS current_time', database=database)
        if not rows:
            raise ExternalServiceError('Time query returned no rows', service_name='rds-data')

        current_time = rows[0]['current_time']
        tracer.put_annotation('database', database or self.database)
        return current_time
