"""
Unit tests for Pydantic models.

This module tests the validation and serialization of the event schemas,
response bodies and environment settings.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from lifecycle.context import ContextContainer, create_context_container
from lifecycle.errors import ValidationError as ServiceValidationError
from lifecycle.handlers.models.env_vars import HandlerEnvVars
from lifecycle.models.input import DatabaseCheckBody, DatabaseCheckEvent
from lifecycle.models.output import DatabaseCheckOutput, ErrorDetail, ErrorOutput


class TestDatabaseCheckEvent:
    """Test cases for the database check schema."""

    def test_empty_body(self):
        """Test that the database override is optional."""
        event = DatabaseCheckEvent.model_validate({"body": {}, "httpMethod": "POST"})

        assert event.body.database is None

    def test_database_override(self):
        """Test a valid database name."""
        assert DatabaseCheckBody(database="reporting_db").database == "reporting_db"

    @pytest.mark.parametrize("name", ["", "drop table;", "1abc"])
    def test_invalid_database_name(self, name):
        """Test that names other than plain identifiers are refused."""
        with pytest.raises(ValidationError):
            DatabaseCheckBody(database=name)


class TestOutputModels:
    """Test cases for response bodies."""

    def test_database_check_output_defaults(self):
        """Test the default connection message."""
        output = DatabaseCheckOutput(time="2024-01-01 12:00:00+00")

        assert output.model_dump() == {"message": "Connected!", "time": "2024-01-01 12:00:00+00"}

    def test_error_output_excludes_empty_fields(self):
        """Test the serialized error shape."""
        output = ErrorOutput(
            error=ErrorDetail(code="FORBIDDEN", message="Denied"),
            timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

        assert output.model_dump(mode="json", exclude_none=True) == {
            "error": {"code": "FORBIDDEN", "message": "Denied"},
            "timestamp": "2024-01-01T00:00:00Z",
        }


class TestHandlerEnvVars:
    """Test cases for environment settings."""

    def test_defaults(self):
        """Test defaults without any database settings."""
        env = HandlerEnvVars()

        assert env.DB_NAME == "devdb"
        assert env.database_configured is False
        assert env.allowed_sign_up_domains == []

    def test_allowed_domains_normalized(self):
        """Test parsing of the allowed domain list."""
        env = HandlerEnvVars(SIGN_UP_ALLOWED_DOMAINS=" Example.com,,partner.org ")

        assert env.allowed_sign_up_domains == ["example.com", "partner.org"]

    def test_invalid_environment(self):
        """Test that unknown environments are refused."""
        with pytest.raises(ValidationError):
            HandlerEnvVars(ENVIRONMENT="qa")

    def test_database_configured(self):
        """Test that the database needs both the cluster and its secret."""
        assert HandlerEnvVars(DB_CLUSTER_ARN="arn:cluster").database_configured is False
        assert HandlerEnvVars(DB_CLUSTER_ARN="arn:cluster", DB_SECRET_ARN="arn:secret").database_configured is True


class TestContextContainer:
    """Test cases for the context container."""

    def test_read_only(self, context_container):
        """Test that the container cannot be modified."""
        with pytest.raises(AttributeError):
            context_container.db = object()

    def test_request_id(self, mock_logger, env_vars, lambda_context):
        """Test that the request id comes from the Lambda context."""
        container = ContextContainer(logger=mock_logger, env=env_vars, lambda_context=lambda_context)

        assert container.request_id == "test-request-id-123"
        assert ContextContainer(logger=mock_logger, env=env_vars).request_id is None

    def test_factory_without_database(self, mock_logger, env_vars):
        """Test that no data handler is built without database settings."""
        container = create_context_container(env=env_vars, logger=mock_logger)

        assert container.db is None
        assert container.logger is mock_logger

    def test_service_validation_error_is_exception(self):
        """Test that service errors are Exception kinds."""
        assert issubclass(ServiceValidationError, Exception)
