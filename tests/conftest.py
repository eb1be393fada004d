"""
Pytest configuration and shared fixtures for the handler lifecycle.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import copy
import os
from typing import Any, Dict
from unittest.mock import Mock

import pytest
from aws_lambda_powertools import Logger

from lifecycle.context import ContextContainer
from lifecycle.handlers.models.env_vars import HandlerEnvVars


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment variables."""
    os.environ.update({
        "AWS_DEFAULT_REGION": "us-east-1",
        "AWS_ACCESS_KEY_ID": "test",
        "AWS_SECRET_ACCESS_KEY": "test",
        "ENVIRONMENT": "test",
        "POWERTOOLS_SERVICE_NAME": "test-handler-lifecycle",
        "POWERTOOLS_METRICS_NAMESPACE": "TestHandlerLifecycle",
        "LOG_LEVEL": "DEBUG",
        "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    })


@pytest.fixture
def env_vars() -> HandlerEnvVars:
    """Handler settings without a database."""
    return HandlerEnvVars(ENVIRONMENT="test", CORS_ALLOW_ORIGIN="https://app.example.com")


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double recording every call."""
    return Mock(spec=Logger)


@pytest.fixture
def mock_db() -> Mock:
    """Data access double returning a fixed server time."""
    db = Mock()
    db.current_time.return_value = "2024-01-01 12:00:00.000000+00"
    return db


@pytest.fixture
def context_container(mock_logger, env_vars) -> ContextContainer:
    """Context container without a database."""
    return ContextContainer(logger=mock_logger, env=env_vars)


@pytest.fixture
def db_context_container(mock_logger, env_vars, mock_db) -> ContextContainer:
    """Context container with a data access double."""
    return ContextContainer(logger=mock_logger, env=env_vars, db=mock_db)


@pytest.fixture
def api_gateway_event() -> Dict[str, Any]:
    """Create a sample API Gateway event for testing."""
    return {
        "resource": "/database/check",
        "httpMethod": "POST",
        "path": "/database/check",
        "headers": {
            "Content-Type": "application/json",
            "User-Agent": "test-agent/1.0",
        },
        "body": '{"database": "devdb"}',
        "requestContext": {
            "requestId": "test-request-id-123",
            "accountId": "123456789012",
            "stage": "test",
            "httpMethod": "POST",
            "path": "/database/check",
            "authorizer": {
                "claims": {
                    "sub": "user-123",
                    "email": "admin@example.com",
                    "cognito:username": "admin",
                    "cognito:groups": "admin,editor",
                },
            },
            "identity": {
                "sourceIp": "127.0.0.1",
                "userAgent": "test-agent/1.0",
            },
        },
        "pathParameters": None,
        "queryStringParameters": None,
        "multiValueQueryStringParameters": None,
        "stageVariables": None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def viewer_event(api_gateway_event) -> Dict[str, Any]:
    """API Gateway event of a caller in the viewer group only."""
    event = copy.deepcopy(api_gateway_event)
    event["requestContext"]["authorizer"]["claims"]["cognito:groups"] = "[viewer]"
    return event


@pytest.fixture
def pre_sign_up_event() -> Dict[str, Any]:
    """Create a sample Cognito pre sign-up event for testing."""
    return {
        "version": "1",
        "region": "us-east-1",
        "userPoolId": "us-east-1_example",
        "userName": "new-user",
        "callerContext": {
            "awsSdkVersion": "aws-sdk-unknown-unknown",
            "clientId": "client-id-123",
        },
        "triggerSource": "PreSignUp_SignUp",
        "request": {
            "userAttributes": {
                "email": "new.user@example.com",
            },
            "validationData": None,
        },
        "response": {
            "autoConfirmUser": False,
            "autoVerifyEmail": False,
            "autoVerifyPhone": False,
        },
    }


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-lambda-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-lambda-function"
    context.memory_limit_in_mb = 512
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-lambda-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


@pytest.fixture
def logged_messages():
    """Messages passed to one level of a mock logger."""
    def _messages(logger: Mock, level: str) -> list:
        return [call.args[0] for call in getattr(logger, level).call_args_list]

    return _messages


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
