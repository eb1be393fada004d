"""
Handler lifecycle for AWS Lambda functions.

This package provides a uniform invocation lifecycle for Lambda handlers:

- handlers: the lifecycle orchestrator, its API Gateway and Cognito
  specializations, and the functions built on them
- mediators: schema validation, JSON body parsing, response formatting and
  error classification
- security: role based authorization
- context: the per-invocation context container
- dal: data access for the Aurora cluster
- models: event schemas and response bodies
"""

__version__ = "1.0.0"

from lifecycle.context import ContextContainer, create_context_container
from lifecycle.handlers.base import APIGatewayBaseHandler, BaseHandler, CognitoBaseHandler
from lifecycle.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "ContextContainer",
    "create_context_container",
    "BaseHandler",
    "APIGatewayBaseHandler",
    "CognitoBaseHandler",
    "logger",
    "tracer",
    "metrics",
]
