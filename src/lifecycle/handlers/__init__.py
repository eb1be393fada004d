"""
AWS Lambda Handlers Module.

This module contains the handler lifecycle and the Lambda functions built on it:

1. Base handlers (``handlers.base``): the invocation template and its API
   Gateway and Cognito specializations
2. Function handlers: the database connectivity check and the Cognito
   pre sign-up trigger, each with its ``lambda_handler`` entry point

The handlers use AWS Lambda Powertools for:
- Structured logging with correlation IDs
- Distributed tracing with X-Ray
- Custom metrics collection
"""

# Re-export handler utilities for convenience
from lifecycle.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
