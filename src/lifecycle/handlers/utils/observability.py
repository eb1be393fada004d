"""
Shared Powertools logger, tracer and metrics for the handler lifecycle.

The Lambda entry points decorate themselves with these instances, the context
container hands the logger to handlers and mediators, and the error classifier
counts failures as ErrorCount metrics in the HandlerLifecycle namespace.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

# Metrics namespace for handler lifecycle KPIs
METRICS_NAMESPACE = 'HandlerLifecycle'

# JSON output format, service name can be set by environment variable "POWERTOOLS_SERVICE_NAME"
logger: Logger = Logger()

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "True" (and always outside Lambda)
tracer: Tracer = Tracer()

# Namespace and service name can be set by environment variables:
# - POWERTOOLS_METRICS_NAMESPACE
# - POWERTOOLS_SERVICE_NAME
metrics = Metrics(namespace=METRICS_NAMESPACE)
