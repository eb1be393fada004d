"""
Error classifier for API Gateway handlers.

Maps every error raised during an invocation to an API Gateway response. The
classifier is total: unrecognized errors degrade to a generic 500 response and
never expose their internal message.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from aws_lambda_powertools.metrics import MetricUnit

from lifecycle.errors import BaseServiceError, ValidationError
from lifecycle.handlers.utils.observability import metrics
from lifecycle.mediators.response import ResponseInput, format_response
from lifecycle.models.output import ErrorDetail, ErrorOutput

if TYPE_CHECKING:
    from lifecycle.context import ContextContainer

INTERNAL_ERROR_CODE = 'INTERNAL_SERVER_ERROR'
INTERNAL_ERROR_MESSAGE = 'Internal server error'

STATUS_MAPPING = {
    'VALIDATION_ERROR': 400,
    'INVALID_REQUEST_BODY': 400,
    'UNAUTHENTICATED': 401,
    'FORBIDDEN': 403,
    'RESOURCE_NOT_FOUND': 404,
    'EXTERNAL_SERVICE_ERROR': 502,
    'CONFIGURATION_ERROR': 500,
}

# Business logic errors carry their own codes
BUSINESS_LOGIC_STATUS = 422

FALLBACK_RESPONSE: Dict[str, Any] = {
    'statusCode': 500,
    'headers': {'Content-Type': 'application/json'},
    'body': '{"error":{"code":"INTERNAL_SERVER_ERROR","message":"Internal server error"}}',
}


def get_http_status_code(error: Exception) -> int:
    """Get appropriate HTTP status code for error."""
    if not isinstance(error, BaseServiceError):
        return 500
    if error.error_code in STATUS_MAPPING:
        return STATUS_MAPPING[error.error_code]
    if error.category.value == 'BUSINESS_LOGIC':
        return BUSINESS_LOGIC_STATUS
    return 500


def _error_detail(error: Exception) -> ErrorDetail:
    if not isinstance(error, BaseServiceError):
        return ErrorDetail(code=INTERNAL_ERROR_CODE, message=INTERNAL_ERROR_MESSAGE)

    detail = ErrorDetail(code=error.error_code, message=error.user_message, error_id=error.error_id)
    if isinstance(error, ValidationError) and error.field_errors:
        detail.field_errors = error.field_errors
    return detail


def _request_id(event: Mapping[str, Any]) -> Optional[str]:
    return (event.get('requestContext') or {}).get('requestId')


def handle_error(context: 'ContextContainer', error: Exception, event: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Classify an error into an API Gateway response.

    Args:
        context: Context container of the current invocation
        error: Error raised while handling the request
        event: Original API Gateway event

    Returns:
        API Gateway response dictionary, never raises
    """
    try:
        status_code = get_http_status_code(error)
        context.logger.error('Request failed', exc_info=error, extra={
            'status_code': status_code,
            'error_type': type(error).__name__,
            'error_details': error.to_dict() if isinstance(error, BaseServiceError) else None,
            'request_id': _request_id(event),
        })
        metrics.add_metric(name='ErrorCount', unit=MetricUnit.Count, value=1)

        output = ErrorOutput(
            error=_error_detail(error),
            timestamp=datetime.now(timezone.utc),
            request_id=_request_id(event),
        )
        return format_response(ResponseInput(
            status_code=status_code,
            body=output.model_dump(mode='json', exclude_none=True),
            headers={'Access-Control-Allow-Origin': context.env.CORS_ALLOW_ORIGIN},
        ))
    except Exception:
        context.logger.exception('Error classification failed')
        return dict(FALLBACK_RESPONSE)
