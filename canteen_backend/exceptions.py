"""
Custom exception handler for the Canteen API.
Provides standardized error responses with internationalization support.
"""
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
from django.utils.translation import gettext_lazy as _
from .error_codes import AuthErrors
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.exceptions import ValidationError as DRFValidationError
import logging

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns standardized error responses.

    All errors will follow this format:
    {
        "status": "error",
        "error": {
            "code": "ERROR_CODE",
            "message": "Human-readable error message (internationalized)",
            "details": {...},  # Optional: additional error details
            "field": "field_name"  # Optional: for validation errors
        }
    }
    """
    # Domain errors raised by the service layer carry their own code and status
    if isinstance(exc, CanteenError):
        logger.info("Request rejected: %s (%s)", exc.code, exc.message)
        return exc.to_response()

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    # If DRF couldn't handle it, create a generic 500 response
    if response is None:
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return Response({
            'status': 'error',
            'error': {
                'code': 'INTERNAL_SERVER_ERROR',
                'message': str(_('An unexpected error occurred. Please try again later.')),
            }
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    error_response = {
        'status': 'error',
        'error': {}
    }

    error_code = getattr(exc, 'default_code', None) or getattr(exc, 'code', 'ERROR')
    error_response['error']['code'] = str(error_code).upper()

    # Handle validation errors (field-specific errors)
    if isinstance(exc, (DRFValidationError, DjangoValidationError)):
        error_response['error']['code'] = 'VALIDATION_ERROR'
        if isinstance(response.data, dict):
            non_field_errors = response.data.get('non_field_errors', [])
            if non_field_errors:
                first_error = non_field_errors[0] if isinstance(non_field_errors, list) else str(non_field_errors)
                if 'credentials' in str(first_error).lower():
                    error_response['error']['code'] = AuthErrors.INVALID_CREDENTIALS['code']
                    error_response['error']['message'] = str(AuthErrors.INVALID_CREDENTIALS['message'])
                    response.data = error_response
                    return response

            if len(response.data) == 1 and 'non_field_errors' not in response.data:
                # Single field error
                field_name = list(response.data.keys())[0]
                error_message = response.data[field_name]
                if isinstance(error_message, list):
                    error_message = error_message[0]

                error_response['error']['message'] = str(error_message)
                error_response['error']['field'] = field_name
            else:
                error_response['error']['message'] = str(_('Validation failed. Please check your input.'))
                error_response['error']['details'] = response.data
        elif isinstance(response.data, list):
            error_response['error']['message'] = str(response.data[0]) if response.data else str(_('Validation error'))
        else:
            error_response['error']['message'] = str(response.data)

    elif response.status_code == status.HTTP_401_UNAUTHORIZED:
        error_response['error']['code'] = 'AUTHENTICATION_REQUIRED'
        if 'detail' in response.data:
            error_response['error']['message'] = str(response.data['detail'])
        else:
            error_response['error']['message'] = str(_('Authentication credentials were not provided or are invalid.'))

    elif response.status_code == status.HTTP_403_FORBIDDEN:
        error_response['error']['code'] = 'PERMISSION_DENIED'
        if 'detail' in response.data:
            error_response['error']['message'] = str(response.data['detail'])
        else:
            error_response['error']['message'] = str(_('You do not have permission to perform this action.'))

    elif response.status_code == status.HTTP_404_NOT_FOUND:
        error_response['error']['code'] = 'NOT_FOUND'
        if 'detail' in response.data:
            error_response['error']['message'] = str(response.data['detail'])
        else:
            error_response['error']['message'] = str(_('The requested resource was not found.'))

    elif response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        error_response['error']['code'] = 'METHOD_NOT_ALLOWED'
        error_response['error']['message'] = str(_('This HTTP method is not allowed for this endpoint.'))

    elif response.status_code == status.HTTP_429_TOO_MANY_REQUESTS:
        error_response['error']['code'] = 'RATE_LIMIT_EXCEEDED'
        error_response['error']['message'] = str(_('Too many requests. Please slow down and try again later.'))
        wait = getattr(exc, 'wait', None)
        if wait:
            error_response['error']['details'] = {'retry_after': wait}

    else:
        if 'detail' in response.data:
            error_response['error']['message'] = str(response.data['detail'])
        else:
            error_response['error']['message'] = str(response.data) if response.data else str(_('An error occurred'))

    response.data = error_response
    return response


class CanteenError(Exception):
    """
    Base class for domain errors raised by the service layer.
    """
    def __init__(self, message, code='ERROR', status_code=status.HTTP_400_BAD_REQUEST, details=None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(str(self.message))

    @classmethod
    def from_catalog(cls, entry, status_code=status.HTTP_400_BAD_REQUEST, details=None, **fmt):
        """Build an error from an entry of canteen_backend.error_codes."""
        message = str(entry['message'])
        if fmt:
            message = message.format(**fmt)
        return cls(message, code=entry['code'], status_code=status_code, details=details)

    def to_response(self):
        """Convert exception to API response format"""
        error_response = {
            'status': 'error',
            'error': {
                'code': self.code,
                'message': str(self.message),
            }
        }
        if self.details:
            error_response['error']['details'] = self.details

        return Response(error_response, status=self.status_code)


class InventoryError(CanteenError):
    pass


class CostingError(CanteenError):
    pass
