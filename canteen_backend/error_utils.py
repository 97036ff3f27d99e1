"""
Utility functions for creating standardized API responses.
"""
from rest_framework.response import Response
from rest_framework import status as http_status


def error_response(message, code='ERROR', status=http_status.HTTP_400_BAD_REQUEST, details=None, field=None):
    """
    Create a standardized error response.

    Args:
        message: The error message (can be translatable string)
        code: Error code (default: 'ERROR')
        status: HTTP status code (default: 400)
        details: Optional additional details (dict)
        field: Optional field name for validation errors

    Returns:
        Response object with standardized error format
    """
    error_data = {
        'status': 'error',
        'error': {
            'code': code,
            'message': str(message),
        }
    }

    if details:
        error_data['error']['details'] = details

    if field:
        error_data['error']['field'] = field

    return Response(error_data, status=status)


def validation_error_response(message, field=None, details=None):
    """
    Create a validation error response.
    """
    return error_response(
        message=message,
        code='VALIDATION_ERROR',
        status=http_status.HTTP_400_BAD_REQUEST,
        field=field,
        details=details
    )


def success_response(data, message=None, status=http_status.HTTP_200_OK):
    """
    Create a standardized success response.

    Args:
        data: Response data
        message: Optional success message
        status: HTTP status code (default: 200)

    Returns:
        Response object with success format
    """
    response_data = {
        'status': 'success',
        'data': data
    }

    if message:
        response_data['message'] = str(message)

    return Response(response_data, status=status)
