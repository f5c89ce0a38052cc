import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _first_message(data) -> str:
    """Flatten a DRF error payload down to the first human readable message."""
    if isinstance(data, dict):
        if 'detail' in data:
            return _first_message(data['detail'])
        for key, value in data.items():
            msg = _first_message(value)
            if msg:
                return msg if key == 'non_field_errors' else f'{key}: {msg}'
        return ''
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else ''
    return str(data)


def custom_exception_handler(exc, context):
    if isinstance(exc, DjangoValidationError):
        message = '; '.join(exc.messages)
        logger.info('Rejected request in %s: %s', context.get('view').__class__.__name__, message)
        return Response(
            {'detail': message, 'error': message, 'status_code': status.HTTP_400_BAD_REQUEST},
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)

    if response is None:
        logger.exception('Unhandled error in %s', context.get('view').__class__.__name__)
        return response

    message = _first_message(response.data) or str(exc)
    if isinstance(response.data, dict):
        response.data['status_code'] = response.status_code
        response.data.setdefault('detail', message)
        response.data['error'] = message
    else:
        response.data = {'detail': response.data, 'error': message, 'status_code': response.status_code}
    return response
