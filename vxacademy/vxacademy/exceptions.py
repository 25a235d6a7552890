"""
Project-wide DRF exception handler.

Every error leaves the API as ``{"message": ...}`` so the client can show it
directly; validation failures also carry the field ``errors``.
"""
import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _flatten_detail(detail):
    if isinstance(detail, list) and detail:
        return _flatten_detail(detail[0])
    if isinstance(detail, dict) and detail:
        return _flatten_detail(next(iter(detail.values())))
    return str(detail)


def api_exception_handler(exc, context):
    if isinstance(exc, Http404):
        message = str(exc) or 'Not found'
        if message.startswith('No ') and 'matches the given query' in message:
            message = 'Not found'
        return Response({'message': message}, status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(f"Unhandled error in {view.__class__.__name__ if view else 'view'}: {exc}")
        return Response({'message': 'Internal server error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, exceptions.NotAuthenticated):
        response.data = {'message': 'Not authenticated'}
    elif isinstance(exc, exceptions.ValidationError):
        response.data = {
            'message': _flatten_detail(exc.detail),
            'errors': exc.detail,
        }
    elif isinstance(exc, exceptions.APIException):
        response.data = {'message': _flatten_detail(exc.detail)}

    return response
