"""
Error types raised by the services and the DRF exception handler that
turns every failure into the ``{"ok": false, "error": {...}}`` envelope.

Services raise :class:`ServiceError` subclasses; views never build error
responses by hand.
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """A domain rule was violated."""

    code = 'service_error'
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, message, code=None, details=None, http_status=None):
        self.message = message
        if code is not None:
            self.code = code
        if http_status is not None:
            self.http_status = http_status
        self.details = details
        super().__init__(message)


class InvalidState(ServiceError):
    """The record is not in a state that allows the requested transition."""

    code = 'invalid_state'
    http_status = status.HTTP_409_CONFLICT


class RecordNotFound(ServiceError):
    code = 'not_found'
    http_status = status.HTTP_404_NOT_FOUND


def error_body(code: str, message, details=None) -> dict:
    error = {'code': code, 'message': message}
    if details is not None:
        error['details'] = details
    return {'ok': False, 'error': error}


def _code_for(exc: exceptions.APIException) -> str:
    if isinstance(exc, exceptions.ValidationError):
        return 'validation_error'
    if isinstance(exc, exceptions.NotAuthenticated):
        return 'not_authenticated'
    if isinstance(exc, exceptions.AuthenticationFailed):
        return 'authentication_failed'
    if isinstance(exc, exceptions.PermissionDenied):
        return 'permission_denied'
    if isinstance(exc, exceptions.NotFound):
        return 'not_found'
    if isinstance(exc, exceptions.Throttled):
        return 'throttled'
    if isinstance(exc, exceptions.MethodNotAllowed):
        return 'method_not_allowed'
    return exc.default_code or 'api_error'


def api_exception_handler(exc, context):
    if isinstance(exc, ServiceError):
        return Response(error_body(exc.code, exc.message, exc.details), status=exc.http_status)

    resp = drf_exception_handler(exc, context)
    if resp is None:
        request = context.get('request')
        logger.error(
            "Unhandled error on %s %s",
            getattr(request, 'method', '?'),
            getattr(request, 'path', '?'),
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        message = str(exc) if settings.DEBUG else 'Internal server error'
        return Response(error_body('server_error', message), status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    # DRF maps Http404 / Django PermissionDenied to its own exceptions
    if isinstance(exc, Http404):
        exc = exceptions.NotFound(str(exc) or None)
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied()

    code = _code_for(exc)
    if code == 'validation_error':
        message = _first_message(resp.data) or 'Validation failed'
        return Response(error_body(code, message, resp.data), status=resp.status_code, headers=_headers(resp))

    detail = resp.data.get('detail') if isinstance(resp.data, dict) else resp.data
    return Response(error_body(code, str(detail)), status=resp.status_code, headers=_headers(resp))


def _headers(resp) -> dict:
    keep = ('WWW-Authenticate', 'Retry-After', 'Allow')
    return {k: resp[k] for k in keep if resp.has_header(k)}


def _first_message(data):
    """Pick the first human readable message out of nested DRF errors."""
    if isinstance(data, dict):
        for value in data.values():
            found = _first_message(value)
            if found:
                return found
        return None
    if isinstance(data, (list, tuple)):
        for value in data:
            found = _first_message(value)
            if found:
                return found
        return None
    return str(data) if data else None
