"""
Login, token issuing and the clinician directory.
"""
from __future__ import annotations

import logging

from django.contrib.auth import authenticate
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings as jwt_settings
from rest_framework_simplejwt.token_blacklist.models import BlacklistedToken, OutstandingToken
from rest_framework_simplejwt.tokens import RefreshToken

from clinic.exceptions import ServiceError
from clinic.models import User

from .audit import log_action
from .base import RecordService

logger = logging.getLogger(__name__)


def _client_ip(request):
    return request.META.get('REMOTE_ADDR')


def login(request, username: str, password: str) -> dict:
    """Check credentials and issue a legacy token plus a JWT pair."""
    user = authenticate(request, username=username, password=password)
    if user is None:
        log_action(user=None, action='login', object_type='user',
                   detail={'result': 'fail', 'username': username, 'ip': _client_ip(request)})
        logger.warning("Failed login for %r from %s", username, _client_ip(request))
        raise ServiceError('Invalid username or password', code='invalid_credentials')

    log_action(user=user, action='login', object_type='user', object_id=user.pk,
               detail={'result': 'ok', 'ip': _client_ip(request)})
    logger.info("User %s logged in", user.username)

    token, _ = Token.objects.get_or_create(user=user)
    refresh = RefreshToken.for_user(user)
    return {
        'user': user,
        'token': token.key,
        'access': str(refresh.access_token),
        'refresh': str(refresh),
    }


def logout(user, refresh: str | None = None) -> int:
    """Blacklist one refresh token, or every outstanding token of ``user``."""
    if refresh:
        try:
            token = RefreshToken(refresh)
        except TokenError as exc:
            raise ServiceError(str(exc), code='invalid_token') from exc
        if str(token.get(jwt_settings.USER_ID_CLAIM)) != str(user.pk):
            logger.warning("User %s tried to revoke a refresh token of another user", user.username)
            raise ServiceError(
                'Token does not belong to the current user', code='invalid_token', http_status=status.HTTP_403_FORBIDDEN
            )
        token.blacklist()
        count = 1
    else:
        count = 0
        for outstanding in OutstandingToken.objects.filter(user=user):
            _, created = BlacklistedToken.objects.get_or_create(token=outstanding)
            count += int(created)
    log_action(user=user, action='logout', object_type='user', object_id=user.pk, detail={'blacklisted': count})
    logger.info("User %s logged out, %d refresh token(s) blacklisted", user.username, count)
    return count


class ProviderService(RecordService):
    """Active clinicians, for provider pickers."""
    model = User
    label = 'Provider'
    date_field = 'date_joined'
    default_sort = 'last_name'
    default_order = 'asc'
    search_fields = ('first_name', 'last_name', 'username')
    patient_path = None
    provider_path = None
    filters = {'role': 'role'}
    select_related = ()

    def queryset(self):
        return super().queryset().filter(is_active=True, role__in=User.CLINICIAN_ROLES)


providers = ProviderService()
