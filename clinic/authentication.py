"""
Token authentication for the API.

This subclass of Django REST framework's ``TokenAuthentication`` lives in
its own module so that the settings can reference it without importing
any views.  JWT bearer tokens are handled by simplejwt alongside it.
"""
from __future__ import annotations

import logging

from rest_framework import authentication, exceptions

logger = logging.getLogger(__name__)


class TokenAuthentication(authentication.TokenAuthentication):
    """Accept ``Authorization: Token <key>`` and reject disabled accounts."""

    keyword = 'Token'

    def authenticate_credentials(self, key):
        try:
            return super().authenticate_credentials(key)
        except exceptions.AuthenticationFailed:
            logger.info("Rejected API token ending in %s", key[-4:] if key else '')
            raise
