"""
Staff dashboard endpoint, cached for ``DASHBOARD_CACHE_SECONDS``.
"""
from __future__ import annotations

from django.conf import settings
from django.core.cache import cache
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from ..responses import ok
from ..services.dashboard import overview

CACHE_KEY = 'dashboard:overview'


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard(request):
    data = cache.get(CACHE_KEY)
    if data is None:
        data = overview()
        cache.set(CACHE_KEY, data, settings.DASHBOARD_CACHE_SECONDS)
    return ok(data)
