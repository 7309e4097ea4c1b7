"""
Success and paginated envelopes shared by every endpoint.

Errors are produced by :func:`clinic.exceptions.api_exception_handler`.
"""
from __future__ import annotations

import math

from rest_framework import status as http_status
from rest_framework.response import Response


def total_pages(total: int, limit: int) -> int:
    if not total or not limit:
        return 0
    return math.ceil(total / limit)


def ok(data=None, message: str | None = None, status: int = http_status.HTTP_200_OK) -> Response:
    body = {'ok': True, 'data': data}
    if message:
        body['message'] = message
    return Response(body, status=status)


def paginated(items, *, page: int, limit: int, total: int) -> Response:
    return Response({
        'ok': True,
        'data': list(items),
        'pagination': {
            'page': page,
            'limit': limit,
            'total': total,
            'totalPages': total_pages(total, limit),
        },
    })
