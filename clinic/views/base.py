"""
Factory for the collection/detail view pair behind every record resource.

``GET`` on the collection lists with pagination and filters, ``POST``
creates.  The detail view reads, updates (``PUT`` and ``PATCH`` are both
partial) and deletes.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from ..permissions import IsClinicalWriter
from ..responses import ok, paginated
from ..serializers.base import list_query_serializer


def list_records(request, service, serializer_class, query_serializer=None):
    query_serializer = query_serializer or list_query_serializer(service)
    q = query_serializer(data=request.query_params.dict())
    q.is_valid(raise_exception=True)
    page = service.list(q.validated_data)
    data = serializer_class(page.items, many=True).data
    return paginated(data, page=page.page, limit=page.limit, total=page.total)


def crud_views(service, serializer_class, permission=IsClinicalWriter, detail_serializer=None):
    """Return ``(collection_view, detail_view)`` for a record service.

    ``detail_serializer`` renders single records when it differs from the
    list representation.
    """
    detail_serializer = detail_serializer or serializer_class
    query_serializer = list_query_serializer(service)
    label = service.label

    @api_view(['GET', 'POST'])
    @permission_classes([IsAuthenticated, permission])
    def collection(request):
        if request.method == 'GET':
            return list_records(request, service, serializer_class, query_serializer)
        s = serializer_class(data=request.data)
        s.is_valid(raise_exception=True)
        obj = service.create(request.user, s.validated_data)
        message = f'{label} created successfully'
        return ok(detail_serializer(obj).data, message=message, status=status.HTTP_201_CREATED)

    @api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
    @permission_classes([IsAuthenticated, permission])
    def detail(request, pk):
        obj = service.get(pk)
        if request.method == 'GET':
            return ok(detail_serializer(obj).data)
        if request.method == 'DELETE':
            service.delete(request.user, obj)
            return ok(None, message=f'{label} deleted successfully')
        s = serializer_class(obj, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        obj = service.update(request.user, obj, s.validated_data)
        return ok(detail_serializer(obj).data, message=f'{label} updated successfully')

    collection.__name__ = f'{service.model_name}_collection'
    detail.__name__ = f'{service.model_name}_detail'
    return collection, detail
