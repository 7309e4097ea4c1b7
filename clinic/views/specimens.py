"""
Laboratory specimen views.

Specimens are never deleted; a bad sample is rejected instead.  Lab
technicians and clinicians may collect, receive and reject.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from ..permissions import IsSpecimenWriter
from ..responses import ok
from ..serializers.base import list_query_serializer
from ..serializers.specimen import (
    SpecimenCreateSerializer,
    SpecimenRejectSerializer,
    SpecimenReceiveSerializer,
    SpecimenSerializer,
    SpecimenUpdateSerializer,
)
from ..services.specimens import specimens as service
from .base import list_records

SpecimenListQuerySerializer = list_query_serializer(service)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsSpecimenWriter])
def specimens(request):
    if request.method == 'GET':
        return list_records(request, service, SpecimenSerializer, SpecimenListQuerySerializer)
    s = SpecimenCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    specimen = service.create(request.user, s.validated_data)
    return ok(SpecimenSerializer(specimen).data, message='Specimen collected successfully',
              status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH'])
@permission_classes([IsAuthenticated, IsSpecimenWriter])
def specimen_detail(request, pk):
    specimen = service.get(pk)
    if request.method == 'GET':
        return ok(SpecimenSerializer(specimen).data)
    s = SpecimenUpdateSerializer(specimen, data=request.data, partial=True)
    s.is_valid(raise_exception=True)
    specimen = service.update(request.user, specimen, s.validated_data)
    return ok(SpecimenSerializer(specimen).data, message='Specimen updated successfully')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def specimen_by_barcode(request, barcode):
    return ok(SpecimenSerializer(service.get_by_barcode(barcode)).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsSpecimenWriter])
def receive_specimen(request, pk):
    specimen = service.get(pk)
    s = SpecimenReceiveSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    specimen = service.receive(request.user, specimen, s.validated_data)
    return ok(SpecimenSerializer(specimen).data, message='Specimen received successfully')


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsSpecimenWriter])
def reject_specimen(request, pk):
    specimen = service.get(pk)
    s = SpecimenRejectSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    specimen = service.reject(request.user, specimen, s.validated_data['reason'])
    return ok(SpecimenSerializer(specimen).data, message='Specimen rejected')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def specimen_stats(request):
    return ok(service.stats())
