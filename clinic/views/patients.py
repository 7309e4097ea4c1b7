"""
Patient registry views.

Reception, nursing and medical staff may register and edit patients.
Deleting a patient only deactivates it.  Medical history entries are
written by clinicians and attributed to the requesting user.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from ..permissions import IsClinicalWriter, IsRegistryWriter
from ..responses import ok
from ..serializers.patient import (
    MedicalHistoryCreateSerializer,
    MedicalHistorySerializer,
    PatientDetailSerializer,
    PatientSerializer,
)
from ..services.patients import patients as service
from .base import crud_views

patients, patient_detail = crud_views(
    service, PatientSerializer, permission=IsRegistryWriter, detail_serializer=PatientDetailSerializer
)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsClinicalWriter])
def medical_history(request, pk):
    patient = service.get(pk)
    if request.method == 'GET':
        return ok(MedicalHistorySerializer(patient.medical_histories.all(), many=True).data)
    s = MedicalHistoryCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    entry = service.add_history(request.user, patient, s.validated_data)
    return ok(MedicalHistorySerializer(entry).data, message='Medical history added', status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def patient_stats(request):
    return ok(service.stats())
