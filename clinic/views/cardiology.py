"""
Cardiology endpoints under ``/api/cardiology/``.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from ..responses import ok
from ..serializers import cardiology as s
from ..serializers.base import DateRangeQuerySerializer
from ..services import cardiology as svc
from .base import crud_views

visits, visit_detail = crud_views(svc.visits, s.CardiologyVisitSerializer)
ecgs, ecg_detail = crud_views(svc.ecgs, s.CardiologyEcgSerializer)
echos, echo_detail = crud_views(svc.echos, s.CardiologyEchoSerializer)
stress_tests, stress_test_detail = crud_views(svc.stress_tests, s.CardiologyStressTestSerializer)
procedures, procedure_detail = crud_views(svc.procedures, s.CardiologyProcedureSerializer)
electrophysiology, electrophysiology_detail = crud_views(
    svc.electrophysiology, s.CardiologyElectrophysiologySerializer
)
heart_failure, heart_failure_detail = crud_views(svc.heart_failure, s.CardiologyHeartFailureSerializer)
devices, device_detail = crud_views(svc.devices, s.CardiologyDeviceSerializer)
medications, medication_detail = crud_views(svc.medications, s.CardiologyMedicationSerializer)
labs, lab_detail = crud_views(svc.labs, s.CardiologyLabSerializer)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def summary_report(request):
    q = DateRangeQuerySerializer(data=request.query_params.dict())
    q.is_valid(raise_exception=True)
    return ok(svc.summary(q.validated_data.get('startDate'), q.validated_data.get('endDate')))
