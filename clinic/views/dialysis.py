"""
Dialysis endpoints under ``/api/dialysis/``.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from ..responses import ok
from ..serializers import dialysis as s
from ..serializers.base import DateRangeQuerySerializer
from ..services import dialysis as svc
from .base import crud_views

sessions, session_detail = crud_views(svc.sessions, s.DialysisSessionSerializer)
prescriptions, prescription_detail = crud_views(svc.prescriptions, s.DialysisPrescriptionSerializer)
flowsheets, flowsheet_detail = crud_views(svc.flowsheets, s.DialysisFlowsheetSerializer)
stations, station_detail = crud_views(svc.stations, s.DialysisStationSerializer)
schedules, schedule_detail = crud_views(svc.schedules, s.DialysisScheduleSerializer)
labs, lab_detail = crud_views(svc.labs, s.DialysisLabSerializer)
medications, medication_detail = crud_views(svc.medications, s.DialysisMedicationSerializer)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def summary_report(request):
    q = DateRangeQuerySerializer(data=request.query_params.dict())
    q.is_valid(raise_exception=True)
    return ok(svc.summary(q.validated_data.get('startDate'), q.validated_data.get('endDate')))
