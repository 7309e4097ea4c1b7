"""
Dialysis unit services and the unit summary report.
"""
from __future__ import annotations

from django.db.models import Avg, Count, Q

from clinic.models import (
    DialysisFlowsheet,
    DialysisLab,
    DialysisMedication,
    DialysisPrescription,
    DialysisSchedule,
    DialysisSession,
    DialysisStation,
)

from .base import RecordService, date_range_q


class SessionService(RecordService):
    model = DialysisSession
    label = 'Dialysis session'
    date_field = 'start_time'
    search_fields = ('machine_number', 'access_type', 'dialyzer')


class PrescriptionService(RecordService):
    model = DialysisPrescription
    label = 'Dialysis prescription'
    date_field = 'start_date'
    default_sort = 'created_at'
    search_fields = ('dialyzer', 'dialysate', 'access_type')
    filters = {'isActive': 'is_active'}


class FlowsheetService(RecordService):
    """Flowsheet rows inherit patient and provider from their session."""
    model = DialysisFlowsheet
    label = 'Dialysis flowsheet'
    date_field = 'recorded_at'
    patient_path = 'session__patient'
    provider_path = 'session__provider'
    search_fields = ('alarms',)
    filters = {'sessionId': 'session'}
    select_related = ('session__patient', 'session__provider')


class StationService(RecordService):
    model = DialysisStation
    label = 'Dialysis station'
    date_field = 'created_at'
    default_sort = 'name'
    default_order = 'asc'
    patient_path = None
    provider_path = None
    search_fields = ('name', 'room', 'machine_number')
    filters = {'isActive': 'is_active'}
    select_related = ()


class ScheduleService(RecordService):
    model = DialysisSchedule
    label = 'Dialysis schedule'
    date_field = 'start_time'
    filters = {'stationId': 'station', 'isActive': 'is_active', 'recurrence': 'recurrence'}
    select_related = ('patient', 'provider', 'station')


class LabService(RecordService):
    model = DialysisLab
    label = 'Dialysis lab'
    date_field = 'collected_at'


class MedicationService(RecordService):
    model = DialysisMedication
    label = 'Dialysis medication'
    date_field = 'start_date'
    search_fields = ('medication_name',)
    filters = {'isActive': 'is_active'}


sessions = SessionService()
prescriptions = PrescriptionService()
flowsheets = FlowsheetService()
stations = StationService()
schedules = ScheduleService()
labs = LabService()
medications = MedicationService()


def summary(start=None, end=None) -> dict:
    session_qs = DialysisSession.objects.filter(date_range_q('start_time', start, end))
    counts = session_qs.aggregate(
        total=Count('id'),
        completed=Count('id', filter=Q(status='COMPLETED')),
        cancelled=Count('id', filter=Q(status='CANCELLED')),
    )
    durations = [
        (end_time - start_time).total_seconds() / 60
        for start_time, end_time in session_qs.values_list('start_time', 'end_time')
        if start_time and end_time
    ]
    lab_avgs = DialysisLab.objects.filter(date_range_q('collected_at', start, end)).aggregate(
        ktv=Avg('ktv'), urr=Avg('urr')
    )
    active_patients = (
        DialysisPrescription.objects.filter(is_active=True).values('patient_id').distinct().count()
    )
    return {
        'totalSessions': counts['total'],
        'completedSessions': counts['completed'],
        'cancelledSessions': counts['cancelled'],
        'averageDurationMinutes': round(sum(durations) / len(durations)) if durations else None,
        'averageKtv': round(lab_avgs['ktv'], 2) if lab_avgs['ktv'] is not None else None,
        'averageUrr': round(lab_avgs['urr'], 1) if lab_avgs['urr'] is not None else None,
        'activePatients': active_patients,
    }
