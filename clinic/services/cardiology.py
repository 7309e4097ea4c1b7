"""
Cardiology record services and the department summary report.
"""
from __future__ import annotations

from django.db.models import Avg, Count, Q

from clinic.models import (
    CardiologyDevice,
    CardiologyEcg,
    CardiologyEcho,
    CardiologyElectrophysiology,
    CardiologyHeartFailure,
    CardiologyLab,
    CardiologyMedication,
    CardiologyProcedure,
    CardiologyStressTest,
    CardiologyVisit,
)

from .base import RecordService, date_range_q


class VisitService(RecordService):
    model = CardiologyVisit
    label = 'Cardiology visit'
    date_field = 'visit_date'
    search_fields = ('reason', 'diagnosis')


class EcgService(RecordService):
    model = CardiologyEcg
    label = 'ECG'
    date_field = 'recorded_at'
    search_fields = ('type', 'rhythm', 'interpretation')
    filters = {'visitId': 'visit'}


class EchoService(RecordService):
    model = CardiologyEcho
    label = 'Echocardiogram'
    date_field = 'performed_at'
    search_fields = ('type', 'summary')
    filters = {'visitId': 'visit'}


class StressTestService(RecordService):
    model = CardiologyStressTest
    label = 'Stress test'
    date_field = 'performed_at'
    search_fields = ('type', 'protocol', 'result')
    filters = {'visitId': 'visit'}


class ProcedureService(RecordService):
    model = CardiologyProcedure
    label = 'Cardiology procedure'
    date_field = 'procedure_date'
    search_fields = ('type', 'indication', 'outcome')
    filters = {'visitId': 'visit'}


class ElectrophysiologyService(RecordService):
    model = CardiologyElectrophysiology
    label = 'Electrophysiology study'
    date_field = 'performed_at'
    search_fields = (
        'arrhythmia_type', 'device_type', 'manufacturer', 'device_model', 'ablation_target', 'indication', 'outcome',
    )
    filters = {'visitId': 'visit', 'procedureType': 'procedure_type'}


class HeartFailureService(RecordService):
    model = CardiologyHeartFailure
    label = 'Heart failure assessment'
    date_field = 'assessment_date'
    search_fields = ('etiology', 'symptoms', 'medications', 'mechanical_support', 'assessment', 'plan')
    filters = {'visitId': 'visit', 'nyhaClass': 'nyha_class', 'heartFailureStage': 'heart_failure_stage'}


class DeviceService(RecordService):
    model = CardiologyDevice
    label = 'Cardiac device'
    date_field = 'implant_date'
    search_fields = ('device_type', 'manufacturer', 'device_model', 'serial_number')


class MedicationService(RecordService):
    model = CardiologyMedication
    label = 'Cardiology medication'
    date_field = 'start_date'
    search_fields = ('medication_name', 'indication')
    filters = {'isActive': 'is_active'}


class LabService(RecordService):
    model = CardiologyLab
    label = 'Cardiology lab'
    date_field = 'collected_at'


visits = VisitService()
ecgs = EcgService()
echos = EchoService()
stress_tests = StressTestService()
procedures = ProcedureService()
electrophysiology = ElectrophysiologyService()
heart_failure = HeartFailureService()
devices = DeviceService()
medications = MedicationService()
labs = LabService()


def summary(start=None, end=None) -> dict:
    """Department counts and averages, optionally bounded by date."""
    visit_counts = CardiologyVisit.objects.filter(date_range_q('visit_date', start, end)).aggregate(
        total=Count('id'),
        completed=Count('id', filter=Q(status='COMPLETED')),
        cancelled=Count('id', filter=Q(status='CANCELLED')),
    )
    echo_stats = CardiologyEcho.objects.filter(date_range_q('performed_at', start, end)).aggregate(
        count=Count('id'), avg_lvef=Avg('lvef')
    )
    procedure_counts = CardiologyProcedure.objects.filter(date_range_q('procedure_date', start, end)).aggregate(
        total=Count('id'), completed=Count('id', filter=Q(status='COMPLETED'))
    )
    lab_stats = CardiologyLab.objects.filter(date_range_q('collected_at', start, end)).aggregate(
        avg_troponin=Avg('troponin')
    )
    return {
        'totalVisits': visit_counts['total'],
        'completedVisits': visit_counts['completed'],
        'cancelledVisits': visit_counts['cancelled'],
        'totalEcgs': CardiologyEcg.objects.filter(date_range_q('recorded_at', start, end)).count(),
        'totalEchos': echo_stats['count'],
        'totalStressTests': CardiologyStressTest.objects.filter(date_range_q('performed_at', start, end)).count(),
        'totalProcedures': procedure_counts['total'],
        'completedProcedures': procedure_counts['completed'],
        'averageLvef': _round(echo_stats['avg_lvef']),
        'averageTroponin': _round(lab_stats['avg_troponin'], 3),
        'activeDevices': CardiologyDevice.objects.filter(status='ACTIVE').count(),
        'activeMedications': CardiologyMedication.objects.filter(is_active=True).count(),
    }


def _round(value, digits=1):
    return round(value, digits) if value is not None else None
