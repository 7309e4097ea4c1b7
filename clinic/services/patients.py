"""
Patient registry: MRN allocation, soft delete, medical history and stats.
"""
from __future__ import annotations

import logging
import secrets

from django.db import IntegrityError, transaction
from django.utils import timezone

from clinic.exceptions import RecordNotFound, ServiceError
from clinic.models import MedicalHistory, Patient

from .audit import log_action
from .base import RecordService

logger = logging.getLogger(__name__)

MRN_RETRIES = 5


def generate_mrn(now=None) -> str:
    now = now or timezone.localtime()
    return f"MRN{now:%y%m%d}{secrets.randbelow(10 ** 6):06d}"


class PatientService(RecordService):
    model = Patient
    label = 'Patient'
    date_field = 'created_at'
    patient_path = None
    provider_path = None
    search_fields = ('first_name', 'last_name', 'mrn', 'phone', 'email')
    filters = {'isActive': 'is_active', 'gender': 'gender', 'bloodType': 'blood_type'}
    select_related = ()

    def create(self, user, data):
        for attempt in range(1, MRN_RETRIES + 1):
            mrn = generate_mrn()
            try:
                with transaction.atomic():
                    patient = Patient.objects.create(mrn=mrn, **data)
                    log_action(user=user, action='patient_create', object_type='patient', object_id=patient.pk)
            except IntegrityError:
                logger.warning("MRN collision on %s (attempt %d/%d)", mrn, attempt, MRN_RETRIES)
                continue
            logger.info("Registered patient %s (%s) by %s", patient.pk, mrn, getattr(user, 'username', '-'))
            return self.get(patient.pk)
        raise ServiceError('Could not allocate a unique MRN', code='mrn_unavailable', http_status=503)

    def get(self, pk):
        obj = Patient.objects.prefetch_related('medical_histories__doctor').filter(pk=pk).first()
        if obj is None:
            raise RecordNotFound('Patient not found')
        return obj

    def delete(self, user, instance) -> None:
        """Deactivate only; clinical records keep pointing at the patient."""
        with transaction.atomic():
            instance.is_active = False
            instance.save(update_fields=['is_active', 'updated_at'])
            log_action(
                user=user, action='patient_delete', object_type='patient', object_id=instance.pk,
                detail={'soft': True},
            )
        logger.info("Deactivated patient %s by %s", instance.pk, getattr(user, 'username', '-'))

    def add_history(self, user, patient: Patient, data) -> MedicalHistory:
        if not patient.is_active:
            raise ServiceError('Patient is inactive', code='patient_inactive')
        with transaction.atomic():
            entry = MedicalHistory.objects.create(patient=patient, doctor=user, **data)
            log_action(
                user=user, action='medicalhistory_create', object_type='medicalhistory', object_id=entry.pk,
                detail={'patient': str(patient.pk)},
            )
        return entry

    def stats(self) -> dict:
        today = timezone.localdate()
        return {
            'total': Patient.objects.count(),
            'active': Patient.objects.filter(is_active=True).count(),
            'todayRegistrations': Patient.objects.filter(created_at__date=today).count(),
        }


patients = PatientService()
