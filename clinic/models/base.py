"""
Shared building blocks for the clinical record models.

Every specialty record belongs to a patient and is optionally attributed
to a provider (an active doctor or nurse).  Primary keys are UUIDs so that
record ids can be handed to the client without exposing row counts.
"""
from __future__ import annotations

import uuid

from django.conf import settings
from django.db import models


VISIT_STATUS_CHOICES = [
    ('SCHEDULED', 'Scheduled'),
    ('IN_PROGRESS', 'In progress'),
    ('COMPLETED', 'Completed'),
    ('CANCELLED', 'Cancelled'),
]

TEST_STATUS_CHOICES = [
    ('ORDERED', 'Ordered'),
    ('IN_PROGRESS', 'In progress'),
    ('COMPLETED', 'Completed'),
    ('CANCELLED', 'Cancelled'),
]

ROUTE_CHOICES = [
    ('ORAL', 'Oral'),
    ('IV', 'Intravenous'),
    ('IM', 'Intramuscular'),
    ('SC', 'Subcutaneous'),
    ('SL', 'Sublingual'),
    ('TOPICAL', 'Topical'),
    ('INHALED', 'Inhaled'),
    ('OTHER', 'Other'),
]


class TimeStampedModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class ClinicalRecord(TimeStampedModel):
    """Abstract base for all patient-bound specialty records."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient = models.ForeignKey(
        'clinic.Patient', on_delete=models.CASCADE, related_name='%(class)s_records'
    )
    provider = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='%(class)s_records',
    )
    notes = models.TextField(blank=True, default='')

    class Meta:
        abstract = True

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.pk}) patient={self.patient_id}"
