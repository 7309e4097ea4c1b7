"""
Specimen tracking for the laboratory.
"""
from __future__ import annotations

import uuid

from django.conf import settings
from django.db import models

from .base import TimeStampedModel


class Specimen(TimeStampedModel):
    """A collected sample, identified by a unique ``SP{YYMMDD}{seq}`` barcode."""
    TYPE_CHOICES = [
        ('BLOOD', 'Blood'),
        ('SERUM', 'Serum'),
        ('PLASMA', 'Plasma'),
        ('URINE', 'Urine'),
        ('STOOL', 'Stool'),
        ('CSF', 'Cerebrospinal fluid'),
        ('SPUTUM', 'Sputum'),
        ('SWAB', 'Swab'),
        ('TISSUE', 'Tissue'),
        ('FLUID', 'Body fluid'),
        ('BONE_MARROW', 'Bone marrow'),
        ('OTHER', 'Other'),
    ]
    STATUS_ORDERED = 'ORDERED'
    STATUS_COLLECTED = 'COLLECTED'
    STATUS_RECEIVED = 'RECEIVED'
    STATUS_PROCESSING = 'PROCESSING'
    STATUS_COMPLETED = 'COMPLETED'
    STATUS_REJECTED = 'REJECTED'
    STATUS_CHOICES = [
        (STATUS_ORDERED, 'Ordered'),
        (STATUS_COLLECTED, 'Collected'),
        (STATUS_RECEIVED, 'Received'),
        (STATUS_PROCESSING, 'Processing'),
        (STATUS_COMPLETED, 'Completed'),
        (STATUS_REJECTED, 'Rejected'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    barcode = models.CharField(max_length=32, unique=True)
    patient = models.ForeignKey('clinic.Patient', on_delete=models.CASCADE, related_name='specimens')
    specimen_type = models.CharField(max_length=20, choices=TYPE_CHOICES, db_index=True)
    collection_site = models.CharField(max_length=128, blank=True, null=True)
    volume_collected = models.FloatField(null=True, blank=True, help_text="ml")
    collection_notes = models.TextField(blank=True, null=True)
    collection_time = models.DateTimeField(db_index=True)
    collected_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL, related_name='collected_specimens'
    )
    received_time = models.DateTimeField(null=True, blank=True)
    received_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL, related_name='received_specimens'
    )
    reception_notes = models.TextField(blank=True, null=True)
    storage_location = models.CharField(max_length=128, blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_COLLECTED, db_index=True)
    rejection_reason = models.TextField(blank=True, null=True)

    def __str__(self) -> str:
        return self.barcode
