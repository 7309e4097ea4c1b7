"""
Patient registry models.
"""
from __future__ import annotations

import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone

from .base import TimeStampedModel


class Patient(TimeStampedModel):
    """A registered patient, identified by a server-issued MRN.

    Patients are never hard deleted through the API; ``is_active`` is
    cleared instead so that their clinical records stay intact.
    """
    GENDER_CHOICES = [
        ('MALE', 'Male'),
        ('FEMALE', 'Female'),
        ('OTHER', 'Other'),
    ]
    BLOOD_TYPE_CHOICES = [
        ('A_POSITIVE', 'A+'),
        ('A_NEGATIVE', 'A-'),
        ('B_POSITIVE', 'B+'),
        ('B_NEGATIVE', 'B-'),
        ('AB_POSITIVE', 'AB+'),
        ('AB_NEGATIVE', 'AB-'),
        ('O_POSITIVE', 'O+'),
        ('O_NEGATIVE', 'O-'),
        ('UNKNOWN', 'Unknown'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    mrn = models.CharField(max_length=32, unique=True)
    first_name = models.CharField(max_length=100, db_index=True)
    last_name = models.CharField(max_length=100, db_index=True)
    date_of_birth = models.DateField()
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES)
    blood_type = models.CharField(max_length=12, choices=BLOOD_TYPE_CHOICES, default='UNKNOWN')
    email = models.EmailField(blank=True, null=True)
    phone = models.CharField(max_length=32)
    address = models.CharField(max_length=255, blank=True, null=True)
    city = models.CharField(max_length=100, blank=True, null=True)
    country = models.CharField(max_length=100, blank=True, null=True)
    emergency_contact_name = models.CharField(max_length=200, blank=True, null=True)
    emergency_contact_phone = models.CharField(max_length=32, blank=True, null=True)
    emergency_contact_relation = models.CharField(max_length=64, blank=True, null=True)
    allergies = models.JSONField(default=list, blank=True)
    chronic_conditions = models.JSONField(default=list, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self) -> str:
        return f"{self.full_name} ({self.mrn})"


class MedicalHistory(TimeStampedModel):
    """A diagnosis entry recorded against a patient by a doctor."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name='medical_histories')
    doctor = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL, related_name='medical_histories'
    )
    diagnosis = models.CharField(max_length=255)
    treatment = models.TextField(blank=True, null=True)
    notes = models.TextField(blank=True, null=True)
    visit_date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-visit_date']
        verbose_name_plural = 'medical histories'

    def __str__(self) -> str:
        return f"{self.diagnosis} ({self.patient_id})"
