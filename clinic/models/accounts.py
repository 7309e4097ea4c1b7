"""
User accounts and the audit trail.
"""
from __future__ import annotations

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Staff account with a hospital role.

    Only ``doctor`` and ``nurse`` accounts count as clinicians and may be
    referenced as the provider of a clinical record.
    """
    ROLE_ADMIN = 'admin'
    ROLE_DOCTOR = 'doctor'
    ROLE_NURSE = 'nurse'
    ROLE_LAB_TECH = 'lab_tech'
    ROLE_RECEPTIONIST = 'receptionist'
    ROLE_CHOICES = [
        (ROLE_ADMIN, 'Administrator'),
        (ROLE_DOCTOR, 'Doctor'),
        (ROLE_NURSE, 'Nurse'),
        (ROLE_LAB_TECH, 'Lab technician'),
        (ROLE_RECEPTIONIST, 'Receptionist'),
    ]
    CLINICIAN_ROLES = (ROLE_DOCTOR, ROLE_NURSE)

    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_RECEPTIONIST, db_index=True)
    phone = models.CharField(max_length=32, blank=True)

    @property
    def is_clinician(self) -> bool:
        return self.is_active and self.role in self.CLINICIAN_ROLES

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"


class AuditEvent(models.Model):
    user = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True)
    action = models.CharField(max_length=64)
    object_type = models.CharField(max_length=64, blank=True, null=True)
    object_id = models.CharField(max_length=64, blank=True, null=True)
    detail = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['action', 'created_at']),
            models.Index(fields=['object_type', 'object_id', 'created_at']),
        ]

    def __str__(self):
        return f"{self.action}:{self.user_id}@{self.created_at:%F %T}"
