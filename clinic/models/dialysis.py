"""
Dialysis unit records.

Sessions carry intradialytic flowsheets; stations are unit resources with
no patient and are scheduled against recurring patient slots.
"""
from __future__ import annotations

import uuid

from django.core.validators import MaxValueValidator
from django.db import models

from .base import ClinicalRecord, ROUTE_CHOICES, TimeStampedModel, VISIT_STATUS_CHOICES


class DialysisSession(ClinicalRecord):
    status = models.CharField(max_length=20, choices=VISIT_STATUS_CHOICES, default='SCHEDULED', db_index=True)
    start_time = models.DateTimeField(db_index=True)
    end_time = models.DateTimeField()
    machine_number = models.CharField(max_length=32, blank=True, null=True)
    access_type = models.CharField(max_length=64, blank=True, null=True)
    dialyzer = models.CharField(max_length=64, blank=True, null=True)
    dialysate = models.CharField(max_length=64, blank=True, null=True)
    blood_flow_rate = models.PositiveIntegerField(null=True, blank=True, help_text="ml/min")
    dialysate_flow_rate = models.PositiveIntegerField(null=True, blank=True, help_text="ml/min")
    ultrafiltration_volume = models.FloatField(null=True, blank=True, help_text="ml")
    weight_pre = models.FloatField(null=True, blank=True, help_text="kg")
    weight_post = models.FloatField(null=True, blank=True, help_text="kg")

    @property
    def duration_minutes(self):
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds() / 60.0
        return None


class DialysisPrescription(ClinicalRecord):
    dry_weight = models.FloatField(null=True, blank=True, help_text="kg")
    target_ultrafiltration = models.FloatField(null=True, blank=True, help_text="ml")
    duration_minutes = models.PositiveIntegerField(null=True, blank=True)
    dialyzer = models.CharField(max_length=64, blank=True, null=True)
    dialysate = models.CharField(max_length=64, blank=True, null=True)
    blood_flow_rate = models.PositiveIntegerField(null=True, blank=True)
    dialysate_flow_rate = models.PositiveIntegerField(null=True, blank=True)
    access_type = models.CharField(max_length=64, blank=True, null=True)
    frequency = models.CharField(max_length=64, blank=True, null=True)
    is_active = models.BooleanField(default=True, db_index=True)
    start_date = models.DateTimeField(null=True, blank=True, db_index=True)
    end_date = models.DateTimeField(null=True, blank=True)


class DialysisFlowsheet(TimeStampedModel):
    """Vitals and machine readings charted during a session."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    session = models.ForeignKey(DialysisSession, on_delete=models.CASCADE, related_name='flowsheets')
    recorded_at = models.DateTimeField(db_index=True)
    bp_systolic = models.PositiveIntegerField(null=True, blank=True)
    bp_diastolic = models.PositiveIntegerField(null=True, blank=True)
    heart_rate = models.PositiveIntegerField(null=True, blank=True)
    temperature = models.FloatField(null=True, blank=True)
    oxygen_saturation = models.FloatField(null=True, blank=True, validators=[MaxValueValidator(100)])
    blood_flow_rate = models.PositiveIntegerField(null=True, blank=True)
    dialysate_flow_rate = models.PositiveIntegerField(null=True, blank=True)
    ultrafiltration_volume = models.FloatField(null=True, blank=True)
    arterial_pressure = models.FloatField(null=True, blank=True)
    venous_pressure = models.FloatField(null=True, blank=True)
    transmembrane_pressure = models.FloatField(null=True, blank=True)
    alarms = models.TextField(blank=True, null=True)
    notes = models.TextField(blank=True, default='')

    def __str__(self) -> str:
        return f"DialysisFlowsheet({self.pk}) session={self.session_id}"


class DialysisStation(TimeStampedModel):
    STATUS_CHOICES = [
        ('AVAILABLE', 'Available'),
        ('IN_USE', 'In use'),
        ('MAINTENANCE', 'Maintenance'),
        ('OUT_OF_SERVICE', 'Out of service'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=64, unique=True)
    room = models.CharField(max_length=64, blank=True, null=True)
    machine_number = models.CharField(max_length=32, blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='AVAILABLE', db_index=True)
    last_service_date = models.DateTimeField(null=True, blank=True)
    next_service_date = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)
    notes = models.TextField(blank=True, default='')

    def __str__(self) -> str:
        return self.name


class DialysisSchedule(ClinicalRecord):
    RECURRENCE_CHOICES = [
        ('NONE', 'None'),
        ('DAILY', 'Daily'),
        ('WEEKLY', 'Weekly'),
        ('MONTHLY', 'Monthly'),
    ]

    station = models.ForeignKey(
        DialysisStation, null=True, blank=True, on_delete=models.SET_NULL, related_name='schedules'
    )
    start_time = models.DateTimeField(db_index=True)
    duration_minutes = models.PositiveIntegerField()
    recurrence = models.CharField(max_length=10, choices=RECURRENCE_CHOICES, default='NONE')
    days_of_week = models.JSONField(default=list, blank=True)
    end_date = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)


class DialysisLab(ClinicalRecord):
    collected_at = models.DateTimeField(db_index=True)
    ktv = models.FloatField(null=True, blank=True)
    urr = models.FloatField(null=True, blank=True, validators=[MaxValueValidator(100)], help_text="%")
    hemoglobin = models.FloatField(null=True, blank=True)
    potassium = models.FloatField(null=True, blank=True)
    sodium = models.FloatField(null=True, blank=True)
    calcium = models.FloatField(null=True, blank=True)
    phosphorus = models.FloatField(null=True, blank=True)
    bicarbonate = models.FloatField(null=True, blank=True)
    albumin = models.FloatField(null=True, blank=True)
    creatinine = models.FloatField(null=True, blank=True)


class DialysisMedication(ClinicalRecord):
    medication_name = models.CharField(max_length=200)
    dose = models.CharField(max_length=64, blank=True, null=True)
    route = models.CharField(max_length=10, choices=ROUTE_CHOICES, default='IV')
    frequency = models.CharField(max_length=64, blank=True, null=True)
    start_date = models.DateTimeField(null=True, blank=True, db_index=True)
    end_date = models.DateTimeField(null=True, blank=True)
    last_administered_at = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)
