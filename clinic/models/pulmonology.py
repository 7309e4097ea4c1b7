"""
Pulmonology records: spirometry, bronchoscopy and polysomnography.
"""
from __future__ import annotations

from django.core.validators import MaxValueValidator
from django.db import models

from .base import ClinicalRecord

PERCENT = [MaxValueValidator(100)]


class Spirometry(ClinicalRecord):
    QUALITY_CHOICES = [(grade, grade) for grade in ('A', 'B', 'C', 'D', 'E', 'F')]

    test_date = models.DateTimeField(db_index=True)
    indication = models.TextField(blank=True, null=True)
    quality_grade = models.CharField(max_length=1, choices=QUALITY_CHOICES)
    fev1 = models.FloatField(help_text="litres")
    fvc = models.FloatField(help_text="litres")
    fev1_fvc_ratio = models.FloatField(null=True, blank=True)
    predicted_fev1 = models.FloatField(null=True, blank=True)
    predicted_fvc = models.FloatField(null=True, blank=True)
    percent_predicted_fev1 = models.FloatField(null=True, blank=True)
    percent_predicted_fvc = models.FloatField(null=True, blank=True)
    fef2575 = models.FloatField(null=True, blank=True)
    bronchodilator_given = models.BooleanField(default=False)
    post_bd_fev1 = models.FloatField(null=True, blank=True)
    post_bd_fvc = models.FloatField(null=True, blank=True)
    post_bd_ratio = models.FloatField(null=True, blank=True)
    significant_response = models.BooleanField(default=False)
    interpretation = models.TextField(blank=True, null=True)
    diagnosis = models.TextField(blank=True, null=True)

    class Meta:
        verbose_name_plural = 'spirometry'


class Bronchoscopy(ClinicalRecord):
    procedure_date = models.DateTimeField(db_index=True)
    indication = models.TextField()
    anesthesia = models.CharField(max_length=64, blank=True, null=True)
    vocal_cords = models.TextField(blank=True, null=True)
    trachea = models.TextField(blank=True, null=True)
    carina = models.TextField(blank=True, null=True)
    right_main_bronchus = models.TextField(blank=True, null=True)
    left_main_bronchus = models.TextField(blank=True, null=True)
    lobar_branches = models.TextField(blank=True, null=True)
    segmental_branches = models.TextField(blank=True, null=True)
    abnormalities_found = models.BooleanField(default=False)
    abnormalities = models.TextField(blank=True, null=True)
    biopsies_taken = models.PositiveIntegerField(default=0)
    biopsy_sites = models.TextField(blank=True, null=True)
    bal_performed = models.BooleanField(default=False)
    bal_sites = models.TextField(blank=True, null=True)
    bal_results = models.TextField(blank=True, null=True)
    brushings_taken = models.BooleanField(default=False)
    complications = models.TextField(blank=True, null=True)
    post_op_instructions = models.TextField(blank=True, null=True)

    class Meta:
        verbose_name_plural = 'bronchoscopies'


class SleepStudy(ClinicalRecord):
    SEVERITY_CHOICES = [
        ('NONE', 'None'),
        ('MILD', 'Mild'),
        ('MODERATE', 'Moderate'),
        ('SEVERE', 'Severe'),
    ]

    study_date = models.DateTimeField(db_index=True)
    study_type = models.CharField(max_length=64)
    ahi = models.FloatField(help_text="events/hour")
    rdi = models.FloatField(null=True, blank=True)
    odi = models.FloatField(null=True, blank=True)
    mean_spo2 = models.FloatField(null=True, blank=True, validators=PERCENT)
    nadir_spo2 = models.FloatField(null=True, blank=True, validators=PERCENT)
    time_below90 = models.FloatField(null=True, blank=True, help_text="minutes")
    sleep_efficiency = models.FloatField(null=True, blank=True, validators=PERCENT)
    total_sleep_time = models.FloatField(null=True, blank=True, help_text="minutes")
    rem_percentage = models.FloatField(null=True, blank=True, validators=PERCENT)
    deep_sleep_percentage = models.FloatField(null=True, blank=True, validators=PERCENT)
    apnea_severity = models.CharField(max_length=10, choices=SEVERITY_CHOICES, db_index=True)
    central_apnea_index = models.FloatField(null=True, blank=True)
    obstructive_apnea_index = models.FloatField(null=True, blank=True)
    hypopnea_index = models.FloatField(null=True, blank=True)
    cpap_recommended = models.BooleanField(default=False)
    cpap_pressure = models.FloatField(null=True, blank=True)
    bipap_recommended = models.BooleanField(default=False)
    bipap_settings = models.CharField(max_length=128, blank=True, null=True)
    positional_therapy = models.BooleanField(default=False)
    oral_appliance = models.BooleanField(default=False)
    surgical_evaluation = models.BooleanField(default=False)

    class Meta:
        verbose_name_plural = 'sleep studies'

    @staticmethod
    def severity_for_ahi(ahi: float) -> str:
        if ahi < 5:
            return 'NONE'
        if ahi < 15:
            return 'MILD'
        if ahi < 30:
            return 'MODERATE'
        return 'SEVERE'
