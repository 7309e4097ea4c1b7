"""
Gastroenterology records: upper endoscopy, colonoscopy and liver function
panels.
"""
from __future__ import annotations

from django.db import models

from .base import ClinicalRecord

PROCEDURE_STATUS_CHOICES = [
    ('SCHEDULED', 'Scheduled'),
    ('COMPLETED', 'Completed'),
    ('CANCELLED', 'Cancelled'),
]

PREP_QUALITY_CHOICES = [
    ('EXCELLENT', 'Excellent'),
    ('GOOD', 'Good'),
    ('FAIR', 'Fair'),
    ('POOR', 'Poor'),
]


class GastroProcedure(ClinicalRecord):
    """Fields shared by scoped GI procedures."""
    procedure_date = models.DateTimeField(db_index=True)
    indication = models.TextField()
    status = models.CharField(max_length=20, choices=PROCEDURE_STATUS_CHOICES, default='SCHEDULED', db_index=True)
    sedation_type = models.CharField(max_length=64, blank=True, null=True)
    scope_insertion = models.CharField(max_length=128, blank=True, null=True)
    prep_quality = models.CharField(max_length=10, choices=PREP_QUALITY_CHOICES, blank=True, null=True)
    mucosal_appearance = models.TextField(blank=True, null=True)
    lesions_found = models.BooleanField(default=False)
    lesions_description = models.TextField(blank=True, null=True)
    biopsies_taken = models.PositiveIntegerField(default=0)
    biopsy_sites = models.TextField(blank=True, null=True)
    hemostasis_performed = models.BooleanField(default=False)
    polyps_removed = models.PositiveIntegerField(default=0)
    complications = models.TextField(blank=True, null=True)
    recommendations = models.TextField(blank=True, null=True)
    follow_up_interval = models.CharField(max_length=64, blank=True, null=True)

    class Meta:
        abstract = True


class Endoscopy(GastroProcedure):
    esophagus = models.TextField(blank=True, null=True)
    gastroesophageal_junction = models.TextField(blank=True, null=True)
    stomach = models.TextField(blank=True, null=True)
    pylorus = models.TextField(blank=True, null=True)
    duodenum = models.TextField(blank=True, null=True)
    hemostasis_method = models.CharField(max_length=128, blank=True, null=True)
    polypectomy = models.BooleanField(default=False)
    polyp_size_mm = models.FloatField(null=True, blank=True)

    class Meta:
        verbose_name_plural = 'endoscopies'


class Colonoscopy(GastroProcedure):
    cecal_intubation = models.BooleanField(default=False)
    cecal_intubation_time = models.PositiveIntegerField(null=True, blank=True, help_text="minutes")
    withdrawal_time = models.PositiveIntegerField(null=True, blank=True, help_text="minutes")
    ileum_examined = models.BooleanField(default=False)
    polyps_found = models.BooleanField(default=False)
    polyp_size_max_mm = models.FloatField(null=True, blank=True)
    polyp_histology = models.CharField(max_length=128, blank=True, null=True)

    class Meta:
        verbose_name_plural = 'colonoscopies'


class LiverFunctionTest(ClinicalRecord):
    test_date = models.DateTimeField(db_index=True)
    alt = models.FloatField(null=True, blank=True)
    ast = models.FloatField(null=True, blank=True)
    alp = models.FloatField(null=True, blank=True)
    ggt = models.FloatField(null=True, blank=True)
    total_bilirubin = models.FloatField(null=True, blank=True)
    direct_bilirubin = models.FloatField(null=True, blank=True)
    indirect_bilirubin = models.FloatField(null=True, blank=True)
    total_protein = models.FloatField(null=True, blank=True)
    albumin = models.FloatField(null=True, blank=True)
    globulin = models.FloatField(null=True, blank=True)
    ag_ratio = models.FloatField(null=True, blank=True)
    pt = models.FloatField(null=True, blank=True)
    inr = models.FloatField(null=True, blank=True)
    ptt = models.FloatField(null=True, blank=True)
    fibroscan_score = models.FloatField(null=True, blank=True, help_text="kPa")
    fibrosis_stage = models.CharField(max_length=16, blank=True, null=True)
    steatosis_grade = models.CharField(max_length=16, blank=True, null=True)
    cap_score = models.FloatField(null=True, blank=True)
    diagnosis = models.TextField(blank=True, null=True)
    interpretation = models.TextField(blank=True, null=True)
