"""
Ophthalmology records: comprehensive eye exams, visual acuity tests and
fundus examinations.  Measurements are stored per eye (``od`` right,
``os`` left).
"""
from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .base import ClinicalRecord

IOP = [MaxValueValidator(80)]
CUP_DISC = [MinValueValidator(0), MaxValueValidator(1)]


class EyeExam(ClinicalRecord):
    exam_date = models.DateTimeField(db_index=True)
    chief_complaint = models.TextField(blank=True, null=True)
    iop_od = models.FloatField(null=True, blank=True, validators=IOP, help_text="mmHg")
    iop_os = models.FloatField(null=True, blank=True, validators=IOP, help_text="mmHg")
    iop_method = models.CharField(max_length=64, blank=True, null=True)
    pupils = models.CharField(max_length=128, blank=True, null=True)
    extraocular_movements = models.CharField(max_length=128, blank=True, null=True)
    visual_fields = models.TextField(blank=True, null=True)
    anterior_segment_od = models.TextField(blank=True, null=True)
    anterior_segment_os = models.TextField(blank=True, null=True)
    lens_od = models.CharField(max_length=128, blank=True, null=True)
    lens_os = models.CharField(max_length=128, blank=True, null=True)
    refraction_od = models.CharField(max_length=64, blank=True, null=True)
    refraction_os = models.CharField(max_length=64, blank=True, null=True)
    diagnosis = models.TextField(blank=True, null=True)
    plan = models.TextField(blank=True, null=True)
    follow_up_date = models.DateTimeField(null=True, blank=True)


class VisualAcuityTest(ClinicalRecord):
    test_date = models.DateTimeField(db_index=True)
    chart_type = models.CharField(max_length=32, blank=True, null=True)
    distance = models.CharField(max_length=32, blank=True, null=True)
    uncorrected_od = models.CharField(max_length=16, blank=True, null=True)
    uncorrected_os = models.CharField(max_length=16, blank=True, null=True)
    corrected_od = models.CharField(max_length=16, blank=True, null=True)
    corrected_os = models.CharField(max_length=16, blank=True, null=True)
    pinhole_od = models.CharField(max_length=16, blank=True, null=True)
    pinhole_os = models.CharField(max_length=16, blank=True, null=True)
    near_vision_od = models.CharField(max_length=16, blank=True, null=True)
    near_vision_os = models.CharField(max_length=16, blank=True, null=True)
    correction_type = models.CharField(max_length=32, blank=True, null=True)
    interpretation = models.TextField(blank=True, null=True)


class FundusExam(ClinicalRecord):
    RETINOPATHY_CHOICES = [
        ('NONE', 'None'),
        ('MILD_NPDR', 'Mild non-proliferative'),
        ('MODERATE_NPDR', 'Moderate non-proliferative'),
        ('SEVERE_NPDR', 'Severe non-proliferative'),
        ('PDR', 'Proliferative'),
    ]

    exam_date = models.DateTimeField(db_index=True)
    dilated = models.BooleanField(default=True)
    cup_disc_ratio_od = models.FloatField(null=True, blank=True, validators=CUP_DISC)
    cup_disc_ratio_os = models.FloatField(null=True, blank=True, validators=CUP_DISC)
    optic_disc_od = models.TextField(blank=True, null=True)
    optic_disc_os = models.TextField(blank=True, null=True)
    macula_od = models.TextField(blank=True, null=True)
    macula_os = models.TextField(blank=True, null=True)
    vessels_od = models.TextField(blank=True, null=True)
    vessels_os = models.TextField(blank=True, null=True)
    periphery_od = models.TextField(blank=True, null=True)
    periphery_os = models.TextField(blank=True, null=True)
    retinopathy_grade = models.CharField(max_length=16, choices=RETINOPATHY_CHOICES, default='NONE', db_index=True)
    macular_edema = models.BooleanField(default=False)
    retinal_detachment = models.BooleanField(default=False)
    photos_taken = models.BooleanField(default=False)
    impression = models.TextField(blank=True, null=True)
