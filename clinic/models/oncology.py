"""
Oncology records: chemotherapy cycles, radiation courses, cancer staging
and tumor board reviews.
"""
from __future__ import annotations

from django.db import models

from .base import ClinicalRecord


class ChemotherapyCycle(ClinicalRecord):
    STATUS_CHOICES = [
        ('SCHEDULED', 'Scheduled'),
        ('IN_PROGRESS', 'In progress'),
        ('COMPLETED', 'Completed'),
        ('DELAYED', 'Delayed'),
        ('CANCELLED', 'Cancelled'),
    ]
    protocol_name = models.CharField(max_length=128)
    cancer_type = models.CharField(max_length=128)
    cycle_number = models.PositiveIntegerField()
    total_cycles = models.PositiveIntegerField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='SCHEDULED', db_index=True)
    scheduled_date = models.DateTimeField(db_index=True)
    administered_date = models.DateTimeField(null=True, blank=True)
    premedications = models.TextField(blank=True, null=True)
    chemotherapy_agents = models.TextField(blank=True, null=True)
    doses = models.TextField(blank=True, null=True)
    route = models.CharField(max_length=32, blank=True, null=True)
    duration_hours = models.FloatField(null=True, blank=True)
    tolerance = models.CharField(max_length=64, blank=True, null=True)
    side_effects = models.TextField(blank=True, null=True)
    dose_modifications = models.TextField(blank=True, null=True)
    next_cycle_date = models.DateTimeField(null=True, blank=True)
    growth_factor_given = models.BooleanField(default=False)
    labs_reviewed = models.BooleanField(default=False)


class RadiationCourse(ClinicalRecord):
    STATUS_CHOICES = [
        ('PLANNED', 'Planned'),
        ('IN_PROGRESS', 'In progress'),
        ('COMPLETED', 'Completed'),
        ('INTERRUPTED', 'Interrupted'),
        ('CANCELLED', 'Cancelled'),
    ]
    cancer_type = models.CharField(max_length=128)
    treatment_site = models.CharField(max_length=128)
    total_dose_gy = models.FloatField()
    fractions = models.PositiveIntegerField()
    dose_per_fraction = models.FloatField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='PLANNED', db_index=True)
    start_date = models.DateTimeField(db_index=True)
    completion_date = models.DateTimeField(null=True, blank=True)
    fraction_number = models.PositiveIntegerField(null=True, blank=True)
    technique = models.CharField(max_length=64, blank=True, null=True)
    energy = models.CharField(max_length=32, blank=True, null=True)
    skin_reactions = models.TextField(blank=True, null=True)
    fatigue_level = models.CharField(max_length=32, blank=True, null=True)
    other_side_effects = models.TextField(blank=True, null=True)
    treatment_breaks = models.PositiveIntegerField(null=True, blank=True)
    break_reason = models.TextField(blank=True, null=True)


class CancerStaging(ClinicalRecord):
    STAGE_CHOICES = [
        ('STAGE_0', '0'),
        ('STAGE_I', 'I'),
        ('STAGE_II', 'II'),
        ('STAGE_III', 'III'),
        ('STAGE_IV', 'IV'),
        ('UNKNOWN', 'Unknown'),
    ]
    cancer_type = models.CharField(max_length=128)
    histology = models.CharField(max_length=128, blank=True, null=True)
    grade = models.CharField(max_length=32, blank=True, null=True)
    t_stage = models.CharField(max_length=16, blank=True, null=True)
    n_stage = models.CharField(max_length=16, blank=True, null=True)
    m_stage = models.CharField(max_length=16, blank=True, null=True)
    overall_stage = models.CharField(max_length=12, choices=STAGE_CHOICES, default='UNKNOWN', db_index=True)
    staging_date = models.DateTimeField(db_index=True)
    staging_method = models.CharField(max_length=64, blank=True, null=True)
    tumor_size_cm = models.FloatField(null=True, blank=True)
    nodes_positive = models.PositiveIntegerField(null=True, blank=True)
    nodes_examined = models.PositiveIntegerField(null=True, blank=True)
    metastasis_sites = models.TextField(blank=True, null=True)
    biomarkers = models.TextField(blank=True, null=True)
    pathology_report = models.TextField(blank=True, null=True)


class TumorBoardReview(ClinicalRecord):
    """A case discussed at a tumor board; ``provider`` is the presenter."""
    STATUS_CHOICES = [
        ('SCHEDULED', 'Scheduled'),
        ('DISCUSSED', 'Discussed'),
        ('CANCELLED', 'Cancelled'),
    ]
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='SCHEDULED', db_index=True)
    meeting_date = models.DateTimeField(db_index=True)
    cancer_type = models.CharField(max_length=128)
    stage = models.CharField(max_length=32, blank=True, null=True)
    case_presentation = models.TextField(blank=True, null=True)
    imaging_reviewed = models.BooleanField(default=False)
    pathology_reviewed = models.BooleanField(default=False)
    molecular_testing = models.TextField(blank=True, null=True)
    treatment_options = models.TextField(blank=True, null=True)
    recommended_plan = models.TextField(blank=True, null=True)
    clinical_trial_offered = models.BooleanField(default=False)
    trial_name = models.CharField(max_length=200, blank=True, null=True)
    attendees = models.TextField(blank=True, null=True)
    consensus_reached = models.BooleanField(default=False)
