"""
Pediatrics records: growth measurements, vaccinations and developmental
screening.
"""
from __future__ import annotations

from django.core.validators import MaxValueValidator
from django.db import models

from .base import ClinicalRecord

PERCENTILE = [MaxValueValidator(100)]


class GrowthMeasurement(ClinicalRecord):
    measurement_date = models.DateTimeField(db_index=True)
    age_months = models.PositiveIntegerField(null=True, blank=True)
    weight_kg = models.FloatField(null=True, blank=True)
    height_cm = models.FloatField(null=True, blank=True)
    head_circumference_cm = models.FloatField(null=True, blank=True)
    bmi = models.FloatField(null=True, blank=True)
    weight_percentile = models.FloatField(null=True, blank=True, validators=PERCENTILE)
    height_percentile = models.FloatField(null=True, blank=True, validators=PERCENTILE)
    bmi_percentile = models.FloatField(null=True, blank=True, validators=PERCENTILE)
    head_circ_percentile = models.FloatField(null=True, blank=True, validators=PERCENTILE)
    weight_for_length = models.FloatField(null=True, blank=True)
    growth_velocity = models.FloatField(null=True, blank=True)
    nutritional_status = models.CharField(max_length=64, blank=True, null=True)
    z_score_weight = models.FloatField(null=True, blank=True)
    z_score_height = models.FloatField(null=True, blank=True)
    plot_on_who_chart = models.BooleanField(default=False)
    plot_on_cdc_chart = models.BooleanField(default=False)
    premature_correction = models.BooleanField(default=False)
    weeks_premature = models.PositiveIntegerField(null=True, blank=True)


class Vaccination(ClinicalRecord):
    vaccine_name = models.CharField(max_length=128, db_index=True)
    vaccine_code = models.CharField(max_length=32, blank=True, null=True)
    dose_number = models.PositiveIntegerField(null=True, blank=True)
    total_doses = models.PositiveIntegerField(null=True, blank=True)
    date_given = models.DateTimeField(db_index=True)
    age_at_vaccination = models.CharField(max_length=32, blank=True, null=True)
    site = models.CharField(max_length=64, blank=True, null=True)
    route = models.CharField(max_length=32, blank=True, null=True)
    lot_number = models.CharField(max_length=64, blank=True, null=True)
    manufacturer = models.CharField(max_length=128, blank=True, null=True)
    expiration_date = models.DateTimeField(null=True, blank=True)
    side_effects = models.TextField(blank=True, null=True)
    contraindications = models.TextField(blank=True, null=True)
    catch_up_schedule = models.BooleanField(default=False)
    due_date = models.DateTimeField(null=True, blank=True)
    next_dose_due = models.DateTimeField(null=True, blank=True)
    administered_by = models.CharField(max_length=128, blank=True, null=True)
    consent_signed = models.BooleanField(default=False)


class DevelopmentalAssessment(ClinicalRecord):
    assessment_date = models.DateTimeField(db_index=True)
    age_months = models.PositiveIntegerField(null=True, blank=True)
    gross_motor = models.TextField(blank=True, null=True)
    fine_motor = models.TextField(blank=True, null=True)
    language = models.TextField(blank=True, null=True)
    social_emotional = models.TextField(blank=True, null=True)
    cognitive = models.TextField(blank=True, null=True)
    problem_solving = models.TextField(blank=True, null=True)
    personal_social = models.TextField(blank=True, null=True)
    concerns_identified = models.BooleanField(default=False, db_index=True)
    concerns_description = models.TextField(blank=True, null=True)
    milestones_achieved = models.TextField(blank=True, null=True)
    milestones_delayed = models.TextField(blank=True, null=True)
    asq_completed = models.BooleanField(default=False)
    asq_score = models.PositiveIntegerField(null=True, blank=True)
    mchat_completed = models.BooleanField(default=False)
    mchat_score = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(20)])
    autism_screen_positive = models.BooleanField(default=False)
    early_intervention_referral = models.BooleanField(default=False)
    speech_therapy_referral = models.BooleanField(default=False)
    occupational_therapy_referral = models.BooleanField(default=False)
    hearing_test_done = models.BooleanField(default=False)
    vision_test_done = models.BooleanField(default=False)
    follow_up_needed = models.BooleanField(default=False)
    follow_up_date = models.DateTimeField(null=True, blank=True)
