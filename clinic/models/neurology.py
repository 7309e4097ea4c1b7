"""
Neurology records: clinic visits, EEG/EMG studies, neuro-imaging, seizure
events, stroke episodes and cognitive assessments.
"""
from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .base import ClinicalRecord, TEST_STATUS_CHOICES, VISIT_STATUS_CHOICES


class NeurologyVisit(ClinicalRecord):
    status = models.CharField(max_length=20, choices=VISIT_STATUS_CHOICES, default='SCHEDULED', db_index=True)
    visit_date = models.DateTimeField(db_index=True)
    reason = models.TextField(blank=True, null=True)
    symptoms = models.TextField(blank=True, null=True)
    mental_status = models.TextField(blank=True, null=True)
    cranial_nerves = models.TextField(blank=True, null=True)
    motor_exam = models.TextField(blank=True, null=True)
    sensory_exam = models.TextField(blank=True, null=True)
    reflexes = models.TextField(blank=True, null=True)
    coordination = models.TextField(blank=True, null=True)
    gait = models.TextField(blank=True, null=True)
    speech = models.TextField(blank=True, null=True)
    nihss_score = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(42)])
    gcs_score = models.PositiveIntegerField(
        null=True, blank=True, validators=[MinValueValidator(3), MaxValueValidator(15)]
    )
    diagnosis = models.TextField(blank=True, null=True)
    assessment = models.TextField(blank=True, null=True)
    plan = models.TextField(blank=True, null=True)


class EegStudy(ClinicalRecord):
    visit = models.ForeignKey(NeurologyVisit, null=True, blank=True, on_delete=models.SET_NULL, related_name='eegs')
    status = models.CharField(max_length=20, choices=TEST_STATUS_CHOICES, default='ORDERED', db_index=True)
    recorded_at = models.DateTimeField(db_index=True)
    duration_minutes = models.PositiveIntegerField(null=True, blank=True)
    indication = models.TextField(blank=True, null=True)
    findings = models.TextField(blank=True, null=True)
    interpretation = models.TextField(blank=True, null=True)
    seizures_detected = models.BooleanField(default=False)
    seizure_count = models.PositiveIntegerField(null=True, blank=True)
    background_activity = models.CharField(max_length=128, blank=True, null=True)
    sleep_architecture = models.CharField(max_length=128, blank=True, null=True)


class EmgStudy(ClinicalRecord):
    visit = models.ForeignKey(NeurologyVisit, null=True, blank=True, on_delete=models.SET_NULL, related_name='emgs')
    status = models.CharField(max_length=20, choices=TEST_STATUS_CHOICES, default='ORDERED', db_index=True)
    performed_at = models.DateTimeField(db_index=True)
    indication = models.TextField(blank=True, null=True)
    muscles_tested = models.TextField(blank=True, null=True)
    findings = models.TextField(blank=True, null=True)
    interpretation = models.TextField(blank=True, null=True)
    neuropathy_present = models.BooleanField(default=False)
    myopathy_present = models.BooleanField(default=False)
    conduction_velocity = models.FloatField(null=True, blank=True, help_text="m/s")
    amplitude = models.FloatField(null=True, blank=True, help_text="mV")
    distal_latency = models.FloatField(null=True, blank=True, help_text="ms")


class NeuroImaging(ClinicalRecord):
    visit = models.ForeignKey(
        NeurologyVisit, null=True, blank=True, on_delete=models.SET_NULL, related_name='imaging_studies'
    )
    status = models.CharField(max_length=20, choices=TEST_STATUS_CHOICES, default='ORDERED', db_index=True)
    performed_at = models.DateTimeField(db_index=True)
    imaging_type = models.CharField(max_length=32)
    indication = models.TextField(blank=True, null=True)
    findings = models.TextField(blank=True, null=True)
    impression = models.TextField(blank=True, null=True)
    acute_findings = models.BooleanField(default=False)
    stroke_present = models.BooleanField(default=False)
    hemorrhage_present = models.BooleanField(default=False)
    mass_present = models.BooleanField(default=False)
    contrast_used = models.BooleanField(default=False)


class SeizureEvent(ClinicalRecord):
    SEIZURE_TYPE_CHOICES = [
        ('FOCAL', 'Focal'),
        ('GENERALIZED', 'Generalized'),
        ('ABSENCE', 'Absence'),
        ('TONIC_CLONIC', 'Tonic-clonic'),
        ('MYOCLONIC', 'Myoclonic'),
        ('ATONIC', 'Atonic'),
        ('UNKNOWN', 'Unknown'),
    ]
    event_time = models.DateTimeField(db_index=True)
    seizure_type = models.CharField(max_length=20, choices=SEIZURE_TYPE_CHOICES, db_index=True)
    duration_seconds = models.PositiveIntegerField(null=True, blank=True)
    witnessed = models.BooleanField(default=False)
    witnessed_by = models.CharField(max_length=128, blank=True, null=True)
    aura_present = models.BooleanField(default=False)
    aura_description = models.TextField(blank=True, null=True)
    loss_of_consciousness = models.BooleanField(default=False)
    incontinence = models.BooleanField(default=False)
    tongue_bite = models.BooleanField(default=False)
    post_ictal_confusion = models.BooleanField(default=False)
    post_ictal_duration = models.PositiveIntegerField(null=True, blank=True, help_text="minutes")
    triggers = models.TextField(blank=True, null=True)
    medication_change = models.TextField(blank=True, null=True)
    injury_sustained = models.TextField(blank=True, null=True)


class StrokeEpisode(ClinicalRecord):
    STROKE_TYPE_CHOICES = [
        ('ISCHEMIC', 'Ischemic'),
        ('HEMORRHAGIC', 'Hemorrhagic'),
        ('TIA', 'Transient ischemic attack'),
    ]
    SEVERITY_CHOICES = [
        ('MINOR', 'Minor'),
        ('MODERATE', 'Moderate'),
        ('SEVERE', 'Severe'),
    ]
    onset_time = models.DateTimeField(db_index=True)
    arrival_time = models.DateTimeField(null=True, blank=True)
    stroke_type = models.CharField(max_length=20, choices=STROKE_TYPE_CHOICES, db_index=True)
    severity = models.CharField(max_length=10, choices=SEVERITY_CHOICES, blank=True, null=True)
    nihss_score = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(42)])
    location = models.CharField(max_length=128, blank=True, null=True)
    ct_done = models.BooleanField(default=False)
    ct_findings = models.TextField(blank=True, null=True)
    mri_done = models.BooleanField(default=False)
    mri_findings = models.TextField(blank=True, null=True)
    thrombolysis_given = models.BooleanField(default=False)
    thrombolysis_time = models.DateTimeField(null=True, blank=True)
    thrombectomy_done = models.BooleanField(default=False)
    complications = models.TextField(blank=True, null=True)
    discharge_nihss = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(42)])
    mrs_at_discharge = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(6)])
    discharge_disposition = models.CharField(max_length=128, blank=True, null=True)


class CognitiveAssessment(ClinicalRecord):
    assessment_date = models.DateTimeField(db_index=True)
    mmse_score = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(30)])
    moca_score = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(30)])
    clock_drawing_test = models.CharField(max_length=64, blank=True, null=True)
    verbal_fluency_score = models.PositiveIntegerField(null=True, blank=True)
    trail_making_a = models.PositiveIntegerField(null=True, blank=True, help_text="seconds")
    trail_making_b = models.PositiveIntegerField(null=True, blank=True, help_text="seconds")
    delayed_recall = models.PositiveIntegerField(null=True, blank=True)
    executive_function = models.TextField(blank=True, null=True)
    overall_impression = models.TextField(blank=True, null=True)
    diagnosis = models.TextField(blank=True, null=True)
    recommendations = models.TextField(blank=True, null=True)
    follow_up_needed = models.BooleanField(default=False)
    follow_up_date = models.DateTimeField(null=True, blank=True)
