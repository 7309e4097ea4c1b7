"""
Orthopedics records: fractures, joint replacements and physical therapy
plans.
"""
from __future__ import annotations

from django.core.validators import MaxValueValidator
from django.db import models

from .base import ClinicalRecord


class Fracture(ClinicalRecord):
    TYPE_CHOICES = [
        ('CLOSED', 'Closed'),
        ('OPEN', 'Open'),
        ('STRESS', 'Stress'),
        ('PATHOLOGICAL', 'Pathological'),
        ('GREENSTICK', 'Greenstick'),
        ('COMMINUTED', 'Comminuted'),
    ]
    STATUS_CHOICES = [
        ('ACUTE', 'Acute'),
        ('HEALING', 'Healing'),
        ('HEALED', 'Healed'),
        ('NONUNION', 'Non-union'),
        ('MALUNION', 'Malunion'),
    ]

    injury_date = models.DateTimeField(db_index=True)
    fracture_type = models.CharField(max_length=20, choices=TYPE_CHOICES, db_index=True)
    bone = models.CharField(max_length=64)
    location = models.CharField(max_length=128, blank=True, null=True)
    classification = models.CharField(max_length=64, blank=True, null=True)
    displacement = models.CharField(max_length=64, blank=True, null=True)
    angulation = models.CharField(max_length=64, blank=True, null=True)
    comminution = models.CharField(max_length=64, blank=True, null=True)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='ACUTE', db_index=True)
    reduction_performed = models.BooleanField(default=False)
    reduction_date = models.DateTimeField(null=True, blank=True)
    fixation_type = models.CharField(max_length=64, blank=True, null=True)
    implant_used = models.CharField(max_length=128, blank=True, null=True)
    surgery_date = models.DateTimeField(null=True, blank=True)
    complications = models.TextField(blank=True, null=True)
    healing_progress = models.TextField(blank=True, null=True)
    follow_up_xray_date = models.DateTimeField(null=True, blank=True)
    weight_bearing_status = models.CharField(max_length=64, blank=True, null=True)
    physical_therapy_started = models.BooleanField(default=False)


class JointReplacement(ClinicalRecord):
    JOINT_CHOICES = [
        ('HIP', 'Hip'),
        ('KNEE', 'Knee'),
        ('SHOULDER', 'Shoulder'),
        ('ELBOW', 'Elbow'),
        ('ANKLE', 'Ankle'),
    ]
    SIDE_CHOICES = [
        ('LEFT', 'Left'),
        ('RIGHT', 'Right'),
        ('BILATERAL', 'Bilateral'),
    ]

    surgery_date = models.DateTimeField(db_index=True)
    joint_type = models.CharField(max_length=10, choices=JOINT_CHOICES, db_index=True)
    side = models.CharField(max_length=10, choices=SIDE_CHOICES, blank=True, null=True)
    approach = models.CharField(max_length=64, blank=True, null=True)
    implant_manufacturer = models.CharField(max_length=128, blank=True, null=True)
    implant_model = models.CharField(max_length=128, blank=True, null=True)
    implant_size = models.CharField(max_length=32, blank=True, null=True)
    bearing_surface = models.CharField(max_length=64, blank=True, null=True)
    fixation = models.CharField(max_length=64, blank=True, null=True)
    anesthesia_type = models.CharField(max_length=64, blank=True, null=True)
    tourniquet_time = models.PositiveIntegerField(null=True, blank=True, help_text="minutes")
    estimated_blood_loss = models.PositiveIntegerField(null=True, blank=True, help_text="ml")
    complications = models.TextField(blank=True, null=True)
    pre_op_harris_hip_score = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(100)])
    post_op_harris_hip_score = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(100)])
    pre_op_kss_score = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(200)])
    post_op_kss_score = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(200)])
    range_of_motion = models.CharField(max_length=128, blank=True, null=True)
    infection = models.BooleanField(default=False)
    dislocation = models.BooleanField(default=False)
    revision_needed = models.BooleanField(default=False)
    revision_date = models.DateTimeField(null=True, blank=True)


class PhysicalTherapyPlan(ClinicalRecord):
    referral_date = models.DateTimeField(db_index=True)
    diagnosis = models.TextField(blank=True, null=True)
    treatment_goals = models.TextField(blank=True, null=True)
    sessions_planned = models.PositiveIntegerField(default=0)
    sessions_completed = models.PositiveIntegerField(default=0)
    current_status = models.CharField(max_length=32, blank=True, null=True, db_index=True)
    modalities = models.TextField(blank=True, null=True)
    therapeutic_exercises = models.TextField(blank=True, null=True)
    gait_training = models.TextField(blank=True, null=True)
    balance_training = models.TextField(blank=True, null=True)
    strengthening = models.TextField(blank=True, null=True)
    range_of_motion = models.TextField(blank=True, null=True)
    functional_activities = models.TextField(blank=True, null=True)
    pain_level = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(10)])
    progress_notes = models.TextField(blank=True, null=True)
    next_session_date = models.DateTimeField(null=True, blank=True)
    discharge_date = models.DateTimeField(null=True, blank=True)
    discharge_status = models.CharField(max_length=64, blank=True, null=True)
