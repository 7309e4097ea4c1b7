"""
Cardiology records: clinic visits, diagnostics, procedures, implanted
devices, electrophysiology work, heart failure assessments, cardiac
medication orders and cardiac lab panels.
"""
from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .base import ClinicalRecord, ROUTE_CHOICES, TEST_STATUS_CHOICES, VISIT_STATUS_CHOICES


class CardiologyVisit(ClinicalRecord):
    status = models.CharField(max_length=20, choices=VISIT_STATUS_CHOICES, default='SCHEDULED', db_index=True)
    visit_date = models.DateTimeField(db_index=True)
    reason = models.TextField(blank=True, null=True)
    symptoms = models.TextField(blank=True, null=True)
    diagnosis = models.TextField(blank=True, null=True)
    assessment = models.TextField(blank=True, null=True)
    plan = models.TextField(blank=True, null=True)


class CardiologyEcg(ClinicalRecord):
    visit = models.ForeignKey(CardiologyVisit, null=True, blank=True, on_delete=models.SET_NULL, related_name='ecgs')
    status = models.CharField(max_length=20, choices=TEST_STATUS_CHOICES, default='ORDERED', db_index=True)
    recorded_at = models.DateTimeField(db_index=True)
    type = models.CharField(max_length=64, blank=True, null=True)
    rhythm = models.CharField(max_length=128, blank=True, null=True)
    heart_rate = models.PositiveIntegerField(null=True, blank=True)
    pr_interval = models.PositiveIntegerField(null=True, blank=True, help_text="ms")
    qrs_duration = models.PositiveIntegerField(null=True, blank=True, help_text="ms")
    qt_interval = models.PositiveIntegerField(null=True, blank=True, help_text="ms")
    qtc = models.PositiveIntegerField(null=True, blank=True, help_text="ms")
    interpretation = models.TextField(blank=True, null=True)


class CardiologyEcho(ClinicalRecord):
    visit = models.ForeignKey(CardiologyVisit, null=True, blank=True, on_delete=models.SET_NULL, related_name='echos')
    status = models.CharField(max_length=20, choices=TEST_STATUS_CHOICES, default='ORDERED', db_index=True)
    performed_at = models.DateTimeField(db_index=True)
    type = models.CharField(max_length=64, blank=True, null=True)
    lvef = models.FloatField(
        null=True, blank=True, help_text="%", validators=[MinValueValidator(0), MaxValueValidator(100)]
    )
    lv_end_diastolic_dia = models.FloatField(null=True, blank=True, help_text="mm")
    lv_end_systolic_dia = models.FloatField(null=True, blank=True, help_text="mm")
    rv_function = models.CharField(max_length=128, blank=True, null=True)
    valve_findings = models.TextField(blank=True, null=True)
    wall_motion = models.TextField(blank=True, null=True)
    pericardial_effusion = models.BooleanField(default=False)
    summary = models.TextField(blank=True, null=True)


class CardiologyStressTest(ClinicalRecord):
    visit = models.ForeignKey(
        CardiologyVisit, null=True, blank=True, on_delete=models.SET_NULL, related_name='stress_tests'
    )
    status = models.CharField(max_length=20, choices=TEST_STATUS_CHOICES, default='ORDERED', db_index=True)
    performed_at = models.DateTimeField(db_index=True)
    type = models.CharField(max_length=64, blank=True, null=True)
    protocol = models.CharField(max_length=64, blank=True, null=True)
    duration_minutes = models.FloatField(null=True, blank=True)
    mets = models.FloatField(null=True, blank=True)
    max_heart_rate = models.PositiveIntegerField(null=True, blank=True)
    max_bp_systolic = models.PositiveIntegerField(null=True, blank=True)
    max_bp_diastolic = models.PositiveIntegerField(null=True, blank=True)
    symptoms = models.TextField(blank=True, null=True)
    result = models.TextField(blank=True, null=True)


class CardiologyProcedure(ClinicalRecord):
    visit = models.ForeignKey(
        CardiologyVisit, null=True, blank=True, on_delete=models.SET_NULL, related_name='procedures'
    )
    status = models.CharField(max_length=20, choices=VISIT_STATUS_CHOICES, default='SCHEDULED', db_index=True)
    procedure_date = models.DateTimeField(db_index=True)
    type = models.CharField(max_length=64, blank=True, null=True)
    indication = models.TextField(blank=True, null=True)
    findings = models.TextField(blank=True, null=True)
    complications = models.TextField(blank=True, null=True)
    outcome = models.TextField(blank=True, null=True)


class CardiologyDevice(ClinicalRecord):
    STATUS_CHOICES = [
        ('ACTIVE', 'Active'),
        ('INACTIVE', 'Inactive'),
        ('REMOVED', 'Removed'),
    ]
    device_type = models.CharField(max_length=64)
    manufacturer = models.CharField(max_length=128, blank=True, null=True)
    device_model = models.CharField(max_length=128, blank=True, null=True)
    serial_number = models.CharField(max_length=128, blank=True, null=True)
    implant_date = models.DateTimeField(null=True, blank=True, db_index=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='ACTIVE', db_index=True)
    last_interrogation_date = models.DateTimeField(null=True, blank=True)
    next_follow_up_date = models.DateTimeField(null=True, blank=True)
    battery_status = models.CharField(max_length=64, blank=True, null=True)
    programmed_settings = models.TextField(blank=True, null=True)


class CardiologyMedication(ClinicalRecord):
    medication_name = models.CharField(max_length=200)
    dose = models.CharField(max_length=64, blank=True, null=True)
    route = models.CharField(max_length=10, choices=ROUTE_CHOICES, default='ORAL')
    frequency = models.CharField(max_length=64, blank=True, null=True)
    start_date = models.DateTimeField(null=True, blank=True, db_index=True)
    end_date = models.DateTimeField(null=True, blank=True)
    last_administered_at = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)
    indication = models.TextField(blank=True, null=True)


class CardiologyLab(ClinicalRecord):
    collected_at = models.DateTimeField(db_index=True)
    troponin = models.FloatField(null=True, blank=True)
    bnp = models.FloatField(null=True, blank=True)
    nt_pro_bnp = models.FloatField(null=True, blank=True)
    ckmb = models.FloatField(null=True, blank=True)
    total_cholesterol = models.FloatField(null=True, blank=True)
    ldl = models.FloatField(null=True, blank=True)
    hdl = models.FloatField(null=True, blank=True)
    triglycerides = models.FloatField(null=True, blank=True)
    crp = models.FloatField(null=True, blank=True)
    inr = models.FloatField(null=True, blank=True)


class CardiologyElectrophysiology(ClinicalRecord):
    PROCEDURE_CHOICES = [
        ('PACEMAKER_IMPLANT', 'Pacemaker implant'),
        ('ICD_IMPLANT', 'ICD implant'),
        ('CRT_IMPLANT', 'CRT implant'),
        ('ABLATION', 'Ablation'),
        ('ELECTROPHYSIOLOGY_STUDY', 'Electrophysiology study'),
        ('LOOP_RECORDER_IMPLANT', 'Loop recorder implant'),
        ('LEAD_EXTRACTION', 'Lead extraction'),
        ('OTHER', 'Other'),
    ]
    visit = models.ForeignKey(
        CardiologyVisit, null=True, blank=True, on_delete=models.SET_NULL, related_name='electrophysiology_studies'
    )
    status = models.CharField(max_length=20, choices=TEST_STATUS_CHOICES, default='ORDERED', db_index=True)
    performed_at = models.DateTimeField(db_index=True)
    procedure_type = models.CharField(max_length=32, choices=PROCEDURE_CHOICES, db_index=True)
    indication = models.TextField(blank=True, null=True)
    arrhythmia_type = models.CharField(max_length=128, blank=True, null=True)
    device_type = models.CharField(max_length=64, blank=True, null=True)
    manufacturer = models.CharField(max_length=128, blank=True, null=True)
    device_model = models.CharField(max_length=128, blank=True, null=True)
    serial_number = models.CharField(max_length=128, blank=True, null=True)
    implant_date = models.DateTimeField(null=True, blank=True)
    ablation_target = models.CharField(max_length=128, blank=True, null=True)
    fluoroscopy_time = models.FloatField(
        null=True, blank=True, help_text="minutes", validators=[MinValueValidator(0)]
    )
    complications = models.TextField(blank=True, null=True)
    outcome = models.TextField(blank=True, null=True)
    follow_up_date = models.DateTimeField(null=True, blank=True)


class CardiologyHeartFailure(ClinicalRecord):
    NYHA_CHOICES = [
        ('CLASS_I', 'NYHA I'),
        ('CLASS_II', 'NYHA II'),
        ('CLASS_III', 'NYHA III'),
        ('CLASS_IV', 'NYHA IV'),
    ]
    STAGE_CHOICES = [
        ('STAGE_A', 'Stage A'),
        ('STAGE_B', 'Stage B'),
        ('STAGE_C', 'Stage C'),
        ('STAGE_D', 'Stage D'),
    ]
    visit = models.ForeignKey(
        CardiologyVisit, null=True, blank=True, on_delete=models.SET_NULL, related_name='heart_failure_assessments'
    )
    status = models.CharField(max_length=20, choices=TEST_STATUS_CHOICES, default='ORDERED', db_index=True)
    assessment_date = models.DateTimeField(db_index=True)
    etiology = models.CharField(max_length=200, blank=True, null=True)
    nyha_class = models.CharField(max_length=10, choices=NYHA_CHOICES, blank=True, null=True, db_index=True)
    heart_failure_stage = models.CharField(
        max_length=10, choices=STAGE_CHOICES, blank=True, null=True, db_index=True
    )
    lvef = models.FloatField(
        null=True, blank=True, help_text="%", validators=[MinValueValidator(0), MaxValueValidator(100)]
    )
    symptoms = models.TextField(blank=True, null=True)
    medications = models.TextField(blank=True, null=True)
    mechanical_support = models.CharField(max_length=200, blank=True, null=True)
    transplant_status = models.CharField(max_length=64, blank=True, null=True)
    implantable_devices = models.TextField(blank=True, null=True)
    rehospitalizations = models.PositiveIntegerField(null=True, blank=True)
    last_hospitalization = models.DateTimeField(null=True, blank=True)
    bnp = models.FloatField(null=True, blank=True, validators=[MinValueValidator(0)])
    nt_pro_bnp = models.FloatField(null=True, blank=True, validators=[MinValueValidator(0)])
    assessment = models.TextField(blank=True, null=True)
    plan = models.TextField(blank=True, null=True)
    next_follow_up_date = models.DateTimeField(null=True, blank=True)
