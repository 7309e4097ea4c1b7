"""
Obstetrics records: pregnancies, antenatal visits and deliveries.
"""
from __future__ import annotations

import uuid

from django.core.validators import MaxValueValidator
from django.db import models

from .base import ClinicalRecord, TimeStampedModel

DELIVERY_MODE_CHOICES = [
    ('SVD', 'Spontaneous vaginal delivery'),
    ('ASSISTED', 'Assisted vaginal delivery'),
    ('CESAREAN', 'Cesarean section'),
    ('VBAC', 'Vaginal birth after cesarean'),
]

APGAR = [MaxValueValidator(10)]


class Pregnancy(ClinicalRecord):
    STATUS_CHOICES = [
        ('ACTIVE', 'Active'),
        ('DELIVERED', 'Delivered'),
        ('MISCARRIAGE', 'Miscarriage'),
        ('TERMINATED', 'Terminated'),
        ('ECTOPIC', 'Ectopic'),
    ]
    lmp_date = models.DateTimeField()
    edd_date = models.DateTimeField()
    gestational_age_weeks = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(45)])
    gravida = models.PositiveIntegerField(null=True, blank=True)
    para = models.PositiveIntegerField(null=True, blank=True)
    abortions = models.PositiveIntegerField(null=True, blank=True)
    living_children = models.PositiveIntegerField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='ACTIVE', db_index=True)
    conception_method = models.CharField(max_length=64, blank=True, null=True)
    multiple_gestation = models.BooleanField(default=False)
    number_of_fetuses = models.PositiveIntegerField(null=True, blank=True)
    risk_factors = models.TextField(blank=True, null=True)
    previous_cesarean = models.PositiveIntegerField(null=True, blank=True)
    rh_status = models.CharField(max_length=16, blank=True, null=True)
    hiv_status = models.CharField(max_length=16, blank=True, null=True)
    gbs_status = models.CharField(max_length=16, blank=True, null=True)
    pre_existing_conditions = models.TextField(blank=True, null=True)
    delivery_date = models.DateTimeField(null=True, blank=True)
    delivery_mode = models.CharField(max_length=10, choices=DELIVERY_MODE_CHOICES, blank=True, null=True)
    complications = models.TextField(blank=True, null=True)

    class Meta:
        verbose_name_plural = 'pregnancies'


class AntenatalVisit(TimeStampedModel):
    """A routine check during pregnancy; the patient comes from the pregnancy."""
    TRIMESTER_CHOICES = [
        ('FIRST', 'First'),
        ('SECOND', 'Second'),
        ('THIRD', 'Third'),
    ]
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    pregnancy = models.ForeignKey(Pregnancy, on_delete=models.CASCADE, related_name='antenatal_visits')
    visit_date = models.DateTimeField(db_index=True)
    gestational_age_weeks = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(45)])
    trimester = models.CharField(max_length=10, choices=TRIMESTER_CHOICES, blank=True, null=True)
    weight = models.FloatField(null=True, blank=True, help_text="kg")
    blood_pressure = models.CharField(max_length=16, blank=True, null=True)
    fundal_height = models.FloatField(null=True, blank=True, help_text="cm")
    fetal_heart_rate = models.PositiveIntegerField(null=True, blank=True)
    fetal_movement = models.CharField(max_length=64, blank=True, null=True)
    presentation = models.CharField(max_length=64, blank=True, null=True)
    edema = models.CharField(max_length=64, blank=True, null=True)
    proteinuria = models.CharField(max_length=32, blank=True, null=True)
    hemoglobin = models.FloatField(null=True, blank=True)
    ultrasound_findings = models.TextField(blank=True, null=True)
    complaints = models.TextField(blank=True, null=True)
    next_visit_date = models.DateTimeField(null=True, blank=True)
    risk_assessment = models.TextField(blank=True, null=True)
    referral_needed = models.BooleanField(default=False)
    notes = models.TextField(blank=True, default='')

    def __str__(self) -> str:
        return f"AntenatalVisit({self.pk}) pregnancy={self.pregnancy_id}"


class Delivery(ClinicalRecord):
    delivery_date = models.DateTimeField(db_index=True)
    admission_time = models.DateTimeField(null=True, blank=True)
    delivery_time = models.DateTimeField(null=True, blank=True)
    delivery_mode = models.CharField(max_length=10, choices=DELIVERY_MODE_CHOICES, default='SVD', db_index=True)
    gestational_age_weeks = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(45)])
    labor_onset = models.CharField(max_length=64, blank=True, null=True)
    induction_performed = models.BooleanField(default=False)
    induction_method = models.CharField(max_length=128, blank=True, null=True)
    anesthesia = models.CharField(max_length=64, blank=True, null=True)
    episiotomy = models.BooleanField(default=False)
    laceration = models.CharField(max_length=64, blank=True, null=True)
    estimated_blood_loss = models.PositiveIntegerField(null=True, blank=True, help_text="ml")
    baby_weight_grams = models.PositiveIntegerField(null=True, blank=True)
    baby_length_cm = models.FloatField(null=True, blank=True)
    baby_gender = models.CharField(max_length=16, blank=True, null=True)
    baby_apgar1 = models.PositiveIntegerField(null=True, blank=True, validators=APGAR)
    baby_apgar5 = models.PositiveIntegerField(null=True, blank=True, validators=APGAR)
    baby_apgar10 = models.PositiveIntegerField(null=True, blank=True, validators=APGAR)
    resuscitation_needed = models.BooleanField(default=False)
    nicu_admission = models.BooleanField(default=False)
    nicu_reason = models.TextField(blank=True, null=True)
    maternal_complications = models.TextField(blank=True, null=True)
    discharge_date = models.DateTimeField(null=True, blank=True)
    breastfeeding_established = models.BooleanField(default=False)

    class Meta:
        verbose_name_plural = 'deliveries'
