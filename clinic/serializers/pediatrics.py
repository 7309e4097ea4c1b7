from rest_framework import serializers

from clinic.models import DevelopmentalAssessment, GrowthMeasurement, Vaccination

from .base import ClinicalRecordSerializer


class GrowthMeasurementSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = GrowthMeasurement
        extra_kwargs = {
            'weight_kg': {'min_value': 0},
            'height_cm': {'min_value': 0},
            'head_circumference_cm': {'min_value': 0},
        }


class VaccinationSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = Vaccination
        extra_kwargs = {
            'dose_number': {'min_value': 1},
            'total_doses': {'min_value': 1},
        }

    def validate(self, attrs):
        attrs = super().validate(attrs)
        dose, total = self.current(attrs, 'dose_number'), self.current(attrs, 'total_doses')
        if dose and total and dose > total:
            raise serializers.ValidationError({'doseNumber': 'Dose number cannot exceed total doses'})
        return attrs


class DevelopmentalAssessmentSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = DevelopmentalAssessment
