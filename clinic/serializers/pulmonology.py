from rest_framework import serializers

from clinic.models import Bronchoscopy, SleepStudy, Spirometry

from .base import ClinicalRecordSerializer


class SpirometrySerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = Spirometry
        extra_kwargs = {
            'fev1': {'min_value': 0},
            'fvc': {'min_value': 0},
            'fev1_fvc_ratio': {'min_value': 0, 'max_value': 1},
        }

    def validate(self, attrs):
        attrs = super().validate(attrs)
        fev1, fvc = self.current(attrs, 'fev1'), self.current(attrs, 'fvc')
        if fev1 is not None and fvc is not None and fev1 > fvc:
            raise serializers.ValidationError({'fev1': 'FEV1 cannot exceed FVC'})
        return attrs


class BronchoscopySerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = Bronchoscopy


class SleepStudySerializer(ClinicalRecordSerializer):
    # derived from the AHI when omitted
    apnea_severity = serializers.ChoiceField(choices=SleepStudy.SEVERITY_CHOICES, required=False)

    class Meta(ClinicalRecordSerializer.Meta):
        model = SleepStudy
        extra_kwargs = {'ahi': {'min_value': 0}}
