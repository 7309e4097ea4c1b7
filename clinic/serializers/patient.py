from django.utils import timezone
from rest_framework import serializers

from clinic.models import MedicalHistory, Patient

from .base import CamelCaseModelSerializer, provider_summary

BLOOD_TYPE_LABELS = {label: key for key, label in Patient.BLOOD_TYPE_CHOICES}


class MedicalHistorySerializer(CamelCaseModelSerializer):
    doctor = serializers.SerializerMethodField()

    class Meta:
        model = MedicalHistory
        fields = ('id', 'diagnosis', 'treatment', 'notes', 'visit_date', 'doctor', 'created_at')

    def get_doctor(self, obj):
        return provider_summary(obj.doctor)


class PatientSerializer(CamelCaseModelSerializer):
    # accepts either the enum key or the printed label ("A+")
    blood_type = serializers.CharField(required=False)
    allergies = serializers.ListField(child=serializers.CharField(max_length=200), required=False)
    chronic_conditions = serializers.ListField(child=serializers.CharField(max_length=200), required=False)

    class Meta:
        model = Patient
        fields = '__all__'
        read_only_fields = ('mrn',)

    def validate_first_name(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('First name is required')
        return v

    def validate_last_name(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('Last name is required')
        return v

    def validate_date_of_birth(self, v):
        if v > timezone.localdate():
            raise serializers.ValidationError('Date of birth cannot be in the future')
        return v

    def validate_blood_type(self, v):
        v = BLOOD_TYPE_LABELS.get(v, v)
        if v not in dict(Patient.BLOOD_TYPE_CHOICES):
            raise serializers.ValidationError(f'"{v}" is not a valid blood type')
        return v


class PatientDetailSerializer(PatientSerializer):
    medical_histories = MedicalHistorySerializer(many=True, read_only=True)


class MedicalHistoryCreateSerializer(CamelCaseModelSerializer):
    class Meta:
        model = MedicalHistory
        fields = ('diagnosis', 'treatment', 'notes', 'visit_date')
