from rest_framework import serializers

from clinic.models import Fracture, JointReplacement, PhysicalTherapyPlan

from .base import ClinicalRecordSerializer


class FractureSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = Fracture

    def validate(self, attrs):
        attrs = super().validate(attrs)
        injury = self.current(attrs, 'injury_date')
        surgery = self.current(attrs, 'surgery_date')
        if injury and surgery and surgery < injury:
            raise serializers.ValidationError({'surgeryDate': 'Surgery cannot precede the injury'})
        return attrs


class JointReplacementSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = JointReplacement


class PhysicalTherapyPlanSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = PhysicalTherapyPlan

    def validate(self, attrs):
        attrs = super().validate(attrs)
        planned = self.current(attrs, 'sessions_planned') or 0
        completed = self.current(attrs, 'sessions_completed') or 0
        if planned and completed > planned:
            raise serializers.ValidationError({'sessionsCompleted': 'Completed sessions cannot exceed planned sessions'})
        return attrs
