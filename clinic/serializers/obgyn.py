from rest_framework import serializers

from clinic.models import AntenatalVisit, Delivery, Pregnancy

from .base import CamelCaseModelSerializer, ClinicalRecordSerializer, parent_field, patient_summary


class PregnancySerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = Pregnancy

    def validate(self, attrs):
        attrs = super().validate(attrs)
        lmp, edd = self.current(attrs, 'lmp_date'), self.current(attrs, 'edd_date')
        if lmp and edd and edd <= lmp:
            raise serializers.ValidationError({'eddDate': 'Expected delivery date must be after LMP date'})
        return attrs


class AntenatalVisitSerializer(CamelCaseModelSerializer):
    pregnancy_id = parent_field(Pregnancy.objects.all(), 'pregnancy', required=True)
    patient = serializers.SerializerMethodField()

    class Meta:
        model = AntenatalVisit
        exclude = ('pregnancy',)

    def get_patient(self, obj):
        return patient_summary(obj.pregnancy.patient)

    def validate_pregnancy_id(self, pregnancy):
        if not pregnancy.patient.is_active:
            raise serializers.ValidationError('Patient is inactive')
        return pregnancy


class DeliverySerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = Delivery
