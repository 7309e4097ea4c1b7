from rest_framework import serializers

from clinic.models import (
    CardiologyDevice,
    CardiologyEcg,
    CardiologyEcho,
    CardiologyElectrophysiology,
    CardiologyHeartFailure,
    CardiologyLab,
    CardiologyMedication,
    CardiologyProcedure,
    CardiologyStressTest,
    CardiologyVisit,
)

from .base import ClinicalRecordSerializer, parent_field


class CardiologyVisitSerializer(ClinicalRecordSerializer):
    provider_required = True

    class Meta(ClinicalRecordSerializer.Meta):
        model = CardiologyVisit


class _VisitChildSerializer(ClinicalRecordSerializer):
    visit_id = parent_field(CardiologyVisit.objects.all(), 'visit')


class CardiologyEcgSerializer(_VisitChildSerializer):
    class Meta:
        model = CardiologyEcg
        exclude = ('visit',)


class CardiologyEchoSerializer(_VisitChildSerializer):
    class Meta:
        model = CardiologyEcho
        exclude = ('visit',)


class CardiologyStressTestSerializer(_VisitChildSerializer):
    class Meta:
        model = CardiologyStressTest
        exclude = ('visit',)


class CardiologyProcedureSerializer(_VisitChildSerializer):
    class Meta:
        model = CardiologyProcedure
        exclude = ('visit',)


class CardiologyElectrophysiologySerializer(_VisitChildSerializer):
    class Meta:
        model = CardiologyElectrophysiology
        exclude = ('visit',)
        extra_kwargs = {'fluoroscopy_time': {'min_value': 0}}


class CardiologyHeartFailureSerializer(_VisitChildSerializer):
    class Meta:
        model = CardiologyHeartFailure
        exclude = ('visit',)
        extra_kwargs = {
            'lvef': {'min_value': 0, 'max_value': 100},
            'bnp': {'min_value': 0},
            'nt_pro_bnp': {'min_value': 0},
        }


class CardiologyDeviceSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = CardiologyDevice


class CardiologyMedicationSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = CardiologyMedication

    def validate(self, attrs):
        attrs = super().validate(attrs)
        start, end = self.current(attrs, 'start_date'), self.current(attrs, 'end_date')
        if start and end and end < start:
            raise serializers.ValidationError({'endDate': 'End date must be after start date'})
        return attrs


class CardiologyLabSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = CardiologyLab
