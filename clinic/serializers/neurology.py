from rest_framework import serializers

from clinic.models import (
    CognitiveAssessment,
    EegStudy,
    EmgStudy,
    NeuroImaging,
    NeurologyVisit,
    SeizureEvent,
    StrokeEpisode,
)

from .base import ClinicalRecordSerializer, parent_field


class NeurologyVisitSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = NeurologyVisit


class _VisitChildSerializer(ClinicalRecordSerializer):
    visit_id = parent_field(NeurologyVisit.objects.all(), 'visit')


class EegStudySerializer(_VisitChildSerializer):
    class Meta:
        model = EegStudy
        exclude = ('visit',)

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if self.current(attrs, 'seizure_count') and not self.current(attrs, 'seizures_detected'):
            attrs['seizures_detected'] = True
        return attrs


class EmgStudySerializer(_VisitChildSerializer):
    class Meta:
        model = EmgStudy
        exclude = ('visit',)


class NeuroImagingSerializer(_VisitChildSerializer):
    class Meta:
        model = NeuroImaging
        exclude = ('visit',)


class SeizureEventSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = SeizureEvent


class StrokeEpisodeSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = StrokeEpisode

    def validate(self, attrs):
        attrs = super().validate(attrs)
        onset = self.current(attrs, 'onset_time')
        for name, key in (('arrival_time', 'arrivalTime'), ('thrombolysis_time', 'thrombolysisTime')):
            value = self.current(attrs, name)
            if onset and value and value < onset:
                raise serializers.ValidationError({key: 'Cannot be before stroke onset'})
        return attrs


class CognitiveAssessmentSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = CognitiveAssessment
