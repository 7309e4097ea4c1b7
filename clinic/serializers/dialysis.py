from rest_framework import serializers

from clinic.models import (
    DialysisFlowsheet,
    DialysisLab,
    DialysisMedication,
    DialysisPrescription,
    DialysisSchedule,
    DialysisSession,
    DialysisStation,
)

from .base import (
    CamelCaseModelSerializer,
    ClinicalRecordSerializer,
    parent_field,
    patient_summary,
    provider_summary,
)

WEEKDAYS = ['MON', 'TUE', 'WED', 'THU', 'FRI', 'SAT', 'SUN']


class DialysisSessionSerializer(ClinicalRecordSerializer):
    provider_required = True

    class Meta(ClinicalRecordSerializer.Meta):
        model = DialysisSession

    def validate(self, attrs):
        attrs = super().validate(attrs)
        start, end = self.current(attrs, 'start_time'), self.current(attrs, 'end_time')
        if start and end and end <= start:
            raise serializers.ValidationError({'endTime': 'End time must be after start time'})
        return attrs


class DialysisPrescriptionSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = DialysisPrescription
        extra_kwargs = {'dry_weight': {'min_value': 0}}


class DialysisFlowsheetSerializer(CamelCaseModelSerializer):
    session_id = parent_field(DialysisSession.objects.all(), 'session', required=True)
    patient = serializers.SerializerMethodField()
    provider = serializers.SerializerMethodField()

    class Meta:
        model = DialysisFlowsheet
        exclude = ('session',)

    def get_patient(self, obj):
        return patient_summary(obj.session.patient)

    def get_provider(self, obj):
        return provider_summary(obj.session.provider)

    def validate_session_id(self, session):
        if not session.patient.is_active:
            raise serializers.ValidationError('Patient is inactive')
        return session


class DialysisStationSerializer(CamelCaseModelSerializer):
    class Meta:
        model = DialysisStation
        fields = '__all__'


class DialysisScheduleSerializer(ClinicalRecordSerializer):
    station_id = parent_field(DialysisStation.objects.all(), 'station')
    days_of_week = serializers.ListField(child=serializers.ChoiceField(choices=WEEKDAYS), required=False)
    station = serializers.SerializerMethodField()

    class Meta(ClinicalRecordSerializer.Meta):
        model = DialysisSchedule
        extra_kwargs = {'duration_minutes': {'min_value': 1}}

    def get_station(self, obj):
        if obj.station is None:
            return None
        return {'id': str(obj.station.pk), 'name': obj.station.name, 'room': obj.station.room}

    def validate_station_id(self, station):
        if station is not None and not station.is_active:
            raise serializers.ValidationError('Station is not active')
        return station

    def validate(self, attrs):
        attrs = super().validate(attrs)
        recurrence = self.current(attrs, 'recurrence') or 'NONE'
        if recurrence == 'WEEKLY' and not self.current(attrs, 'days_of_week'):
            raise serializers.ValidationError({'daysOfWeek': 'Weekly schedules need at least one day'})
        return attrs


class DialysisLabSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = DialysisLab
        extra_kwargs = {'ktv': {'min_value': 0}, 'urr': {'min_value': 0}}


class DialysisMedicationSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = DialysisMedication
