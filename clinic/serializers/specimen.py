from rest_framework import serializers

from clinic.models import Patient, Specimen

from .base import CamelCaseModelSerializer, patient_summary


def _staff(user):
    if user is None:
        return None
    return {'id': user.pk, 'firstName': user.first_name, 'lastName': user.last_name}


class SpecimenSerializer(CamelCaseModelSerializer):
    patient_id = serializers.UUIDField(read_only=True, format='hex_verbose')
    patient = serializers.SerializerMethodField()
    collected_by = serializers.SerializerMethodField()
    received_by = serializers.SerializerMethodField()

    class Meta:
        model = Specimen
        fields = '__all__'

    def get_patient(self, obj):
        return patient_summary(obj.patient)

    def get_collected_by(self, obj):
        return _staff(obj.collected_by)

    def get_received_by(self, obj):
        return _staff(obj.received_by)


class SpecimenCreateSerializer(CamelCaseModelSerializer):
    patient_id = serializers.PrimaryKeyRelatedField(
        source='patient', queryset=Patient.objects.all(), pk_field=serializers.UUIDField(format='hex_verbose')
    )

    class Meta:
        model = Specimen
        fields = ('patient_id', 'specimen_type', 'collection_site', 'volume_collected', 'collection_notes')
        extra_kwargs = {'volume_collected': {'min_value': 0}}

    def validate_patient_id(self, patient):
        if not patient.is_active:
            raise serializers.ValidationError('Patient is inactive')
        return patient


class SpecimenUpdateSerializer(CamelCaseModelSerializer):
    class Meta:
        model = Specimen
        fields = ('received_time', 'reception_notes', 'storage_location', 'status', 'rejection_reason')


class SpecimenReceiveSerializer(serializers.Serializer):
    receptionNotes = serializers.CharField(required=False, allow_blank=True, source='reception_notes')
    storageLocation = serializers.CharField(required=False, allow_blank=True, max_length=128,
                                            source='storage_location')


class SpecimenRejectSerializer(serializers.Serializer):
    reason = serializers.CharField(trim_whitespace=True, error_messages={
        'required': 'Rejection reason is required',
        'blank': 'Rejection reason is required',
    })
