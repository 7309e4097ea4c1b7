"""
Serializer building blocks shared by every clinical module.

The API speaks camelCase while the models use snake_case, so the base
serializer converts keys in both directions.  Free text is cleaned with
bleach before it reaches the database.
"""
from __future__ import annotations

import html
import re

import bleach
from django.conf import settings
from django.db import models
from django.utils.dateparse import parse_date, parse_datetime
from rest_framework import serializers

from clinic.models import Patient, User

_CAMEL_RE = re.compile(r'(?<!^)(?=[A-Z])')


def camel_to_snake(name: str) -> str:
    return _CAMEL_RE.sub('_', name).lower()


def snake_to_camel(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


def strip_tags(text: str) -> str:
    """Drop markup but keep literal "<", ">" and "&" in clinical text."""
    while True:
        # bleach escapes what it keeps, so unescape until nothing changes
        cleaned = html.unescape(bleach.clean(text, tags=[], attributes={}, strip=True))
        if cleaned == text:
            return cleaned
        text = cleaned


def clean_text(value):
    if isinstance(value, str):
        return strip_tags(value).strip()
    if isinstance(value, list):
        return [clean_text(v) for v in value]
    return value


def patient_summary(patient: Patient | None) -> dict | None:
    if patient is None:
        return None
    return {
        'id': str(patient.pk),
        'mrn': patient.mrn,
        'firstName': patient.first_name,
        'lastName': patient.last_name,
    }


def provider_summary(user: User | None) -> dict | None:
    if user is None:
        return None
    return {
        'id': user.pk,
        'firstName': user.first_name,
        'lastName': user.last_name,
        'role': user.role,
    }


class CamelCaseModelSerializer(serializers.ModelSerializer):
    """ModelSerializer that reads and writes camelCase keys."""

    def to_internal_value(self, data):
        if hasattr(data, 'items'):
            data = {camel_to_snake(k): v for k, v in data.items()}
        try:
            validated = super().to_internal_value(data)
        except serializers.ValidationError as exc:
            if isinstance(exc.detail, dict):
                raise serializers.ValidationError(
                    {snake_to_camel(k): v for k, v in exc.detail.items()}
                ) from exc
            raise
        return {k: clean_text(v) for k, v in validated.items()}

    def to_representation(self, instance):
        data = super().to_representation(instance)
        return {snake_to_camel(k): v for k, v in data.items()}

    def current(self, attrs, name, default=None):
        """Value of ``name`` after this write: the new one if sent, else the stored one."""
        if name in attrs:
            return attrs[name]
        if self.instance is not None:
            return getattr(self.instance, name, default)
        return default


class ClinicalRecordSerializer(CamelCaseModelSerializer):
    """Base for records that belong to a patient and name a provider."""
    provider_required = False

    patient_id = serializers.PrimaryKeyRelatedField(
        source='patient', queryset=Patient.objects.all(), pk_field=serializers.UUIDField(format='hex_verbose')
    )
    provider_id = serializers.PrimaryKeyRelatedField(
        source='provider', queryset=User.objects.all(), required=False, allow_null=True
    )
    patient = serializers.SerializerMethodField()
    provider = serializers.SerializerMethodField()

    class Meta:
        fields = '__all__'

    def get_patient(self, obj):
        return patient_summary(obj.patient)

    def get_provider(self, obj):
        return provider_summary(obj.provider)

    def validate_patient_id(self, patient):
        if not patient.is_active:
            raise serializers.ValidationError('Patient is inactive')
        return patient

    def validate_provider_id(self, provider):
        if provider is not None and not provider.is_clinician:
            raise serializers.ValidationError('Provider must be an active clinician')
        return provider

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if self.provider_required and not self.current(attrs, 'provider'):
            raise serializers.ValidationError({'providerId': 'Provider is required'})
        return attrs


def parent_field(queryset, source, required=False):
    """Writable ``<parent>Id`` reference that must point at an existing row."""
    return serializers.PrimaryKeyRelatedField(
        source=source,
        queryset=queryset,
        required=required,
        allow_null=not required,
        pk_field=serializers.UUIDField(format='hex_verbose'),
    )


# ---------------------------------------------------------------------------
# List query parameters
# ---------------------------------------------------------------------------
class DateOrDateTimeField(serializers.Field):
    """Accepts ``YYYY-MM-DD`` or an ISO datetime; date-only values stay dates."""

    default_error_messages = {'invalid': 'Enter a valid ISO date or datetime.'}

    def to_internal_value(self, data):
        text = str(data).strip()
        try:
            value = parse_date(text) if len(text) == 10 else parse_datetime(text)
        except ValueError:
            value = None
        if value is None:
            self.fail('invalid')
        return value

    def to_representation(self, value):
        return value.isoformat()


class ListQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(required=False, min_value=1, default=1)
    limit = serializers.IntegerField(required=False, min_value=1)
    search = serializers.CharField(required=False, allow_blank=True, trim_whitespace=True)
    sortBy = serializers.CharField(required=False, allow_blank=True)
    sortOrder = serializers.ChoiceField(choices=['asc', 'desc'], required=False)

    def validate_limit(self, value):
        return min(value, settings.PAGE_SIZE_MAX)

    def validate(self, attrs):
        attrs.setdefault('limit', settings.PAGE_SIZE_DEFAULT)
        return attrs


def _resolve_field(model, path: str):
    field = None
    for part in path.split('__'):
        field = model._meta.get_field(part)
        if field.is_relation:
            model = field.related_model
    return field


def _filter_field(model_field):
    if model_field.is_relation:
        model_field = model_field.target_field
    if isinstance(model_field, models.UUIDField):
        return serializers.UUIDField(required=False)
    if isinstance(model_field, models.BooleanField):
        return serializers.BooleanField(required=False)
    if isinstance(model_field, (models.AutoField, models.BigAutoField, models.IntegerField)):
        return serializers.IntegerField(required=False)
    if model_field.choices:
        return serializers.ChoiceField(choices=model_field.choices, required=False)
    return serializers.CharField(required=False)


def list_query_serializer(service):
    """Build the query serializer for a record service's list endpoint."""
    attrs = {}
    for param, path in service.filters.items():
        attrs[param] = _filter_field(_resolve_field(service.model, path))
    start_param, end_param = service.date_params
    attrs[start_param] = DateOrDateTimeField(required=False)
    attrs[end_param] = DateOrDateTimeField(required=False)
    name = f'{service.model.__name__}ListQuerySerializer'
    return type(name, (ListQuerySerializer,), attrs)


class DateRangeQuerySerializer(serializers.Serializer):
    startDate = DateOrDateTimeField(required=False)
    endDate = DateOrDateTimeField(required=False)
