"""
Generic list/get/create/update/delete for clinical record models.

Each specialty resource is a :class:`RecordService` subclass that only
declares its model, primary date field, search fields and filters.  The
views stay thin and every write is logged and audited here.
"""
from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Any

from django.core.exceptions import FieldDoesNotExist
from django.db import models, transaction
from django.db.models import Q
from django.utils import timezone

from clinic.exceptions import RecordNotFound
from clinic.serializers.base import camel_to_snake
from clinic.services.audit import log_action

logger = logging.getLogger(__name__)


@dataclass
class Page:
    items: list
    total: int
    page: int
    limit: int


def _start_of(value) -> dt.datetime:
    if isinstance(value, dt.datetime):
        return value if timezone.is_aware(value) else timezone.make_aware(value)
    return timezone.make_aware(dt.datetime.combine(value, dt.time.min))


def date_range_q(field: str, start=None, end=None) -> Q:
    """Inclusive range on ``field``; a bare end date includes the whole day."""
    q = Q()
    if start:
        q &= Q(**{f'{field}__gte': _start_of(start)})
    if end:
        if isinstance(end, dt.datetime):
            q &= Q(**{f'{field}__lte': _start_of(end)})
        else:
            q &= Q(**{f'{field}__lt': _start_of(end + dt.timedelta(days=1))})
    return q


class RecordService:
    model: type[models.Model]
    label = 'Record'
    date_field = 'created_at'
    date_params = ('startDate', 'endDate')
    default_sort: str | None = None
    default_order = 'desc'
    search_fields: tuple[str, ...] = ()
    patient_path: str | None = 'patient'
    provider_path: str | None = 'provider'
    filters: dict[str, str] = {}
    select_related: tuple[str, ...] = ('patient', 'provider')

    def __init__(self):
        filters = {}
        if self.patient_path:
            filters['patientId'] = self.patient_path
        if self.provider_path:
            filters['providerId'] = self.provider_path
        if self._has_field('status'):
            filters['status'] = 'status'
        filters.update(type(self).filters)
        self.filters = filters

    # -- helpers ----------------------------------------------------------
    @property
    def model_name(self) -> str:
        return self.model._meta.model_name

    def _has_field(self, name: str) -> bool:
        try:
            field = self.model._meta.get_field(name)
        except FieldDoesNotExist:
            return False
        return getattr(field, 'concrete', False)

    def queryset(self):
        return self.model.objects.select_related(*self.select_related)

    def search_q(self, term: str) -> Q:
        q = Q()
        for name in self.search_fields:
            q |= Q(**{f'{name}__icontains': term})
        if self.patient_path:
            for name in ('first_name', 'last_name', 'mrn'):
                q |= Q(**{f'{self.patient_path}__{name}__icontains': term})
        if self.provider_path:
            for name in ('first_name', 'last_name'):
                q |= Q(**{f'{self.provider_path}__{name}__icontains': term})
        return q

    def sort_key(self, sort_by: str | None, order: str | None) -> str:
        field = self.default_sort or self.date_field
        if sort_by:
            candidate = camel_to_snake(sort_by)
            if self._has_field(candidate) and not self.model._meta.get_field(candidate).is_relation:
                field = candidate
        order = order or self.default_order
        return f'-{field}' if order == 'desc' else field

    # -- operations -------------------------------------------------------
    def filter(self, qs, params: dict[str, Any]):
        for param, path in self.filters.items():
            value = params.get(param)
            if value is not None and value != '':
                qs = qs.filter(**{path: value})

        start_param, end_param = self.date_params
        qs = qs.filter(date_range_q(self.date_field, params.get(start_param), params.get(end_param)))

        term = (params.get('search') or '').strip()
        if term:
            qs = qs.filter(self.search_q(term))
        return qs

    def list(self, params: dict[str, Any]) -> Page:
        page, limit = params.get('page') or 1, params['limit']
        qs = self.filter(self.queryset(), params)
        total = qs.count()
        ordering = self.sort_key(params.get('sortBy'), params.get('sortOrder'))
        offset = (page - 1) * limit
        items = list(qs.order_by(ordering, '-pk' if ordering.startswith('-') else 'pk')[offset:offset + limit])
        return Page(items=items, total=total, page=page, limit=limit)

    def get(self, pk) -> models.Model:
        obj = self.queryset().filter(pk=pk).first()
        if obj is None:
            raise RecordNotFound(f'{self.label} not found')
        return obj

    def before_save(self, data: dict[str, Any], instance=None) -> dict[str, Any]:
        """Hook for derived values; ``instance`` is None on create."""
        return data

    def create(self, user, data: dict[str, Any]):
        data = self.before_save(dict(data))
        with transaction.atomic():
            obj = self.model.objects.create(**data)
            log_action(user=user, action=f'{self.model_name}_create', object_type=self.model_name, object_id=obj.pk)
        logger.info("Created %s %s by %s", self.model_name, obj.pk, getattr(user, 'username', '-'))
        return self.get(obj.pk)

    def update(self, user, instance, data: dict[str, Any]):
        data = self.before_save(dict(data), instance)
        with transaction.atomic():
            for name, value in data.items():
                setattr(instance, name, value)
            instance.save()
            log_action(
                user=user,
                action=f'{self.model_name}_update',
                object_type=self.model_name,
                object_id=instance.pk,
                detail={'fields': sorted(data)},
            )
        logger.info("Updated %s %s by %s", self.model_name, instance.pk, getattr(user, 'username', '-'))
        return self.get(instance.pk)

    def delete(self, user, instance) -> None:
        pk = instance.pk
        with transaction.atomic():
            instance.delete()
            log_action(user=user, action=f'{self.model_name}_delete', object_type=self.model_name, object_id=pk)
        logger.info("Deleted %s %s by %s", self.model_name, pk, getattr(user, 'username', '-'))
