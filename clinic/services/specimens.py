"""
Specimen tracking for the laboratory.

Barcodes are ``SP{YYMMDD}{seq:04d}`` where ``seq`` restarts at 0001 each
day.  The next sequence is read and the row inserted inside one
transaction; a concurrent insert that takes the same barcode trips the
unique constraint and the allocation is retried.
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import Count
from django.db.models.functions import Length
from django.utils import timezone

from clinic.exceptions import InvalidState, RecordNotFound, ServiceError
from clinic.models import Specimen

from .audit import log_action
from .base import RecordService

logger = logging.getLogger(__name__)

BARCODE_PREFIX = 'SP'


def barcode_prefix(now=None) -> str:
    now = now or timezone.localtime()
    return f"{BARCODE_PREFIX}{now:%y%m%d}"


def next_barcode(now=None) -> str:
    prefix = barcode_prefix(now)
    last = (
        Specimen.objects.filter(barcode__startswith=prefix)
        .order_by(Length('barcode').desc(), '-barcode')
        .values_list('barcode', flat=True)
        .first()
    )
    seq = int(last[len(prefix):]) + 1 if last else 1
    return f"{prefix}{seq:04d}"


class SpecimenService(RecordService):
    model = Specimen
    label = 'Specimen'
    date_field = 'collection_time'
    date_params = ('dateFrom', 'dateTo')
    provider_path = None
    search_fields = ('barcode',)
    filters = {'specimenType': 'specimen_type'}
    select_related = ('patient', 'collected_by', 'received_by')

    def create(self, user, data):
        retries = settings.SPECIMEN_BARCODE_RETRIES
        for attempt in range(1, retries + 1):
            now = timezone.localtime()
            try:
                with transaction.atomic():
                    barcode = next_barcode(now)
                    specimen = Specimen.objects.create(
                        barcode=barcode,
                        collected_by=user,
                        collection_time=now,
                        status=Specimen.STATUS_COLLECTED,
                        **data,
                    )
                    log_action(
                        user=user, action='specimen_create', object_type='specimen', object_id=specimen.pk,
                        detail={'barcode': barcode},
                    )
            except IntegrityError:
                logger.warning("Specimen barcode collision (attempt %d/%d)", attempt, retries)
                continue
            logger.info("Collected specimen %s for patient %s", barcode, specimen.patient_id)
            return self.get(specimen.pk)
        raise ServiceError('Could not allocate a specimen barcode, try again', code='barcode_unavailable',
                           http_status=503)

    def get_by_barcode(self, barcode: str) -> Specimen:
        obj = self.queryset().filter(barcode=barcode).first()
        if obj is None:
            raise RecordNotFound('Specimen not found')
        return obj

    def receive(self, user, specimen: Specimen, data) -> Specimen:
        if specimen.status != Specimen.STATUS_COLLECTED:
            raise InvalidState('Specimen must be collected before it can be received')
        with transaction.atomic():
            specimen.received_time = timezone.now()
            specimen.received_by = user
            specimen.status = Specimen.STATUS_RECEIVED
            for name in ('reception_notes', 'storage_location'):
                if name in data:
                    setattr(specimen, name, data[name])
            specimen.save()
            log_action(user=user, action='specimen_receive', object_type='specimen', object_id=specimen.pk)
        logger.info("Received specimen %s by %s", specimen.barcode, getattr(user, 'username', '-'))
        return self.get(specimen.pk)

    def reject(self, user, specimen: Specimen, reason: str) -> Specimen:
        if specimen.status == Specimen.STATUS_COMPLETED:
            raise InvalidState('Cannot reject a completed specimen')
        with transaction.atomic():
            specimen.status = Specimen.STATUS_REJECTED
            specimen.rejection_reason = reason
            specimen.save(update_fields=['status', 'rejection_reason', 'updated_at'])
            log_action(
                user=user, action='specimen_reject', object_type='specimen', object_id=specimen.pk,
                detail={'reason': reason},
            )
        logger.info("Rejected specimen %s: %s", specimen.barcode, reason)
        return self.get(specimen.pk)

    def stats(self) -> dict:
        by_status = {code: 0 for code, _ in Specimen.STATUS_CHOICES}
        for row in Specimen.objects.values('status').annotate(n=Count('id')):
            by_status[row['status']] = row['n']
        start_of_day = timezone.localtime().replace(hour=0, minute=0, second=0, microsecond=0)
        return {
            'byStatus': by_status,
            'today': Specimen.objects.filter(collection_time__gte=start_of_day).count(),
        }


specimens = SpecimenService()
