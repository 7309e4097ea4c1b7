"""
Specimen collection, barcode allocation and the receive/reject lifecycle.
"""
import datetime as dt

import pytest
from django.test import override_settings

from clinic.models import Specimen
from clinic.services import specimens as specimen_service
from clinic.services.specimens import barcode_prefix, next_barcode

from .conftest import PatientFactory, SpecimenFactory

pytestmark = pytest.mark.django_db

SPECIMENS = '/api/lab/specimens'


@pytest.fixture
def client(client_for, lab_tech):
    return client_for(lab_tech)


def collect(client, patient, **fields):
    return client.post(SPECIMENS, {'patientId': str(patient.pk), 'specimenType': 'BLOOD', **fields}, format='json')


def test_collect_assigns_barcode_and_collector(client, lab_tech, patient):
    r = collect(client, patient, collectionSite='Left arm', volumeCollected=5)
    assert r.status_code == 201
    body = r.json()
    assert body['message'] == 'Specimen collected successfully'
    data = body['data']
    assert data['barcode'] == f'{barcode_prefix()}0001'
    assert data['status'] == 'COLLECTED'
    assert data['collectedBy']['id'] == lab_tech.pk
    assert data['collectionTime']
    assert data['patient']['mrn'] == patient.mrn


def test_barcodes_are_sequential_per_day(client, patient):
    first = collect(client, patient).json()['data']['barcode']
    second = collect(client, patient).json()['data']['barcode']
    assert first.endswith('0001')
    assert second.endswith('0002')
    assert first[:-4] == second[:-4]


def test_sequence_continues_from_highest_today(patient):
    prefix = barcode_prefix()
    SpecimenFactory(barcode=f'{prefix}0009')
    SpecimenFactory(barcode=f'{prefix}0010')
    SpecimenFactory(barcode='SP9901010999')
    assert next_barcode() == f'{prefix}0011'


def test_sequence_past_four_digits(patient):
    prefix = barcode_prefix()
    SpecimenFactory(barcode=f'{prefix}9999')
    SpecimenFactory(barcode=f'{prefix}10000')
    assert next_barcode() == f'{prefix}10001'


def test_barcode_collision_is_retried(client, patient, monkeypatch):
    taken = SpecimenFactory(barcode='SP9901010001').barcode
    issued = iter([taken, 'SP9901010002'])
    monkeypatch.setattr(specimen_service, 'next_barcode', lambda now=None: next(issued))

    r = collect(client, patient)
    assert r.status_code == 201
    assert r.json()['data']['barcode'] == 'SP9901010002'


@override_settings(SPECIMEN_BARCODE_RETRIES=3)
def test_barcode_allocation_gives_up(client, patient, monkeypatch):
    taken = SpecimenFactory(barcode='SP9901010001').barcode
    monkeypatch.setattr(specimen_service, 'next_barcode', lambda now=None: taken)

    r = collect(client, patient)
    assert r.status_code == 503
    assert r.json()['error']['code'] == 'barcode_unavailable'
    assert Specimen.objects.count() == 1


def test_collect_validates_input(client, patient):
    r = collect(client, patient, specimenType='BLOODY')
    assert r.status_code == 400
    assert 'specimenType' in r.json()['error']['details']

    r = collect(client, patient, volumeCollected=-1)
    assert 'volumeCollected' in r.json()['error']['details']


def test_lookup_by_barcode(client):
    specimen = SpecimenFactory(barcode='SP2401010042')
    r = client.get(f'{SPECIMENS}/barcode/SP2401010042')
    assert r.status_code == 200
    assert r.json()['data']['id'] == str(specimen.pk)

    r = client.get(f'{SPECIMENS}/barcode/SP0000000000')
    assert r.status_code == 404
    assert r.json()['error']['message'] == 'Specimen not found'


def test_receive_only_from_collected(client, lab_tech):
    specimen = SpecimenFactory()
    r = client.post(f'{SPECIMENS}/{specimen.pk}/receive', {'storageLocation': 'Fridge 2'}, format='json')
    assert r.status_code == 200
    data = r.json()['data']
    assert data['status'] == 'RECEIVED'
    assert data['receivedBy']['id'] == lab_tech.pk
    assert data['receivedTime']
    assert data['storageLocation'] == 'Fridge 2'

    r = client.post(f'{SPECIMENS}/{specimen.pk}/receive', {}, format='json')
    assert r.status_code == 409
    assert r.json()['error']['code'] == 'invalid_state'


def test_reject_requires_reason(client):
    specimen = SpecimenFactory()
    r = client.post(f'{SPECIMENS}/{specimen.pk}/reject', {'reason': '  '}, format='json')
    assert r.status_code == 400
    assert r.json()['error']['message'] == 'Rejection reason is required'


def test_reject(client):
    specimen = SpecimenFactory(status=Specimen.STATUS_RECEIVED)
    r = client.post(f'{SPECIMENS}/{specimen.pk}/reject', {'reason': 'Haemolysed'}, format='json')
    assert r.status_code == 200
    assert r.json()['data']['status'] == 'REJECTED'
    assert r.json()['data']['rejectionReason'] == 'Haemolysed'


def test_completed_specimen_cannot_be_rejected(client):
    specimen = SpecimenFactory(status=Specimen.STATUS_COMPLETED)
    r = client.post(f'{SPECIMENS}/{specimen.pk}/reject', {'reason': 'Too late'}, format='json')
    assert r.status_code == 409
    specimen.refresh_from_db()
    assert specimen.status == Specimen.STATUS_COMPLETED


def test_update_limited_fields(client, patient):
    specimen = SpecimenFactory(specimen_type='BLOOD')
    r = client.patch(f'{SPECIMENS}/{specimen.pk}', {
        'status': 'PROCESSING', 'storageLocation': 'Rack B', 'specimenType': 'URINE',
    }, format='json')
    assert r.status_code == 200
    specimen.refresh_from_db()
    assert (specimen.status, specimen.storage_location, specimen.specimen_type) == ('PROCESSING', 'Rack B', 'BLOOD')


def test_specimens_are_never_deleted(client_for, doctor):
    specimen = SpecimenFactory()
    r = client_for(doctor).delete(f'{SPECIMENS}/{specimen.pk}')
    assert r.status_code == 405
    assert r.json()['error']['code'] == 'method_not_allowed'


def test_list_filters(client):
    alice = PatientFactory(first_name='Alice', last_name='Nguyen')
    SpecimenFactory(patient=alice, specimen_type='URINE', barcode='SP2401010001',
                    collection_time=dt.datetime(2024, 1, 1, 8, tzinfo=dt.timezone.utc))
    SpecimenFactory(specimen_type='BLOOD', status=Specimen.STATUS_REJECTED,
                    collection_time=dt.datetime(2024, 2, 1, 8, tzinfo=dt.timezone.utc))

    def total(**params):
        return client.get(SPECIMENS, params).json()['pagination']['total']

    assert total() == 2
    assert total(specimenType='URINE') == 1
    assert total(status='REJECTED') == 1
    assert total(patientId=str(alice.pk)) == 1
    assert total(search='nguyen') == 1
    assert total(search='SP24010100') == 1
    assert total(dateFrom='2024-01-15') == 1
    assert total(dateTo='2024-01-01') == 1


def test_list_newest_first(client):
    old = SpecimenFactory(collection_time=dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc))
    new = SpecimenFactory(collection_time=dt.datetime(2024, 3, 1, tzinfo=dt.timezone.utc))
    ids = [s['id'] for s in client.get(SPECIMENS).json()['data']]
    assert ids == [str(new.pk), str(old.pk)]


def test_stats(client):
    SpecimenFactory.create_batch(2)
    SpecimenFactory(status=Specimen.STATUS_REJECTED,
                    collection_time=dt.datetime(2020, 1, 1, tzinfo=dt.timezone.utc))
    r = client.get(f'{SPECIMENS}/stats')
    data = r.json()['data']
    assert data['today'] == 2
    assert data['byStatus']['COLLECTED'] == 2
    assert data['byStatus']['REJECTED'] == 1
    assert data['byStatus']['COMPLETED'] == 0
    assert set(data['byStatus']) == {'ORDERED', 'COLLECTED', 'RECEIVED', 'PROCESSING', 'COMPLETED', 'REJECTED'}
