"""
The list/create/read/update/delete contract shared by every clinical
record resource, exercised through cardiology visits and ECGs.
"""
import datetime as dt
import uuid

import pytest
from django.conf import settings
from django.urls import reverse

from clinic.models import AuditEvent, CardiologyVisit

from .conftest import CardiologyVisitFactory, PatientFactory, UserFactory

pytestmark = pytest.mark.django_db

VISITS = '/api/cardiology/visits'


def at(day, hour=12):
    return dt.datetime(2024, 1, day, hour, tzinfo=dt.timezone.utc)


def test_create_returns_envelope_with_summaries(client_for, doctor, patient):
    r = client_for(doctor).post(VISITS, {
        'patientId': str(patient.pk),
        'providerId': doctor.pk,
        'visitDate': '2024-01-10T09:30:00Z',
        'reason': 'Palpitations',
    }, format='json')

    assert r.status_code == 201
    body = r.json()
    assert body['ok'] is True
    assert body['message'] == 'Cardiology visit created successfully'
    assert body['data']['patient']['mrn'] == patient.mrn
    assert body['data']['provider'] == {
        'id': doctor.pk, 'firstName': doctor.first_name, 'lastName': doctor.last_name, 'role': 'doctor',
    }
    assert body['data']['patientId'] == str(patient.pk)
    assert body['data']['status'] == 'SCHEDULED'
    assert AuditEvent.objects.filter(action='cardiologyvisit_create', object_id=body['data']['id']).exists()


def test_free_text_is_stripped_of_markup(client_for, doctor, patient):
    r = client_for(doctor).post(VISITS, {
        'patientId': str(patient.pk), 'providerId': doctor.pk, 'visitDate': '2024-01-10T09:30:00Z',
        'reason': '<script>alert(1)</script>Chest pain',
    }, format='json')
    assert r.status_code == 201
    assert '<script>' not in r.json()['data']['reason']


def test_free_text_keeps_literal_symbols(client_for, doctor, patient):
    r = client_for(doctor).post(VISITS, {
        'patientId': str(patient.pk), 'providerId': doctor.pk, 'visitDate': '2024-01-10T09:30:00Z',
        'reason': 'BP < 140 & HR > 100', 'plan': '<b>Recheck</b> in 2 weeks',
    }, format='json')
    assert r.status_code == 201
    visit = CardiologyVisit.objects.get(pk=r.json()['data']['id'])
    assert visit.reason == 'BP < 140 & HR > 100'
    assert visit.plan == 'Recheck in 2 weeks'
    assert r.json()['data']['reason'] == 'BP < 140 & HR > 100'


def test_visit_requires_provider(client_for, doctor, patient):
    r = client_for(doctor).post(VISITS, {'patientId': str(patient.pk), 'visitDate': '2024-01-10T09:30:00Z'},
                                format='json')
    assert r.status_code == 400
    body = r.json()
    assert body['ok'] is False
    assert body['error']['code'] == 'validation_error'
    assert 'providerId' in body['error']['details']


def test_provider_cannot_be_cleared_on_update(client_for, doctor, nurse):
    visit = CardiologyVisitFactory(provider=doctor)
    client = client_for(doctor)

    for method in (client.patch, client.put):
        r = method(f'{VISITS}/{visit.pk}', {'providerId': None}, format='json')
        assert r.status_code == 400
        assert 'providerId' in r.json()['error']['details']
    visit.refresh_from_db()
    assert visit.provider == doctor

    r = client.patch(f'{VISITS}/{visit.pk}', {'providerId': nurse.pk}, format='json')
    assert r.status_code == 200
    assert r.json()['data']['provider']['id'] == nurse.pk


def test_provider_must_be_clinician(client_for, doctor, lab_tech, patient):
    r = client_for(doctor).post(VISITS, {
        'patientId': str(patient.pk), 'providerId': lab_tech.pk, 'visitDate': '2024-01-10T09:30:00Z',
    }, format='json')
    assert r.status_code == 400
    assert r.json()['error']['message'] == 'Provider must be an active clinician'


def test_inactive_patient_rejected(client_for, doctor):
    gone = PatientFactory(is_active=False)
    r = client_for(doctor).post(VISITS, {
        'patientId': str(gone.pk), 'providerId': doctor.pk, 'visitDate': '2024-01-10T09:30:00Z',
    }, format='json')
    assert r.status_code == 400
    assert r.json()['error']['details']['patientId'] == ['Patient is inactive']


def test_unknown_parent_visit_rejected(client_for, doctor, patient):
    r = client_for(doctor).post('/api/cardiology/ecgs', {
        'patientId': str(patient.pk), 'visitId': str(uuid.uuid4()), 'recordedAt': '2024-01-10T09:30:00Z',
    }, format='json')
    assert r.status_code == 400
    assert 'visitId' in r.json()['error']['details']


def test_child_record_links_to_visit(client_for, doctor):
    visit = CardiologyVisitFactory(provider=doctor)
    r = client_for(doctor).post('/api/cardiology/ecgs', {
        'patientId': str(visit.patient_id), 'visitId': str(visit.pk), 'recordedAt': '2024-01-10T09:30:00Z',
        'heartRate': 72,
    }, format='json')
    assert r.status_code == 201
    assert r.json()['data']['visitId'] == str(visit.pk)
    assert visit.ecgs.count() == 1


def test_list_pagination(client_for, doctor):
    CardiologyVisitFactory.create_batch(3, provider=doctor)
    r = client_for(doctor).get(VISITS, {'limit': 2, 'page': 2})
    body = r.json()
    assert r.status_code == 200
    assert len(body['data']) == 1
    assert body['pagination'] == {'page': 2, 'limit': 2, 'total': 3, 'totalPages': 2}


def test_limit_is_capped(client_for, doctor):
    r = client_for(doctor).get(VISITS, {'limit': 5000})
    assert r.json()['pagination']['limit'] == settings.PAGE_SIZE_MAX


def test_bad_page_rejected(client_for, doctor):
    r = client_for(doctor).get(VISITS, {'page': 0})
    assert r.status_code == 400
    assert r.json()['error']['code'] == 'validation_error'


def test_status_and_patient_filters(client_for, doctor, patient):
    CardiologyVisitFactory(patient=patient, provider=doctor, status='COMPLETED')
    CardiologyVisitFactory(patient=patient, provider=doctor, status='SCHEDULED')
    CardiologyVisitFactory(provider=doctor, status='COMPLETED')
    client = client_for(doctor)

    r = client.get(VISITS, {'status': 'COMPLETED'})
    assert r.json()['pagination']['total'] == 2

    r = client.get(VISITS, {'status': 'COMPLETED', 'patientId': str(patient.pk)})
    assert r.json()['pagination']['total'] == 1


def test_invalid_status_filter_rejected(client_for, doctor):
    r = client_for(doctor).get(VISITS, {'status': 'BOGUS'})
    assert r.status_code == 400


def test_search_matches_patient_and_provider_names(client_for, doctor, patient):
    CardiologyVisitFactory(patient=patient, provider=doctor)
    other = UserFactory(first_name='Zelda', last_name='Quist')
    CardiologyVisitFactory(provider=other)
    client = client_for(doctor)

    r = client.get(VISITS, {'search': 'hopp'})
    assert [v['patient']['lastName'] for v in r.json()['data']] == ['Hopper']

    r = client.get(VISITS, {'search': 'zelda'})
    assert r.json()['pagination']['total'] == 1

    r = client.get(VISITS, {'search': patient.mrn})
    assert r.json()['pagination']['total'] == 1


def test_date_range_end_date_covers_whole_day(client_for, doctor):
    CardiologyVisitFactory(provider=doctor, visit_date=at(9))
    CardiologyVisitFactory(provider=doctor, visit_date=at(10, 23))
    CardiologyVisitFactory(provider=doctor, visit_date=at(20))
    client = client_for(doctor)

    r = client.get(VISITS, {'startDate': '2024-01-10', 'endDate': '2024-01-10'})
    assert r.json()['pagination']['total'] == 1

    r = client.get(VISITS, {'endDate': '2024-01-10'})
    assert r.json()['pagination']['total'] == 2

    r = client.get(VISITS, {'startDate': '2024-01-10T00:00:00Z'})
    assert r.json()['pagination']['total'] == 2


def test_sorting(client_for, doctor):
    for day in (15, 5, 25):
        CardiologyVisitFactory(provider=doctor, visit_date=at(day))
    client = client_for(doctor)

    r = client.get(VISITS, {'sortBy': 'visitDate', 'sortOrder': 'asc'})
    assert [v['visitDate'][:10] for v in r.json()['data']] == ['2024-01-05', '2024-01-15', '2024-01-25']

    # unknown columns fall back to the default sort, newest first
    r = client.get(VISITS, {'sortBy': 'nope'})
    assert [v['visitDate'][:10] for v in r.json()['data']] == ['2024-01-25', '2024-01-15', '2024-01-05']


def test_get_missing_record(client_for, doctor):
    r = client_for(doctor).get(f'{VISITS}/{uuid.uuid4()}')
    assert r.status_code == 404
    assert r.json() == {'ok': False, 'error': {'code': 'not_found', 'message': 'Cardiology visit not found'}}


def test_put_and_patch_are_partial(client_for, doctor):
    visit = CardiologyVisitFactory(provider=doctor, reason='Follow-up', status='SCHEDULED')
    client = client_for(doctor)

    r = client.patch(f'{VISITS}/{visit.pk}', {'status': 'COMPLETED'}, format='json')
    assert r.status_code == 200
    assert r.json()['message'] == 'Cardiology visit updated successfully'

    r = client.put(f'{VISITS}/{visit.pk}', {'diagnosis': 'Stable angina'}, format='json')
    assert r.status_code == 200

    visit.refresh_from_db()
    assert (visit.status, visit.reason, visit.diagnosis) == ('COMPLETED', 'Follow-up', 'Stable angina')


def test_delete_is_hard(client_for, doctor):
    visit = CardiologyVisitFactory(provider=doctor)
    r = client_for(doctor).delete(f'{VISITS}/{visit.pk}')
    assert r.status_code == 200
    assert r.json() == {'ok': True, 'data': None, 'message': 'Cardiology visit deleted successfully'}
    assert not CardiologyVisit.objects.filter(pk=visit.pk).exists()
    assert AuditEvent.objects.filter(action='cardiologyvisit_delete', object_id=str(visit.pk)).exists()


@pytest.mark.parametrize('path', [
    '/api/cardiology/electrophysiology',
    '/api/cardiology/heart-failure',
    '/api/oncology/chemotherapy',
    '/api/neurology/strokes',
    '/api/obgyn/antenatal-visits',
    '/api/pediatrics/growth',
    '/api/gastro/liver-function',
    '/api/pulmonology/sleep-studies',
    '/api/orthopedics/physical-therapy',
    '/api/ophthalmology/fundus',
    '/api/dialysis/flowsheets',
    '/api/dialysis/stations',
])
def test_every_module_lists(client_for, doctor, path):
    r = client_for(doctor).get(path)
    assert r.status_code == 200
    assert r.json()['pagination']['total'] == 0


def test_named_routes(client_for, doctor):
    assert reverse('cardiology-visits') == VISITS
    r = client_for(doctor).get(reverse('dialysis-schedules'))
    assert r.status_code == 200


def test_heart_failure_assessments(client_for, doctor, patient):
    client = client_for(doctor)
    visit = CardiologyVisitFactory(patient=patient, provider=doctor)
    for day, nyha, stage in [(3, 'CLASS_II', 'STAGE_C'), (5, 'CLASS_III', 'STAGE_C'), (4, 'CLASS_II', 'STAGE_B')]:
        r = client.post('/api/cardiology/heart-failure', {
            'patientId': str(patient.pk), 'visitId': str(visit.pk), 'assessmentDate': at(day).isoformat(),
            'nyhaClass': nyha, 'heartFailureStage': stage, 'lvef': 35, 'etiology': 'Ischemic',
        }, format='json')
        assert r.status_code == 201, r.json()
    assert r.json()['message'] == 'Heart failure assessment created successfully'
    assert r.json()['data']['visitId'] == str(visit.pk)

    r = client.get('/api/cardiology/heart-failure')
    assert [a['nyhaClass'] for a in r.json()['data']] == ['CLASS_III', 'CLASS_II', 'CLASS_II']

    r = client.get('/api/cardiology/heart-failure', {'nyhaClass': 'CLASS_II', 'heartFailureStage': 'STAGE_C'})
    assert r.json()['pagination']['total'] == 1

    r = client.get('/api/cardiology/heart-failure', {'nyhaClass': 'CLASS_V'})
    assert r.status_code == 400

    r = client.post('/api/cardiology/heart-failure', {
        'patientId': str(patient.pk), 'assessmentDate': at(6).isoformat(), 'lvef': 120,
    }, format='json')
    assert 'lvef' in r.json()['error']['details']


def test_electrophysiology_studies(client_for, doctor, patient):
    client = client_for(doctor)
    r = client.post('/api/cardiology/electrophysiology', {
        'patientId': str(patient.pk), 'providerId': doctor.pk, 'performedAt': at(2).isoformat(),
        'procedureType': 'ABLATION', 'ablationTarget': 'Cavotricuspid isthmus', 'fluoroscopyTime': 12.5,
    }, format='json')
    assert r.status_code == 201, r.json()
    assert r.json()['data']['status'] == 'ORDERED'

    r = client.get('/api/cardiology/electrophysiology', {'search': 'cavotricuspid'})
    assert r.json()['pagination']['total'] == 1
    r = client.get('/api/cardiology/electrophysiology', {'procedureType': 'ICD_IMPLANT'})
    assert r.json()['pagination']['total'] == 0

    r = client.post('/api/cardiology/electrophysiology', {
        'patientId': str(patient.pk), 'performedAt': at(2).isoformat(), 'procedureType': 'TELEPORT',
    }, format='json')
    assert 'procedureType' in r.json()['error']['details']

    r = client.post('/api/cardiology/electrophysiology', {
        'patientId': str(patient.pk), 'performedAt': at(2).isoformat(), 'procedureType': 'OTHER',
        'fluoroscopyTime': -1,
    }, format='json')
    assert 'fluoroscopyTime' in r.json()['error']['details']
