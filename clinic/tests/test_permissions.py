import pytest

from .conftest import CardiologyVisitFactory, SpecimenFactory

pytestmark = pytest.mark.django_db

VISITS = '/api/cardiology/visits'


def visit_payload(patient, provider):
    return {'patientId': str(patient.pk), 'providerId': provider.pk, 'visitDate': '2024-01-10T09:30:00Z'}


def test_anonymous_requests_are_rejected(api_client):
    r = api_client.get(VISITS)
    assert r.status_code == 401
    assert r.json()['error']['code'] == 'not_authenticated'


def test_bad_token_is_rejected(api_client):
    api_client.credentials(HTTP_AUTHORIZATION='Token not-a-real-token')
    r = api_client.get(VISITS)
    assert r.status_code == 401
    assert r.json()['error']['code'] == 'authentication_failed'


@pytest.mark.parametrize('role_fixture', ['lab_tech', 'receptionist'])
def test_non_clinical_roles_can_read_but_not_write(request, client_for, doctor, patient, role_fixture):
    user = request.getfixturevalue(role_fixture)
    client = client_for(user)
    assert client.get(VISITS).status_code == 200

    r = client.post(VISITS, visit_payload(patient, doctor), format='json')
    assert r.status_code == 403
    assert r.json()['error']['code'] == 'permission_denied'


@pytest.mark.parametrize('role_fixture', ['admin_user', 'doctor', 'nurse'])
def test_clinical_roles_can_write(request, client_for, doctor, patient, role_fixture):
    user = request.getfixturevalue(role_fixture)
    r = client_for(user).post(VISITS, visit_payload(patient, doctor), format='json')
    assert r.status_code == 201


def test_nurse_cannot_delete(client_for, nurse):
    visit = CardiologyVisitFactory()
    assert client_for(nurse).delete(f'{VISITS}/{visit.pk}').status_code == 403


def test_admin_can_delete(client_for, admin_user):
    visit = CardiologyVisitFactory()
    assert client_for(admin_user).delete(f'{VISITS}/{visit.pk}').status_code == 200


def test_lab_tech_writes_specimens_only(client_for, lab_tech, patient):
    r = client_for(lab_tech).post('/api/lab/specimens', {'patientId': str(patient.pk), 'specimenType': 'URINE'},
                                  format='json')
    assert r.status_code == 201


def test_receptionist_cannot_touch_specimens(client_for, receptionist):
    specimen = SpecimenFactory()
    r = client_for(receptionist).post(f'/api/lab/specimens/{specimen.pk}/receive', {}, format='json')
    assert r.status_code == 403


def test_receptionist_registers_patients_but_cannot_delete(client_for, receptionist, patient):
    client = client_for(receptionist)
    r = client.post('/api/patients', {
        'firstName': 'Ada', 'lastName': 'Lovelace', 'dateOfBirth': '1990-12-10', 'gender': 'FEMALE',
        'phone': '5550001111',
    }, format='json')
    assert r.status_code == 201
    assert client.delete(f'/api/patients/{patient.pk}').status_code == 403


def test_receptionist_cannot_add_medical_history(client_for, receptionist, patient):
    r = client_for(receptionist).post(f'/api/patients/{patient.pk}/medical-history', {'diagnosis': 'Flu'},
                                      format='json')
    assert r.status_code == 403
