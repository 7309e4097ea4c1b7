import pytest
from django.urls import reverse

from clinic.models import AuditEvent, User

from .conftest import PASSWORD, UserFactory

pytestmark = pytest.mark.django_db


def login(client, username, password=PASSWORD, **extra):
    return client.post(reverse('auth-login'), {'username': username, 'password': password, **extra}, format='json')


def test_login_returns_legacy_token_and_jwt_pair(api_client, doctor):
    r = login(api_client, 'doctor')
    assert r.status_code == 200
    data = r.json()['data']
    assert data['token'] and data['access'] and data['refresh']
    assert data['user']['username'] == 'doctor'
    assert data['user']['role'] == 'doctor'
    assert AuditEvent.objects.filter(action='login', user=doctor, detail__result='ok').exists()


def test_no_role_bypass_in_login(api_client, receptionist):
    r = login(api_client, 'reception', role='admin')
    assert r.status_code == 200
    assert r.json()['data']['user']['role'] == 'receptionist'
    receptionist.refresh_from_db()
    assert receptionist.role == User.ROLE_RECEPTIONIST


def test_failed_login_is_audited(api_client, doctor):
    r = login(api_client, 'doctor', password='wrong')
    assert r.status_code == 400
    assert r.json()['error'] == {'code': 'invalid_credentials', 'message': 'Invalid username or password'}
    assert AuditEvent.objects.filter(action='login', user__isnull=True, detail__username='doctor').exists()


def test_inactive_user_cannot_login(api_client):
    UserFactory(username='gone', is_active=False)
    assert login(api_client, 'gone').status_code == 400


def test_login_requires_fields(api_client):
    r = api_client.post(reverse('auth-login'), {'username': 'doctor'}, format='json')
    assert r.status_code == 400
    assert r.json()['error']['message'] == 'Password is required'


@pytest.mark.parametrize('scheme, key', [('Token', 'token'), ('Bearer', 'access')])
def test_me_with_either_scheme(api_client, nurse, scheme, key):
    tokens = login(api_client, 'nurse').json()['data']
    api_client.credentials(HTTP_AUTHORIZATION=f'{scheme} {tokens[key]}')
    r = api_client.get(reverse('auth-me'))
    assert r.status_code == 200
    assert r.json()['data']['username'] == 'nurse'


def test_refresh_and_logout(api_client, doctor):
    tokens = login(api_client, 'doctor').json()['data']

    r = api_client.post(reverse('auth-refresh'), {'refresh': tokens['refresh']}, format='json')
    assert r.status_code == 200
    assert r.json()['data']['access']

    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")
    r = api_client.post(reverse('auth-logout'), {'refresh': tokens['refresh']}, format='json')
    assert r.status_code == 200
    assert r.json()['data'] == {'blacklisted': 1}

    api_client.credentials()
    r = api_client.post(reverse('auth-refresh'), {'refresh': tokens['refresh']}, format='json')
    assert r.status_code == 401


def test_logout_everywhere(api_client, doctor):
    login(api_client, 'doctor')
    tokens = login(api_client, 'doctor').json()['data']
    api_client.credentials(HTTP_AUTHORIZATION=f"Token {tokens['token']}")
    r = api_client.post(reverse('auth-logout'), {}, format='json')
    assert r.json()['data'] == {'blacklisted': 2}


def test_logout_refuses_another_users_token(api_client, doctor, nurse):
    nurse_tokens = login(api_client, 'nurse').json()['data']
    doctor_tokens = login(api_client, 'doctor').json()['data']

    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {doctor_tokens['access']}")
    r = api_client.post(reverse('auth-logout'), {'refresh': nurse_tokens['refresh']}, format='json')
    assert r.status_code == 403
    assert r.json()['error']['code'] == 'invalid_token'

    api_client.credentials()
    r = api_client.post(reverse('auth-refresh'), {'refresh': nurse_tokens['refresh']}, format='json')
    assert r.status_code == 200


def test_refresh_rejects_garbage(api_client):
    r = api_client.post(reverse('auth-refresh'), {'refresh': 'garbage'}, format='json')
    assert r.status_code == 401


def test_providers_lists_active_clinicians(client_for, doctor, nurse, lab_tech):
    UserFactory(username='retired', role=User.ROLE_DOCTOR, is_active=False)
    client = client_for(lab_tech)

    r = client.get(reverse('providers'))
    assert sorted(u['username'] for u in r.json()['data']) == ['doctor', 'nurse']

    r = client.get(reverse('providers'), {'role': 'nurse'})
    assert [u['username'] for u in r.json()['data']] == ['nurse']

    r = client.get(reverse('providers'), {'search': doctor.last_name})
    assert 'doctor' in [u['username'] for u in r.json()['data']]
