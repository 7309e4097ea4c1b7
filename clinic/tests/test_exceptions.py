import pytest
from rest_framework import exceptions

from clinic.exceptions import InvalidState, ServiceError, _first_message, api_exception_handler
from clinic.responses import total_pages


pytestmark = pytest.mark.django_db


@pytest.mark.parametrize('total, limit, pages', [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2)])
def test_total_pages(total, limit, pages):
    assert total_pages(total, limit) == pages


def test_service_error_keeps_its_code():
    resp = api_exception_handler(ServiceError('Nope', code='custom', details={'a': 1}), {})
    assert resp.status_code == 400
    assert resp.data == {'ok': False, 'error': {'code': 'custom', 'message': 'Nope', 'details': {'a': 1}}}


def test_invalid_state_is_conflict():
    resp = api_exception_handler(InvalidState('Wrong state'), {})
    assert resp.status_code == 409
    assert resp.data['error']['code'] == 'invalid_state'


def test_validation_error_message_is_first_detail():
    exc = exceptions.ValidationError({'endTime': ['End time must be after start time'], 'other': ['x']})
    resp = api_exception_handler(exc, {})
    assert resp.status_code == 400
    assert resp.data['error']['message'] == 'End time must be after start time'
    assert resp.data['error']['details']['other'] == ['x']


def test_unhandled_error_is_hidden(settings):
    settings.DEBUG = False
    resp = api_exception_handler(RuntimeError('db password is hunter2'), {'request': None})
    assert resp.status_code == 500
    assert resp.data == {'ok': False, 'error': {'code': 'server_error', 'message': 'Internal server error'}}


def test_throttled_keeps_retry_after():
    resp = api_exception_handler(exceptions.Throttled(wait=30), {})
    assert resp.status_code == 429
    assert resp.data['error']['code'] == 'throttled'
    assert resp['Retry-After'] == '30'


def test_first_message_walks_nested_errors():
    assert _first_message({'a': [], 'b': {'c': ['deep']}}) == 'deep'
    assert _first_message({}) is None
