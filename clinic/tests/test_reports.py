import datetime as dt

import pytest
from django.utils import timezone

from clinic.models import CardiologyProcedure, DialysisPrescription

from .conftest import (
    CardiologyEchoFactory,
    CardiologyVisitFactory,
    DialysisLabFactory,
    DialysisSessionFactory,
    PatientFactory,
    SpecimenFactory,
)

pytestmark = pytest.mark.django_db


def test_cardiology_summary(client_for, doctor):
    CardiologyVisitFactory(status='COMPLETED')
    CardiologyVisitFactory(status='COMPLETED')
    CardiologyVisitFactory(status='CANCELLED')
    CardiologyEchoFactory(lvef=40)
    CardiologyEchoFactory(lvef=60)
    for status in ('COMPLETED', 'SCHEDULED'):
        CardiologyProcedure.objects.create(patient=PatientFactory(), procedure_date=timezone.now(), status=status)

    r = client_for(doctor).get('/api/cardiology/reports/summary')
    data = r.json()['data']
    assert data['totalVisits'] == 3
    assert data['completedVisits'] == 2
    assert data['cancelledVisits'] == 1
    assert data['totalEchos'] == 2
    assert data['totalProcedures'] == 2
    assert data['completedProcedures'] == 1
    assert set(data) == {
        'totalVisits', 'completedVisits', 'cancelledVisits', 'totalEcgs', 'totalEchos', 'totalStressTests',
        'totalProcedures', 'completedProcedures', 'averageLvef', 'averageTroponin', 'activeDevices',
        'activeMedications',
    }
    assert data['averageLvef'] == 50.0
    assert data['averageTroponin'] is None


def test_cardiology_summary_date_range(client_for, doctor):
    CardiologyVisitFactory(visit_date=dt.datetime(2023, 6, 1, tzinfo=dt.timezone.utc))
    CardiologyVisitFactory()
    r = client_for(doctor).get('/api/cardiology/reports/summary', {'startDate': '2024-01-01'})
    assert r.json()['data']['totalVisits'] == 1


def test_dialysis_summary(client_for, doctor):
    start = dt.datetime(2024, 2, 1, 8, tzinfo=dt.timezone.utc)
    first = DialysisSessionFactory(start_time=start, end_time=start + dt.timedelta(minutes=240))
    DialysisSessionFactory(start_time=start, end_time=start + dt.timedelta(minutes=180), status='CANCELLED')
    DialysisLabFactory(ktv=1.2, urr=70)
    DialysisLabFactory(ktv=1.4, urr=75)
    DialysisPrescription.objects.create(patient=first.patient, start_date=start, is_active=True)

    data = client_for(doctor).get('/api/dialysis/reports/summary').json()['data']
    assert data['totalSessions'] == 2
    assert data['completedSessions'] == 1
    assert data['cancelledSessions'] == 1
    assert data['averageDurationMinutes'] == 210
    assert data['averageKtv'] == 1.3
    assert data['averageUrr'] == 72.5
    assert data['activePatients'] == 1


def test_dashboard_counts_and_cache(client_for, nurse):
    PatientFactory()
    CardiologyVisitFactory()
    DialysisSessionFactory()
    SpecimenFactory()
    client = client_for(nurse)

    data = client.get('/api/dashboard').json()['data']
    assert data['today'] == {'cardiologyVisits': 1, 'dialysisSessions': 1, 'neurologyVisits': 0}
    assert data['specimens']['today'] == 1
    assert data['patients']['total'] == 4

    CardiologyVisitFactory()
    assert client.get('/api/dashboard').json()['data']['today']['cardiologyVisits'] == 1


def test_healthz(api_client):
    r = api_client.get('/healthz')
    assert r.status_code == 200
    assert r.json() == {'ok': True, 'db': True}
