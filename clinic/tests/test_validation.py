"""
Specialty rules and derived values enforced on create and update.
"""
import pytest

from clinic.models import GrowthMeasurement

from .conftest import DialysisSessionFactory, DialysisStationFactory

pytestmark = pytest.mark.django_db

WHEN = '2024-03-01T10:00:00Z'


@pytest.fixture
def client(client_for, doctor):
    return client_for(doctor)


def post(client, path, patient, **fields):
    return client.post(path, {'patientId': str(patient.pk), **fields}, format='json')


def error_details(r):
    assert r.status_code == 400, r.json()
    return r.json()['error']['details']


def test_chemotherapy_cycle_cannot_exceed_total(client, patient):
    r = post(client, '/api/oncology/chemotherapy', patient, protocolName='FOLFOX', cancerType='Colorectal',
             cycleNumber=7, totalCycles=6, scheduledDate=WHEN)
    assert error_details(r)['cycleNumber'] == ['Cycle number cannot exceed total cycles']


def test_chemotherapy_update_checks_stored_total(client, patient):
    r = post(client, '/api/oncology/chemotherapy', patient, protocolName='FOLFOX', cancerType='Colorectal',
             cycleNumber=2, totalCycles=6, scheduledDate=WHEN)
    pk = r.json()['data']['id']
    r = client.patch(f'/api/oncology/chemotherapy/{pk}', {'cycleNumber': 9}, format='json')
    assert 'cycleNumber' in error_details(r)


def test_stroke_times_after_onset(client, patient):
    r = post(client, '/api/neurology/strokes', patient, onsetTime=WHEN, strokeType='ISCHEMIC',
             arrivalTime='2024-03-01T09:00:00Z')
    assert error_details(r)['arrivalTime'] == ['Cannot be before stroke onset']


def test_nihss_and_gcs_ranges(client, patient, doctor):
    r = post(client, '/api/neurology/visits', patient, providerId=doctor.pk, visitDate=WHEN, gcsScore=2)
    assert 'gcsScore' in error_details(r)


def test_pregnancy_edd_after_lmp(client, patient):
    r = post(client, '/api/obgyn/pregnancies', patient, lmpDate=WHEN, eddDate='2024-02-01T00:00:00Z')
    assert 'eddDate' in error_details(r)


def test_antenatal_visit_reports_pregnancy_patient(client, patient):
    r = post(client, '/api/obgyn/pregnancies', patient, lmpDate=WHEN, eddDate='2024-12-06T00:00:00Z')
    pregnancy_id = r.json()['data']['id']
    r = client.post('/api/obgyn/antenatal-visits', {
        'pregnancyId': pregnancy_id, 'visitDate': '2024-05-01T10:00:00Z', 'gestationalAgeWeeks': 9,
    }, format='json')
    assert r.status_code == 201, r.json()
    assert r.json()['data']['patient']['id'] == str(patient.pk)


def test_growth_bmi_is_derived(client, patient):
    r = post(client, '/api/pediatrics/growth', patient, measurementDate=WHEN, weightKg=20, heightCm=100)
    assert r.status_code == 201
    assert r.json()['data']['bmi'] == 20.0

    pk = r.json()['data']['id']
    client.patch(f'/api/pediatrics/growth/{pk}', {'weightKg': 25}, format='json')
    assert GrowthMeasurement.objects.get(pk=pk).bmi == 25.0


def test_vaccination_dose_within_series(client, patient):
    r = post(client, '/api/pediatrics/vaccinations', patient, vaccineName='MMR', dateGiven=WHEN,
             doseNumber=3, totalDoses=2)
    assert 'doseNumber' in error_details(r)


def test_spirometry_ratio_is_derived(client, patient):
    r = post(client, '/api/pulmonology/spirometry', patient, testDate=WHEN, qualityGrade='A', fev1=3, fvc=4)
    assert r.status_code == 201, r.json()
    assert r.json()['data']['fev1FvcRatio'] == 0.75


def test_spirometry_fev1_cannot_exceed_fvc(client, patient):
    r = post(client, '/api/pulmonology/spirometry', patient, testDate=WHEN, qualityGrade='A', fev1=5, fvc=4)
    assert error_details(r)['fev1'] == ['FEV1 cannot exceed FVC']

    r = post(client, '/api/pulmonology/spirometry', patient, testDate=WHEN, qualityGrade='A', fev1=3, fvc=4)
    pk = r.json()['data']['id']
    r = client.patch(f'/api/pulmonology/spirometry/{pk}', {'fvc': 2}, format='json')
    assert 'fev1' in error_details(r)


@pytest.mark.parametrize('ahi, severity', [(2, 'NONE'), (12, 'MILD'), (20, 'MODERATE'), (45, 'SEVERE')])
def test_sleep_study_severity_follows_ahi(client, patient, ahi, severity):
    r = post(client, '/api/pulmonology/sleep-studies', patient, studyDate=WHEN, studyType='PSG', ahi=ahi)
    assert r.status_code == 201, r.json()
    assert r.json()['data']['apneaSeverity'] == severity


def test_fracture_surgery_after_injury(client, patient):
    r = post(client, '/api/orthopedics/fractures', patient, injuryDate=WHEN, fractureType='CLOSED',
             bone='Radius', surgeryDate='2024-02-01T10:00:00Z')
    assert 'surgeryDate' in error_details(r)


def test_therapy_sessions_completed_within_plan(client, patient):
    r = post(client, '/api/orthopedics/physical-therapy', patient, referralDate=WHEN,
             sessionsPlanned=10, sessionsCompleted=12)
    assert error_details(r)['sessionsCompleted'] == ['Completed sessions cannot exceed planned sessions']


def test_cardiology_medication_dates(client, patient):
    r = post(client, '/api/cardiology/medications', patient, medicationName='Bisoprolol',
             startDate='2024-03-10T08:00:00Z', endDate='2024-03-01T08:00:00Z')
    assert 'endDate' in error_details(r)


def test_dialysis_session_end_after_start(client, patient, nurse):
    r = post(client, '/api/dialysis/sessions', patient, providerId=nurse.pk, startTime=WHEN, endTime=WHEN)
    assert error_details(r)['endTime'] == ['End time must be after start time']


def test_dialysis_schedule_station_and_days(client, patient):
    station = DialysisStationFactory(is_active=False)
    r = post(client, '/api/dialysis/schedules', patient, stationId=str(station.pk), startTime=WHEN,
             durationMinutes=240)
    assert error_details(r)['stationId'] == ['Station is not active']

    station = DialysisStationFactory()
    r = post(client, '/api/dialysis/schedules', patient, stationId=str(station.pk), startTime=WHEN,
             durationMinutes=240, recurrence='WEEKLY')
    assert 'daysOfWeek' in error_details(r)

    r = post(client, '/api/dialysis/schedules', patient, stationId=str(station.pk), startTime=WHEN,
             durationMinutes=240, recurrence='WEEKLY', daysOfWeek=['MON', 'WED', 'FRI'])
    assert r.status_code == 201
    assert r.json()['data']['station']['name'] == station.name


def test_flowsheet_inherits_session_patient(client):
    session = DialysisSessionFactory()
    r = client.post('/api/dialysis/flowsheets', {
        'sessionId': str(session.pk), 'recordedAt': WHEN, 'heartRate': 80,
    }, format='json')
    assert r.status_code == 201, r.json()
    assert r.json()['data']['patient']['mrn'] == session.patient.mrn

    r = client.get('/api/dialysis/flowsheets', {'patientId': str(session.patient_id)})
    assert r.json()['pagination']['total'] == 1


def test_flowsheet_rejects_inactive_patient(client):
    session = DialysisSessionFactory(patient__is_active=False)
    r = client.post('/api/dialysis/flowsheets', {
        'sessionId': str(session.pk), 'recordedAt': WHEN, 'heartRate': 80,
    }, format='json')
    assert error_details(r)['sessionId'] == ['Patient is inactive']
    assert not session.flowsheets.exists()
