import datetime as dt

import factory
import pytest
from django.core.cache import cache
from django.utils import timezone
from factory.django import DjangoModelFactory
from rest_framework.test import APIClient

from clinic.models import (
    CardiologyEcho,
    CardiologyVisit,
    DialysisLab,
    DialysisSession,
    DialysisStation,
    MedicalHistory,
    Patient,
    Specimen,
    User,
)

PASSWORD = 'P@ssw0rd1'


class UserFactory(DjangoModelFactory):
    class Meta:
        model = User
        django_get_or_create = ('username',)

    username = factory.Sequence(lambda n: f'user{n}')
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    email = factory.LazyAttribute(lambda o: f'{o.username}@hospital.test')
    role = User.ROLE_DOCTOR
    password = factory.django.Password(PASSWORD)


class PatientFactory(DjangoModelFactory):
    class Meta:
        model = Patient

    mrn = factory.Sequence(lambda n: f'MRN240101{n:06d}')
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    date_of_birth = dt.date(1980, 5, 17)
    gender = 'FEMALE'
    phone = factory.Sequence(lambda n: f'555{n:07d}')


class MedicalHistoryFactory(DjangoModelFactory):
    class Meta:
        model = MedicalHistory

    patient = factory.SubFactory(PatientFactory)
    doctor = factory.SubFactory(UserFactory)
    diagnosis = 'Hypertension'


class CardiologyVisitFactory(DjangoModelFactory):
    class Meta:
        model = CardiologyVisit

    patient = factory.SubFactory(PatientFactory)
    provider = factory.SubFactory(UserFactory)
    visit_date = factory.LazyFunction(timezone.now)
    status = 'SCHEDULED'


class CardiologyEchoFactory(DjangoModelFactory):
    class Meta:
        model = CardiologyEcho

    patient = factory.SubFactory(PatientFactory)
    performed_at = factory.LazyFunction(timezone.now)
    status = 'COMPLETED'


class DialysisSessionFactory(DjangoModelFactory):
    class Meta:
        model = DialysisSession

    patient = factory.SubFactory(PatientFactory)
    provider = factory.SubFactory(UserFactory, role=User.ROLE_NURSE)
    start_time = factory.LazyFunction(timezone.now)
    end_time = factory.LazyAttribute(lambda o: o.start_time + dt.timedelta(hours=4))
    status = 'COMPLETED'


class DialysisLabFactory(DjangoModelFactory):
    class Meta:
        model = DialysisLab

    patient = factory.SubFactory(PatientFactory)
    collected_at = factory.LazyFunction(timezone.now)


class DialysisStationFactory(DjangoModelFactory):
    class Meta:
        model = DialysisStation

    name = factory.Sequence(lambda n: f'Station {n}')


class SpecimenFactory(DjangoModelFactory):
    class Meta:
        model = Specimen

    barcode = factory.Sequence(lambda n: f'TEST{n:06d}')
    patient = factory.SubFactory(PatientFactory)
    specimen_type = 'BLOOD'
    collection_time = factory.LazyFunction(timezone.now)
    status = Specimen.STATUS_COLLECTED


@pytest.fixture(autouse=True)
def _clear_cache():
    # throttling counters and the dashboard live in the cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    def make(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client
    return make


@pytest.fixture
def admin_user(db):
    return UserFactory(username='admin', role=User.ROLE_ADMIN)


@pytest.fixture
def doctor(db):
    return UserFactory(username='doctor', role=User.ROLE_DOCTOR)


@pytest.fixture
def nurse(db):
    return UserFactory(username='nurse', role=User.ROLE_NURSE)


@pytest.fixture
def lab_tech(db):
    return UserFactory(username='labtech', role=User.ROLE_LAB_TECH)


@pytest.fixture
def receptionist(db):
    return UserFactory(username='reception', role=User.ROLE_RECEPTIONIST)


@pytest.fixture
def patient(db):
    return PatientFactory(first_name='Grace', last_name='Hopper')
