"""
Management command to populate the database with development data.

Records are created through the services so MRNs, barcodes and audit
entries look exactly like those produced by the API.
"""
import random
from datetime import date, timedelta

from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from clinic.models import DialysisStation, Specimen, User
from clinic.services import cardiology, dialysis, neurology, oncology, pediatrics
from clinic.services.patients import patients
from clinic.services.specimens import specimens

CLINICIANS = [
    {'username': 'dr.reyes', 'first_name': 'Daniel', 'last_name': 'Reyes', 'role': User.ROLE_DOCTOR},
    {'username': 'dr.osei', 'first_name': 'Ama', 'last_name': 'Osei', 'role': User.ROLE_DOCTOR},
    {'username': 'nurse.kim', 'first_name': 'Nora', 'last_name': 'Kim', 'role': User.ROLE_NURSE},
]
LAB_TECH = {'username': 'lab.patel', 'first_name': 'Liam', 'last_name': 'Patel', 'role': User.ROLE_LAB_TECH}

FIRST_NAMES = ['James', 'Maria', 'Chen', 'Fatima', 'Oliver', 'Priya', 'Lucas', 'Amara', 'Noah', 'Sofia']
LAST_NAMES = ['Smith', 'Garcia', 'Wang', 'Hassan', 'Brown', 'Sharma', 'Silva', 'Okafor', 'Miller', 'Rossi']


class Command(BaseCommand):
    help = 'Populate database with development data'

    def add_arguments(self, parser):
        parser.add_argument('--patients', type=int, default=10)
        parser.add_argument('--seed', type=int, default=None)

    @transaction.atomic
    def handle(self, *args, **options):
        rng = random.Random(options['seed'])
        self.stdout.write('Creating development data...')

        clinicians = [self.ensure_user(data) for data in CLINICIANS]
        lab_tech = self.ensure_user(LAB_TECH)
        people = self.create_patients(rng, options['patients'], clinicians[0])

        self.create_cardiology(rng, people, clinicians)
        self.create_neurology(rng, people, clinicians)
        self.create_oncology(rng, people, clinicians)
        self.create_pediatrics(rng, people, clinicians)
        self.create_dialysis(rng, people, clinicians)
        self.create_specimens(rng, people, lab_tech)

        self.stdout.write(self.style.SUCCESS('Development data created.'))

    def ensure_user(self, data):
        user, created = User.objects.get_or_create(
            username=data['username'],
            defaults={**data, 'password': make_password('Hms-dev-123'), 'is_active': True},
        )
        if created:
            self.stdout.write(f'Created user: {user}')
        return user

    def create_patients(self, rng, count, actor):
        created = []
        for _ in range(count):
            dob = date.today() - timedelta(days=rng.randint(2 * 365, 85 * 365))
            created.append(patients.create(actor, {
                'first_name': rng.choice(FIRST_NAMES),
                'last_name': rng.choice(LAST_NAMES),
                'date_of_birth': dob,
                'gender': rng.choice(['MALE', 'FEMALE']),
                'phone': f'555{rng.randint(1000000, 9999999)}',
                'allergies': rng.sample(['Penicillin', 'Latex', 'Peanuts'], rng.randint(0, 2)),
            }))
        self.stdout.write(f'Created {len(created)} patients')
        return created

    def create_cardiology(self, rng, people, clinicians):
        now = timezone.now()
        for patient in people[:5]:
            doctor = rng.choice(clinicians)
            visit = cardiology.visits.create(doctor, {
                'patient': patient, 'provider': doctor, 'visit_date': now - timedelta(days=rng.randint(0, 30)),
                'status': 'COMPLETED', 'reason': 'Chest pain',
            })
            cardiology.ecgs.create(doctor, {
                'patient': patient, 'provider': doctor, 'visit': visit, 'recorded_at': visit.visit_date,
                'status': 'COMPLETED', 'rhythm': 'Sinus rhythm', 'heart_rate': rng.randint(55, 110),
            })
            cardiology.echos.create(doctor, {
                'patient': patient, 'provider': doctor, 'visit': visit, 'performed_at': visit.visit_date,
                'status': 'COMPLETED', 'lvef': rng.randint(30, 70),
            })
        self.stdout.write('Created cardiology records')

    def create_neurology(self, rng, people, clinicians):
        now = timezone.now()
        for patient in people[2:6]:
            doctor = rng.choice(clinicians)
            neurology.visits.create(doctor, {
                'patient': patient, 'provider': doctor, 'visit_date': now - timedelta(days=rng.randint(0, 14)),
                'status': 'COMPLETED', 'gcs_score': rng.randint(13, 15),
            })
        self.stdout.write('Created neurology records')

    def create_oncology(self, rng, people, clinicians):
        now = timezone.now()
        for patient in people[4:7]:
            doctor = rng.choice(clinicians)
            total = rng.choice([4, 6, 8])
            oncology.chemotherapy.create(doctor, {
                'patient': patient, 'provider': doctor, 'protocol_name': 'FOLFOX', 'cancer_type': 'Colorectal',
                'cycle_number': rng.randint(1, total), 'total_cycles': total,
                'scheduled_date': now + timedelta(days=rng.randint(1, 21)),
            })
        self.stdout.write('Created oncology records')

    def create_pediatrics(self, rng, people, clinicians):
        now = timezone.now()
        for patient in people[:3]:
            nurse = clinicians[-1]
            pediatrics.growth.create(nurse, {
                'patient': patient, 'provider': nurse, 'measurement_date': now,
                'weight_kg': round(rng.uniform(8, 40), 1), 'height_cm': round(rng.uniform(70, 150), 1),
            })
        self.stdout.write('Created pediatrics records')

    def create_dialysis(self, rng, people, clinicians):
        for n in range(1, 4):
            DialysisStation.objects.get_or_create(name=f'Station {n}', defaults={'room': 'Dialysis unit A'})
        now = timezone.now()
        for patient in people[6:9]:
            nurse = clinicians[-1]
            start = now - timedelta(hours=rng.randint(0, 72))
            dialysis.sessions.create(nurse, {
                'patient': patient, 'provider': nurse, 'start_time': start,
                'end_time': start + timedelta(minutes=rng.choice([180, 210, 240])), 'status': 'COMPLETED',
            })
        self.stdout.write('Created dialysis records')

    def create_specimens(self, rng, people, lab_tech):
        types = [code for code, _ in Specimen.TYPE_CHOICES]
        for patient in people:
            specimen = specimens.create(lab_tech, {
                'patient': patient, 'specimen_type': rng.choice(types), 'collection_site': 'Left arm',
                'volume_collected': round(rng.uniform(1, 10), 1),
            })
            if rng.random() < 0.5:
                specimens.receive(lab_tech, specimen, {'storage_location': f'Fridge {rng.randint(1, 4)}'})
        self.stdout.write(f'Created {len(people)} specimens')
