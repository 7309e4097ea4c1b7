"""
URL mappings for the hospital backend API.

Every clinical record resource gets a collection route and a detail
route under ``/api/<module>/<resource>``.  Trailing slashes are omitted
to match the client.
"""
from django.urls import include, path

from . import auth_views
from .views import (
    cardiology,
    dashboard,
    dialysis,
    gastro,
    health,
    neurology,
    obgyn,
    oncology,
    ophthalmology,
    orthopedics,
    patients,
    pediatrics,
    pulmonology,
    specimens,
)


def resource(prefix, collection, detail):
    name = prefix.replace('/', '-')
    return [
        path(f'api/{prefix}', collection, name=name),
        path(f'api/{prefix}/<uuid:pk>', detail, name=f'{name}-detail'),
    ]


module_routes = [
    # Cardiology
    *resource('cardiology/visits', cardiology.visits, cardiology.visit_detail),
    *resource('cardiology/ecgs', cardiology.ecgs, cardiology.ecg_detail),
    *resource('cardiology/echos', cardiology.echos, cardiology.echo_detail),
    *resource('cardiology/stress-tests', cardiology.stress_tests, cardiology.stress_test_detail),
    *resource('cardiology/procedures', cardiology.procedures, cardiology.procedure_detail),
    *resource('cardiology/electrophysiology', cardiology.electrophysiology, cardiology.electrophysiology_detail),
    *resource('cardiology/heart-failure', cardiology.heart_failure, cardiology.heart_failure_detail),
    *resource('cardiology/devices', cardiology.devices, cardiology.device_detail),
    *resource('cardiology/medications', cardiology.medications, cardiology.medication_detail),
    *resource('cardiology/labs', cardiology.labs, cardiology.lab_detail),
    path('api/cardiology/reports/summary', cardiology.summary_report, name='cardiology-summary'),
    # Oncology
    *resource('oncology/chemotherapy', oncology.chemotherapy, oncology.chemotherapy_detail),
    *resource('oncology/radiation', oncology.radiation, oncology.radiation_detail),
    *resource('oncology/staging', oncology.staging, oncology.staging_detail),
    *resource('oncology/tumor-boards', oncology.tumor_boards, oncology.tumor_board_detail),
    # Neurology
    *resource('neurology/visits', neurology.visits, neurology.visit_detail),
    *resource('neurology/eegs', neurology.eegs, neurology.eeg_detail),
    *resource('neurology/emgs', neurology.emgs, neurology.emg_detail),
    *resource('neurology/imaging', neurology.imaging, neurology.imaging_detail),
    *resource('neurology/seizures', neurology.seizures, neurology.seizure_detail),
    *resource('neurology/strokes', neurology.strokes, neurology.stroke_detail),
    *resource('neurology/cognitive', neurology.cognitive, neurology.cognitive_detail),
    # OB/GYN
    *resource('obgyn/pregnancies', obgyn.pregnancies, obgyn.pregnancy_detail),
    *resource('obgyn/antenatal-visits', obgyn.antenatal_visits, obgyn.antenatal_visit_detail),
    *resource('obgyn/deliveries', obgyn.deliveries, obgyn.delivery_detail),
    # Pediatrics
    *resource('pediatrics/growth', pediatrics.growth, pediatrics.growth_detail),
    *resource('pediatrics/vaccinations', pediatrics.vaccinations, pediatrics.vaccination_detail),
    *resource('pediatrics/development', pediatrics.development, pediatrics.development_detail),
    # Gastroenterology
    *resource('gastro/endoscopies', gastro.endoscopies, gastro.endoscopy_detail),
    *resource('gastro/colonoscopies', gastro.colonoscopies, gastro.colonoscopy_detail),
    *resource('gastro/liver-function', gastro.liver_function, gastro.liver_function_detail),
    # Pulmonology
    *resource('pulmonology/spirometry', pulmonology.spirometry, pulmonology.spirometry_detail),
    *resource('pulmonology/bronchoscopies', pulmonology.bronchoscopies, pulmonology.bronchoscopy_detail),
    *resource('pulmonology/sleep-studies', pulmonology.sleep_studies, pulmonology.sleep_study_detail),
    # Orthopedics
    *resource('orthopedics/fractures', orthopedics.fractures, orthopedics.fracture_detail),
    *resource('orthopedics/joint-replacements', orthopedics.joint_replacements, orthopedics.joint_replacement_detail),
    *resource('orthopedics/physical-therapy', orthopedics.physical_therapy, orthopedics.physical_therapy_detail),
    # Ophthalmology
    *resource('ophthalmology/exams', ophthalmology.exams, ophthalmology.exam_detail),
    *resource('ophthalmology/visual-acuity', ophthalmology.visual_acuity, ophthalmology.visual_acuity_detail),
    *resource('ophthalmology/fundus', ophthalmology.fundus, ophthalmology.fundus_detail),
    # Dialysis
    *resource('dialysis/sessions', dialysis.sessions, dialysis.session_detail),
    *resource('dialysis/prescriptions', dialysis.prescriptions, dialysis.prescription_detail),
    *resource('dialysis/flowsheets', dialysis.flowsheets, dialysis.flowsheet_detail),
    *resource('dialysis/stations', dialysis.stations, dialysis.station_detail),
    *resource('dialysis/schedules', dialysis.schedules, dialysis.schedule_detail),
    *resource('dialysis/labs', dialysis.labs, dialysis.lab_detail),
    *resource('dialysis/medications', dialysis.medications, dialysis.medication_detail),
    path('api/dialysis/reports/summary', dialysis.summary_report, name='dialysis-summary'),
]

urlpatterns = [
    path('metrics', include('django_prometheus.urls')),
    path('healthz', health.healthz, name='healthz'),

    # Auth
    path('api/auth/login', auth_views.login_view, name='auth-login'),
    path('api/auth/refresh', auth_views.refresh_view, name='auth-refresh'),
    path('api/auth/logout', auth_views.logout_view, name='auth-logout'),
    path('api/auth/me', auth_views.me_view, name='auth-me'),
    path('api/providers', auth_views.providers_view, name='providers'),
    path('api/dashboard', dashboard.dashboard, name='dashboard'),

    # Patient registry
    path('api/patients', patients.patients, name='patients'),
    path('api/patients/stats', patients.patient_stats, name='patients-stats'),
    path('api/patients/<uuid:pk>', patients.patient_detail, name='patients-detail'),
    path('api/patients/<uuid:pk>/medical-history', patients.medical_history, name='patients-medical-history'),

    # Laboratory
    path('api/lab/specimens', specimens.specimens, name='lab-specimens'),
    path('api/lab/specimens/stats', specimens.specimen_stats, name='lab-specimens-stats'),
    path('api/lab/specimens/barcode/<str:barcode>', specimens.specimen_by_barcode, name='lab-specimens-barcode'),
    path('api/lab/specimens/<uuid:pk>', specimens.specimen_detail, name='lab-specimens-detail'),
    path('api/lab/specimens/<uuid:pk>/receive', specimens.receive_specimen, name='lab-specimens-receive'),
    path('api/lab/specimens/<uuid:pk>/reject', specimens.reject_specimen, name='lab-specimens-reject'),

    *module_routes,
]
