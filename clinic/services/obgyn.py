from clinic.models import AntenatalVisit, Delivery, Pregnancy

from .base import RecordService


class PregnancyService(RecordService):
    model = Pregnancy
    label = 'Pregnancy'
    date_field = 'created_at'
    search_fields = ('risk_factors', 'pre_existing_conditions')


class AntenatalVisitService(RecordService):
    """Antenatal visits reach their patient through the pregnancy."""
    model = AntenatalVisit
    label = 'Antenatal visit'
    date_field = 'visit_date'
    patient_path = 'pregnancy__patient'
    provider_path = None
    search_fields = ('complaints', 'risk_assessment')
    filters = {'pregnancyId': 'pregnancy', 'trimester': 'trimester'}
    select_related = ('pregnancy__patient',)


class DeliveryService(RecordService):
    model = Delivery
    label = 'Delivery'
    date_field = 'delivery_date'
    search_fields = ('maternal_complications', 'anesthesia')
    filters = {'deliveryMode': 'delivery_mode'}


pregnancies = PregnancyService()
antenatal_visits = AntenatalVisitService()
deliveries = DeliveryService()
