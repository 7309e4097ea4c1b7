from ..serializers import obgyn as s
from ..services import obgyn as svc
from .base import crud_views

pregnancies, pregnancy_detail = crud_views(svc.pregnancies, s.PregnancySerializer)
antenatal_visits, antenatal_visit_detail = crud_views(svc.antenatal_visits, s.AntenatalVisitSerializer)
deliveries, delivery_detail = crud_views(svc.deliveries, s.DeliverySerializer)
