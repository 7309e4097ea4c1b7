from ..serializers import pediatrics as s
from ..services import pediatrics as svc
from .base import crud_views

growth, growth_detail = crud_views(svc.growth, s.GrowthMeasurementSerializer)
vaccinations, vaccination_detail = crud_views(svc.vaccinations, s.VaccinationSerializer)
development, development_detail = crud_views(svc.development, s.DevelopmentalAssessmentSerializer)
