from ..serializers import pulmonology as s
from ..services import pulmonology as svc
from .base import crud_views

spirometry, spirometry_detail = crud_views(svc.spirometry, s.SpirometrySerializer)
bronchoscopies, bronchoscopy_detail = crud_views(svc.bronchoscopies, s.BronchoscopySerializer)
sleep_studies, sleep_study_detail = crud_views(svc.sleep_studies, s.SleepStudySerializer)
