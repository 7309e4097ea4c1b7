from ..serializers import oncology as s
from ..services import oncology as svc
from .base import crud_views

chemotherapy, chemotherapy_detail = crud_views(svc.chemotherapy, s.ChemotherapyCycleSerializer)
radiation, radiation_detail = crud_views(svc.radiation, s.RadiationCourseSerializer)
staging, staging_detail = crud_views(svc.staging, s.CancerStagingSerializer)
tumor_boards, tumor_board_detail = crud_views(svc.tumor_boards, s.TumorBoardReviewSerializer)
