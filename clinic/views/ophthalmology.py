from ..serializers import ophthalmology as s
from ..services import ophthalmology as svc
from .base import crud_views

exams, exam_detail = crud_views(svc.exams, s.EyeExamSerializer)
visual_acuity, visual_acuity_detail = crud_views(svc.visual_acuity, s.VisualAcuityTestSerializer)
fundus, fundus_detail = crud_views(svc.fundus, s.FundusExamSerializer)
