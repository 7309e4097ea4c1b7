from ..serializers import orthopedics as s
from ..services import orthopedics as svc
from .base import crud_views

fractures, fracture_detail = crud_views(svc.fractures, s.FractureSerializer)
joint_replacements, joint_replacement_detail = crud_views(svc.joint_replacements, s.JointReplacementSerializer)
physical_therapy, physical_therapy_detail = crud_views(svc.physical_therapy, s.PhysicalTherapyPlanSerializer)
