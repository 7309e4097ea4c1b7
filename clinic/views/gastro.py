from ..serializers import gastro as s
from ..services import gastro as svc
from .base import crud_views

endoscopies, endoscopy_detail = crud_views(svc.endoscopies, s.EndoscopySerializer)
colonoscopies, colonoscopy_detail = crud_views(svc.colonoscopies, s.ColonoscopySerializer)
liver_function, liver_function_detail = crud_views(svc.liver_function, s.LiverFunctionTestSerializer)
