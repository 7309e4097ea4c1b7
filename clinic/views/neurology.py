from ..serializers import neurology as s
from ..services import neurology as svc
from .base import crud_views

visits, visit_detail = crud_views(svc.visits, s.NeurologyVisitSerializer)
eegs, eeg_detail = crud_views(svc.eegs, s.EegStudySerializer)
emgs, emg_detail = crud_views(svc.emgs, s.EmgStudySerializer)
imaging, imaging_detail = crud_views(svc.imaging, s.NeuroImagingSerializer)
seizures, seizure_detail = crud_views(svc.seizures, s.SeizureEventSerializer)
strokes, stroke_detail = crud_views(svc.strokes, s.StrokeEpisodeSerializer)
cognitive, cognitive_detail = crud_views(svc.cognitive, s.CognitiveAssessmentSerializer)
