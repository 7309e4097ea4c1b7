from clinic.models import (
    CognitiveAssessment,
    EegStudy,
    EmgStudy,
    NeuroImaging,
    NeurologyVisit,
    SeizureEvent,
    StrokeEpisode,
)

from .base import RecordService


class VisitService(RecordService):
    model = NeurologyVisit
    label = 'Neurology visit'
    date_field = 'visit_date'
    search_fields = ('reason', 'diagnosis', 'symptoms')


class EegService(RecordService):
    model = EegStudy
    label = 'EEG'
    date_field = 'recorded_at'
    search_fields = ('indication', 'interpretation')
    filters = {'visitId': 'visit'}


class EmgService(RecordService):
    model = EmgStudy
    label = 'EMG'
    date_field = 'performed_at'
    search_fields = ('indication', 'interpretation', 'muscles_tested')
    filters = {'visitId': 'visit'}


class ImagingService(RecordService):
    model = NeuroImaging
    label = 'Neuro imaging'
    date_field = 'performed_at'
    search_fields = ('imaging_type', 'indication', 'impression')
    filters = {'visitId': 'visit', 'imagingType': 'imaging_type'}


class SeizureService(RecordService):
    model = SeizureEvent
    label = 'Seizure event'
    date_field = 'event_time'
    search_fields = ('triggers', 'aura_description')
    filters = {'seizureType': 'seizure_type'}


class StrokeService(RecordService):
    model = StrokeEpisode
    label = 'Stroke record'
    date_field = 'onset_time'
    search_fields = ('location', 'complications')
    filters = {'strokeType': 'stroke_type', 'severity': 'severity'}


class CognitiveService(RecordService):
    model = CognitiveAssessment
    label = 'Cognitive assessment'
    date_field = 'assessment_date'
    search_fields = ('diagnosis', 'overall_impression')


visits = VisitService()
eegs = EegService()
emgs = EmgService()
imaging = ImagingService()
seizures = SeizureService()
strokes = StrokeService()
cognitive = CognitiveService()
