from clinic.models import CancerStaging, ChemotherapyCycle, RadiationCourse, TumorBoardReview

from .base import RecordService


class ChemotherapyService(RecordService):
    model = ChemotherapyCycle
    label = 'Chemotherapy cycle'
    date_field = 'scheduled_date'
    search_fields = ('protocol_name', 'cancer_type', 'chemotherapy_agents')


class RadiationService(RecordService):
    model = RadiationCourse
    label = 'Radiation course'
    date_field = 'start_date'
    search_fields = ('cancer_type', 'treatment_site', 'technique')


class StagingService(RecordService):
    model = CancerStaging
    label = 'Cancer staging'
    date_field = 'staging_date'
    search_fields = ('cancer_type', 'histology')
    filters = {'overallStage': 'overall_stage'}


class TumorBoardService(RecordService):
    model = TumorBoardReview
    label = 'Tumor board review'
    date_field = 'meeting_date'
    search_fields = ('cancer_type', 'recommended_plan')


chemotherapy = ChemotherapyService()
radiation = RadiationService()
staging = StagingService()
tumor_boards = TumorBoardService()
