from clinic.models import EyeExam, FundusExam, VisualAcuityTest

from .base import RecordService


class EyeExamService(RecordService):
    model = EyeExam
    label = 'Eye exam'
    date_field = 'exam_date'
    search_fields = ('chief_complaint', 'diagnosis')


class VisualAcuityService(RecordService):
    model = VisualAcuityTest
    label = 'Visual acuity test'
    date_field = 'test_date'
    search_fields = ('chart_type', 'interpretation')


class FundusService(RecordService):
    model = FundusExam
    label = 'Fundus exam'
    date_field = 'exam_date'
    search_fields = ('impression',)
    filters = {'retinopathyGrade': 'retinopathy_grade'}


exams = EyeExamService()
visual_acuity = VisualAcuityService()
fundus = FundusService()
