from clinic.models import Colonoscopy, Endoscopy, LiverFunctionTest

from .base import RecordService


class EndoscopyService(RecordService):
    model = Endoscopy
    label = 'Endoscopy'
    date_field = 'procedure_date'
    search_fields = ('indication', 'lesions_description', 'recommendations')


class ColonoscopyService(RecordService):
    model = Colonoscopy
    label = 'Colonoscopy'
    date_field = 'procedure_date'
    search_fields = ('indication', 'lesions_description', 'polyp_histology')
    filters = {'prepQuality': 'prep_quality'}


class LiverFunctionService(RecordService):
    model = LiverFunctionTest
    label = 'Liver function test'
    date_field = 'test_date'
    search_fields = ('diagnosis', 'interpretation')


endoscopies = EndoscopyService()
colonoscopies = ColonoscopyService()
liver_function = LiverFunctionService()
