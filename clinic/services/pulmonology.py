from clinic.models import Bronchoscopy, SleepStudy, Spirometry

from .base import RecordService


class SpirometryService(RecordService):
    model = Spirometry
    label = 'Spirometry'
    date_field = 'test_date'
    search_fields = ('indication', 'interpretation', 'diagnosis')
    filters = {'qualityGrade': 'quality_grade'}

    def before_save(self, data, instance=None):
        if data.get('fev1_fvc_ratio') is None and (instance is None or {'fev1', 'fvc'} & data.keys()):
            fev1 = data.get('fev1', getattr(instance, 'fev1', None))
            fvc = data.get('fvc', getattr(instance, 'fvc', None))
            if fev1 is not None and fvc:
                data['fev1_fvc_ratio'] = round(fev1 / fvc, 2)
        return data


class BronchoscopyService(RecordService):
    model = Bronchoscopy
    label = 'Bronchoscopy'
    date_field = 'procedure_date'
    search_fields = ('indication', 'abnormalities', 'complications')


class SleepStudyService(RecordService):
    model = SleepStudy
    label = 'Sleep study'
    date_field = 'study_date'
    search_fields = ('study_type',)
    filters = {'apneaSeverity': 'apnea_severity'}

    def before_save(self, data, instance=None):
        if not data.get('apnea_severity') and data.get('ahi') is not None:
            data['apnea_severity'] = SleepStudy.severity_for_ahi(data['ahi'])
        return data


spirometry = SpirometryService()
bronchoscopies = BronchoscopyService()
sleep_studies = SleepStudyService()
