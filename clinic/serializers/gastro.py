from clinic.models import Colonoscopy, Endoscopy, LiverFunctionTest

from .base import ClinicalRecordSerializer


class EndoscopySerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = Endoscopy


class ColonoscopySerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = Colonoscopy


class LiverFunctionTestSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = LiverFunctionTest
