from clinic.models import EyeExam, FundusExam, VisualAcuityTest

from .base import ClinicalRecordSerializer


class EyeExamSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = EyeExam


class VisualAcuityTestSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = VisualAcuityTest


class FundusExamSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = FundusExam
