from rest_framework import serializers

from clinic.models import CancerStaging, ChemotherapyCycle, RadiationCourse, TumorBoardReview

from .base import ClinicalRecordSerializer


class ChemotherapyCycleSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = ChemotherapyCycle
        extra_kwargs = {
            'cycle_number': {'min_value': 1},
            'total_cycles': {'min_value': 1},
        }

    def validate(self, attrs):
        attrs = super().validate(attrs)
        cycle, total = self.current(attrs, 'cycle_number'), self.current(attrs, 'total_cycles')
        if cycle and total and cycle > total:
            raise serializers.ValidationError({'cycleNumber': 'Cycle number cannot exceed total cycles'})
        return attrs


class RadiationCourseSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = RadiationCourse
        extra_kwargs = {
            'total_dose_gy': {'min_value': 0},
            'dose_per_fraction': {'min_value': 0},
            'fractions': {'min_value': 1},
        }

    def validate(self, attrs):
        attrs = super().validate(attrs)
        number, fractions = self.current(attrs, 'fraction_number'), self.current(attrs, 'fractions')
        if number and fractions and number > fractions:
            raise serializers.ValidationError({'fractionNumber': 'Fraction number cannot exceed planned fractions'})
        return attrs


class CancerStagingSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = CancerStaging


class TumorBoardReviewSerializer(ClinicalRecordSerializer):
    class Meta(ClinicalRecordSerializer.Meta):
        model = TumorBoardReview
