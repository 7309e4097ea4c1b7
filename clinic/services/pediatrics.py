from clinic.models import DevelopmentalAssessment, GrowthMeasurement, Vaccination

from .base import RecordService


def body_mass_index(weight_kg, height_cm):
    if not weight_kg or not height_cm:
        return None
    metres = height_cm / 100.0
    return round(weight_kg / (metres * metres), 1)


class GrowthService(RecordService):
    model = GrowthMeasurement
    label = 'Growth measurement'
    date_field = 'measurement_date'
    search_fields = ('nutritional_status',)

    def before_save(self, data, instance=None):
        if data.get('bmi') is None:
            weight = data.get('weight_kg', getattr(instance, 'weight_kg', None))
            height = data.get('height_cm', getattr(instance, 'height_cm', None))
            changed = instance is None or 'weight_kg' in data or 'height_cm' in data
            if changed and body_mass_index(weight, height) is not None:
                data['bmi'] = body_mass_index(weight, height)
        return data


class VaccinationService(RecordService):
    model = Vaccination
    label = 'Vaccination'
    date_field = 'date_given'
    search_fields = ('vaccine_name', 'vaccine_code', 'lot_number', 'manufacturer')
    filters = {'vaccineName': 'vaccine_name'}


class DevelopmentalService(RecordService):
    model = DevelopmentalAssessment
    label = 'Developmental assessment'
    date_field = 'assessment_date'
    search_fields = ('concerns_description', 'milestones_delayed')
    filters = {'concernsIdentified': 'concerns_identified'}


growth = GrowthService()
vaccinations = VaccinationService()
development = DevelopmentalService()
