from clinic.models import Fracture, JointReplacement, PhysicalTherapyPlan

from .base import RecordService


class FractureService(RecordService):
    model = Fracture
    label = 'Fracture'
    date_field = 'injury_date'
    search_fields = ('bone', 'location', 'classification')
    filters = {'fractureType': 'fracture_type'}


class JointReplacementService(RecordService):
    model = JointReplacement
    label = 'Joint replacement'
    date_field = 'surgery_date'
    search_fields = ('implant_manufacturer', 'implant_model', 'approach')
    filters = {'jointType': 'joint_type', 'side': 'side'}


class PhysicalTherapyService(RecordService):
    model = PhysicalTherapyPlan
    label = 'Physical therapy plan'
    date_field = 'referral_date'
    search_fields = ('diagnosis', 'treatment_goals')
    filters = {'currentStatus': 'current_status'}


fractures = FractureService()
joint_replacements = JointReplacementService()
physical_therapy = PhysicalTherapyService()
