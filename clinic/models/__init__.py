from .accounts import AuditEvent, User
from .base import ClinicalRecord, TimeStampedModel
from .cardiology import (
    CardiologyDevice,
    CardiologyEcg,
    CardiologyEcho,
    CardiologyElectrophysiology,
    CardiologyHeartFailure,
    CardiologyLab,
    CardiologyMedication,
    CardiologyProcedure,
    CardiologyStressTest,
    CardiologyVisit,
)
from .dialysis import (
    DialysisFlowsheet,
    DialysisLab,
    DialysisMedication,
    DialysisPrescription,
    DialysisSchedule,
    DialysisSession,
    DialysisStation,
)
from .gastro import Colonoscopy, Endoscopy, LiverFunctionTest
from .laboratory import Specimen
from .neurology import (
    CognitiveAssessment,
    EegStudy,
    EmgStudy,
    NeuroImaging,
    NeurologyVisit,
    SeizureEvent,
    StrokeEpisode,
)
from .obgyn import AntenatalVisit, Delivery, Pregnancy
from .oncology import CancerStaging, ChemotherapyCycle, RadiationCourse, TumorBoardReview
from .ophthalmology import EyeExam, FundusExam, VisualAcuityTest
from .orthopedics import Fracture, JointReplacement, PhysicalTherapyPlan
from .pediatrics import DevelopmentalAssessment, GrowthMeasurement, Vaccination
from .pulmonology import Bronchoscopy, SleepStudy, Spirometry
from .registry import MedicalHistory, Patient

__all__ = [
    'AntenatalVisit', 'AuditEvent', 'Bronchoscopy', 'CancerStaging', 'CardiologyDevice', 'CardiologyEcg',
    'CardiologyEcho', 'CardiologyElectrophysiology', 'CardiologyHeartFailure', 'CardiologyLab',
    'CardiologyMedication', 'CardiologyProcedure', 'CardiologyStressTest', 'CardiologyVisit', 'ChemotherapyCycle',
    'ClinicalRecord', 'CognitiveAssessment', 'Colonoscopy', 'Delivery',
    'DevelopmentalAssessment', 'DialysisFlowsheet', 'DialysisLab', 'DialysisMedication', 'DialysisPrescription',
    'DialysisSchedule', 'DialysisSession', 'DialysisStation', 'EegStudy', 'EmgStudy', 'Endoscopy', 'EyeExam',
    'Fracture', 'FundusExam', 'GrowthMeasurement', 'JointReplacement', 'LiverFunctionTest', 'MedicalHistory',
    'NeuroImaging', 'NeurologyVisit', 'Patient', 'PhysicalTherapyPlan', 'Pregnancy', 'RadiationCourse',
    'SeizureEvent', 'SleepStudy', 'Specimen', 'Spirometry', 'StrokeEpisode', 'TimeStampedModel',
    'TumorBoardReview', 'User', 'Vaccination', 'VisualAcuityTest',
]
