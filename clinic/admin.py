"""
Django admin registrations.

Every model is reachable from ``/admin/``.  Clinical records share one
ModelAdmin; the registry, accounts and laboratory get their own.
"""

from django.contrib import admin

from . import models as m


@admin.register(m.User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('username', 'first_name', 'last_name', 'role', 'is_active', 'is_staff')
    list_filter = ('role', 'is_active')
    search_fields = ('username', 'first_name', 'last_name', 'email')


@admin.register(m.AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    list_display = ('action', 'user', 'object_type', 'object_id', 'created_at')
    list_filter = ('action', 'object_type')
    search_fields = ('object_id', 'user__username')
    readonly_fields = ('user', 'action', 'object_type', 'object_id', 'detail', 'created_at')


class MedicalHistoryInline(admin.TabularInline):
    model = m.MedicalHistory
    extra = 0


@admin.register(m.Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('mrn', 'first_name', 'last_name', 'date_of_birth', 'gender', 'is_active', 'created_at')
    list_filter = ('is_active', 'gender', 'blood_type')
    search_fields = ('mrn', 'first_name', 'last_name', 'phone', 'email')
    inlines = [MedicalHistoryInline]


@admin.register(m.Specimen)
class SpecimenAdmin(admin.ModelAdmin):
    list_display = ('barcode', 'patient', 'specimen_type', 'status', 'collection_time', 'received_time')
    list_filter = ('status', 'specimen_type')
    search_fields = ('barcode', 'patient__mrn', 'patient__last_name')


@admin.register(m.DialysisStation)
class DialysisStationAdmin(admin.ModelAdmin):
    list_display = ('name', 'room', 'machine_number', 'status', 'is_active')
    list_filter = ('status', 'is_active')


class ClinicalRecordAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient', 'provider', 'created_at')
    search_fields = ('patient__mrn', 'patient__first_name', 'patient__last_name')
    raw_id_fields = ('patient', 'provider')


CLINICAL_MODELS = (
    m.CardiologyVisit, m.CardiologyEcg, m.CardiologyEcho, m.CardiologyStressTest, m.CardiologyProcedure,
    m.CardiologyElectrophysiology, m.CardiologyHeartFailure,
    m.CardiologyDevice, m.CardiologyMedication, m.CardiologyLab,
    m.ChemotherapyCycle, m.RadiationCourse, m.CancerStaging, m.TumorBoardReview,
    m.NeurologyVisit, m.EegStudy, m.EmgStudy, m.NeuroImaging, m.SeizureEvent, m.StrokeEpisode,
    m.CognitiveAssessment,
    m.Pregnancy, m.Delivery,
    m.GrowthMeasurement, m.Vaccination, m.DevelopmentalAssessment,
    m.Endoscopy, m.Colonoscopy, m.LiverFunctionTest,
    m.Spirometry, m.Bronchoscopy, m.SleepStudy,
    m.Fracture, m.JointReplacement, m.PhysicalTherapyPlan,
    m.EyeExam, m.VisualAcuityTest, m.FundusExam,
    m.DialysisSession, m.DialysisPrescription, m.DialysisSchedule, m.DialysisLab, m.DialysisMedication,
)

for model in CLINICAL_MODELS:
    admin.site.register(model, ClinicalRecordAdmin)

admin.site.register(m.AntenatalVisit)
admin.site.register(m.DialysisFlowsheet)
