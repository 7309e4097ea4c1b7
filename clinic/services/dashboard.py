"""
Front-page counts for the staff dashboard.
"""
from __future__ import annotations

from django.utils import timezone

from clinic.models import CardiologyVisit, DialysisSession, NeurologyVisit

from .base import date_range_q
from .patients import patients
from .specimens import specimens


def overview() -> dict:
    today = timezone.localdate()
    return {
        'patients': patients.stats(),
        'specimens': specimens.stats(),
        'today': {
            'cardiologyVisits': CardiologyVisit.objects.filter(date_range_q('visit_date', today, today)).count(),
            'dialysisSessions': DialysisSession.objects.filter(date_range_q('start_time', today, today)).count(),
            'neurologyVisits': NeurologyVisit.objects.filter(date_range_q('visit_date', today, today)).count(),
        },
    }
