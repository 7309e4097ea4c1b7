"""
URL configuration for the hospital management system backend.

The ``urlpatterns`` list routes URLs to views.  This module includes
the Django admin and the API routes provided by the clinic app.
OpenAPI documentation is exposed at ``/swagger/`` and ``/redoc/``.
"""
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

# API metadata for Swagger/OpenAPI documentation
api_info = openapi.Info(
    title="Hospital Management System API",
    default_version='v1',
    description="Clinical records for cardiology, oncology, neurology, OB/GYN, pediatrics, "
                "gastroenterology, pulmonology, orthopedics, ophthalmology, dialysis, "
                "laboratory specimens and the patient registry.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('clinic.routers')),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
]
