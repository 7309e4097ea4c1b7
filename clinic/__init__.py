"""Clinical records application for the hospital management system.

This package contains the models, serializers, services, views and route
registrations for the patient registry, the specialty clinical modules and
laboratory specimen tracking.
"""
