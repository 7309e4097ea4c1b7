"""
Role based permission classes.

Reads are open to any authenticated account.  Writes are limited to the
roles listed on each class, and deletes additionally require a doctor or
an administrator.
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS

from .models import User

CLINICAL_WRITE_ROLES = {User.ROLE_ADMIN, User.ROLE_DOCTOR, User.ROLE_NURSE}
DELETE_ROLES = {User.ROLE_ADMIN, User.ROLE_DOCTOR}


class RoleWritePermission(BasePermission):
    write_roles: set[str] = CLINICAL_WRITE_ROLES
    message = 'Your role is not allowed to modify these records'

    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        if not (user and user.is_authenticated):
            return False
        if request.method in SAFE_METHODS:
            return True
        role = getattr(user, "role", None)
        if request.method == 'DELETE':
            return role in DELETE_ROLES
        return role in self.write_roles


class IsClinicalWriter(RoleWritePermission):
    """Admins, doctors and nurses may write clinical records."""
    write_roles = CLINICAL_WRITE_ROLES


class IsSpecimenWriter(RoleWritePermission):
    write_roles = CLINICAL_WRITE_ROLES | {User.ROLE_LAB_TECH}


class IsRegistryWriter(RoleWritePermission):
    """Reception staff may register and edit patients as well."""
    write_roles = CLINICAL_WRITE_ROLES | {User.ROLE_RECEPTIONIST}
