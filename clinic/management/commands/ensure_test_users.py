from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand

from clinic.models import User

DEFAULT_PASSWORD = "Hms-dev-123"

TEST_SET = [
    ("admin1", User.ROLE_ADMIN, "Alice", "Admin"),
    ("doctor1", User.ROLE_DOCTOR, "Daniel", "Reyes"),
    ("nurse1", User.ROLE_NURSE, "Nora", "Kim"),
    ("labtech1", User.ROLE_LAB_TECH, "Liam", "Patel"),
    ("reception1", User.ROLE_RECEPTIONIST, "Rita", "Owens"),
]


class Command(BaseCommand):
    help = "Ensure one development user per role exists with a known password (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument("--password", default=DEFAULT_PASSWORD)

    def handle(self, *args, **opts):
        password = make_password(opts["password"])
        for username, role, first, last in TEST_SET:
            u, created = User.objects.get_or_create(
                username=username,
                defaults={
                    "role": role,
                    "first_name": first,
                    "last_name": last,
                    "password": password,
                    "is_active": True,
                    "is_staff": role == User.ROLE_ADMIN,
                    "is_superuser": role == User.ROLE_ADMIN,
                },
            )
            if not created:
                # reset password, role and activation
                u.password = password
                u.role = role
                u.is_active = True
                u.save(update_fields=["password", "role", "is_active"])
            self.stdout.write(self.style.SUCCESS(f"ok: {username} ({role})"))
        self.stdout.write(self.style.SUCCESS("All test users ensured."))
