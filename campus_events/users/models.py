from typing import ClassVar

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _

from .managers import UserManager


class User(AbstractUser):
    """
    Portal account for students, organizers and administrators.
    Each user holds exactly one role, fixed when the account is created.
    """

    class Role(models.TextChoices):
        STUDENT = "student", _("Student")
        ORGANIZER = "organizer", _("Organizer")
        ADMIN = "admin", _("Admin")

    # Email is the login identifier; first/last/username are not used.
    username = None  # type: ignore[assignment]
    first_name = None  # type: ignore[assignment]
    last_name = None  # type: ignore[assignment]
    email = models.EmailField(_("email address"), unique=True)
    name = models.CharField(_("Full Name"), max_length=255)
    role = models.CharField(
        _("Role"),
        max_length=20,
        choices=Role.choices,
        default=Role.STUDENT,
    )
    # Audit timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    objects: ClassVar[UserManager] = UserManager()

    def __str__(self) -> str:
        return f"{self.name} <{self.email}> ({self.role})"

    def save(self, *args, **kwargs):
        # Emails are compared case-insensitively everywhere
        if self.email:
            self.email = self.email.strip().lower()
        super().save(*args, **kwargs)
