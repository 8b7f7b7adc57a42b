from __future__ import annotations

from django.contrib.auth.models import AbstractUser
from django.db import models


class UserRole(models.TextChoices):
    SYSTEM_ADMIN = 'SYSTEM_ADMIN', 'System admin'
    INTERNAL_ADMIN_CTSC = 'INTERNAL_ADMIN_CTSC', 'CTSC admin'
    INTERNAL_ADMIN_LOCAL = 'INTERNAL_ADMIN_LOCAL', 'Local admin'
    VERIFIED = 'VERIFIED', 'Verified user'
    PUBLIC = 'PUBLIC', 'Public user'


class UserProvenance(models.TextChoices):
    """Identity system the user signed in through."""
    B2C_IDAM = 'B2C_IDAM', 'B2C'
    CFT_IDAM = 'CFT_IDAM', 'CFT IdAM'
    CRIME_IDAM = 'CRIME_IDAM', 'Crime IdAM'
    SSO = 'SSO', 'Single sign-on'


class User(AbstractUser):
    """
    Account used by both staff (admin roles) and members of the public.

    `provenance` only affects access decisions for VERIFIED users, where it must
    match a list type's provenance to unlock CLASSIFIED publications.
    """
    role = models.CharField(
        max_length=32,
        choices=UserRole.choices,
        default=UserRole.PUBLIC,
        db_index=True,
    )
    provenance = models.CharField(
        max_length=32,
        choices=UserProvenance.choices,
        blank=True,
        default='',
        help_text="Identity provider the user authenticated with",
    )

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self) -> str:
        return self.email if self.email else self.username
