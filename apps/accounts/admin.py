from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import User


@admin.register(User)
class HearingListUserAdmin(UserAdmin):
    """Admin interface for accounts, exposing role and sign-in provenance."""
    list_display = ('username', 'email', 'role', 'provenance', 'is_active', 'date_joined')
    list_filter = ('role', 'provenance', 'is_active', 'is_staff')
    fieldsets = UserAdmin.fieldsets + (
        ('Publication access', {
            'fields': ('role', 'provenance')
        }),
    )
