from django import forms
from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from .models import ListSearchConfig
from .services.config_service import CASE_NAME_LABEL, CASE_NUMBER_LABEL, validate_field_name


class ListSearchConfigForm(forms.ModelForm):
    class Meta:
        model = ListSearchConfig
        fields = ['list_type', 'case_number_field_name', 'case_name_field_name']

    def clean(self):
        cleaned = super().clean()
        case_number = (cleaned.get('case_number_field_name') or '').strip()
        case_name = (cleaned.get('case_name_field_name') or '').strip()
        if not case_number and not case_name:
            raise forms.ValidationError("Enter at least one field name")
        for field_name, value, label in (
            ('case_number_field_name', case_number, CASE_NUMBER_LABEL),
            ('case_name_field_name', case_name, CASE_NAME_LABEL),
        ):
            error = validate_field_name(value, label)
            if error:
                self.add_error(field_name, error.message)
            cleaned[field_name] = value
        return cleaned


@admin.register(ListSearchConfig)
class ListSearchConfigAdmin(SimpleHistoryAdmin):
    """Admin interface for case search field configuration."""
    form = ListSearchConfigForm
    list_display = ('list_type', 'case_number_field_name', 'case_name_field_name', 'updated_at')
    search_fields = ('list_type__name', 'case_number_field_name', 'case_name_field_name')
    readonly_fields = ('created_at', 'updated_at')
