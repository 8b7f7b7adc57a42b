from django.contrib import admin

from .models import Artefact, ArtefactSearch, ListType


@admin.register(ListType)
class ListTypeAdmin(admin.ModelAdmin):
    """Admin interface for list type configuration."""
    list_display = ('id', 'name', 'friendly_name', 'provenance', 'is_non_strategic')
    list_filter = ('provenance', 'is_non_strategic')
    search_fields = ('name', 'friendly_name', 'welsh_friendly_name')


class ArtefactSearchInline(admin.TabularInline):
    model = ArtefactSearch
    extra = 0
    readonly_fields = ('case_number', 'case_name', 'created_at')
    can_delete = False


@admin.register(Artefact)
class ArtefactAdmin(admin.ModelAdmin):
    """Admin interface for published artefacts. Payloads are read-only once published."""
    list_display = ('artefact_id', 'location_id', 'list_type', 'sensitivity', 'provenance', 'content_date', 'display_to')
    list_filter = ('sensitivity', 'provenance', 'language', 'list_type')
    search_fields = ('artefact_id', 'location_id')
    readonly_fields = ('artefact_id', 'payload', 'last_received_date', 'superseded_count', 'created_at')
    date_hierarchy = 'content_date'
    inlines = [ArtefactSearchInline]


@admin.register(ArtefactSearch)
class ArtefactSearchAdmin(admin.ModelAdmin):
    list_display = ('artefact', 'case_number', 'case_name', 'created_at')
    search_fields = ('case_number', 'case_name')
