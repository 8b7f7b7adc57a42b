from __future__ import annotations

from django.db import models
from simple_history.models import HistoricalRecords

from apps.publication.models import ListType


class ListSearchConfig(models.Model):
    """
    JSON leaf keys holding the case number and case name for one list type.

    A blank field name means that dimension is not extracted.
    """

    list_type = models.OneToOneField(ListType, on_delete=models.CASCADE, related_name='search_config')
    case_number_field_name = models.CharField(max_length=100, blank=True, default='')
    case_name_field_name = models.CharField(max_length=100, blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Django simple-history for audit trail (tracks who/when for all changes)
    history = HistoricalRecords(table_name='list_search_config_history')

    class Meta:
        db_table = 'list_search_config'

    def __str__(self) -> str:  # pragma: no cover
        return f"ListSearchConfig<{self.list_type_id}:{self.case_number_field_name}/{self.case_name_field_name}>"
