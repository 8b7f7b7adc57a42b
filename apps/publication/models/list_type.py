from django.db import models

from apps.accounts.models import UserProvenance


class ListType(models.Model):
    """
    Static configuration describing one kind of hearing list.

    `provenance` names the identity system whose verified users may read
    CLASSIFIED artefacts of this type.
    """

    name = models.CharField(max_length=128, unique=True)  # e.g. CIVIL_DAILY_CAUSE_LIST
    friendly_name = models.CharField(max_length=256, blank=True)
    welsh_friendly_name = models.CharField(max_length=256, blank=True)
    provenance = models.CharField(max_length=32, choices=UserProvenance.choices)
    is_non_strategic = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'publication_list_types'
        ordering = ['name']

    def __str__(self) -> str:  # pragma: no cover
        return f"ListType<{self.id}:{self.name}>"
