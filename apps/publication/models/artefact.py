from __future__ import annotations

import uuid

from django.db import models

from .list_type import ListType
from .sensitivity import Language, Sensitivity


class Artefact(models.Model):
    """
    One published version of a hearing list.

    A later ingestion for the same (location, list type, content date,
    language) supersedes the row in place rather than adding a new one.
    """

    artefact_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    location_id = models.CharField(max_length=64, db_index=True)
    list_type = models.ForeignKey(ListType, on_delete=models.PROTECT, related_name='artefacts')

    sensitivity = models.CharField(
        max_length=16,
        choices=Sensitivity.choices,
        default=Sensitivity.CLASSIFIED,
        db_index=True,
    )
    provenance = models.CharField(max_length=64, blank=True, help_text="Source system, kept for audit")
    language = models.CharField(max_length=16, choices=Language.choices, default=Language.ENGLISH)

    content_date = models.DateField()
    display_from = models.DateTimeField()
    display_to = models.DateTimeField(db_index=True)

    is_flat_file = models.BooleanField(default=False)
    payload = models.JSONField(null=True, blank=True)  # raw hearing list JSON

    last_received_date = models.DateTimeField(auto_now=True)
    superseded_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'publication_artefacts'
        constraints = [
            models.UniqueConstraint(
                fields=['location_id', 'list_type', 'content_date', 'language'],
                name='publication_artefact_version_unique',
            ),
        ]
        indexes = [
            models.Index(fields=['location_id', 'content_date'], name='pub_artefact_loc_date_idx'),
        ]
        ordering = ['-content_date']

    def __str__(self) -> str:  # pragma: no cover
        return f"Artefact<{self.artefact_id}:{self.sensitivity}>"
