from django.db import models

from .artefact import Artefact


class ArtefactSearch(models.Model):
    """
    Flat search index row: one case located inside one artefact's payload.

    Rows for an artefact are only ever replaced as a whole by the indexer.
    """

    artefact = models.ForeignKey(Artefact, on_delete=models.CASCADE, related_name='search_records')
    case_number = models.TextField(null=True, blank=True, db_index=True)
    case_name = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'publication_artefact_search'
        indexes = [
            models.Index(fields=['artefact', 'created_at'], name='pub_search_artefact_idx'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"ArtefactSearch<{self.artefact_id}:{self.case_number}>"
