"""
Artefact publication.

Writes (or supersedes) an artefact and hands search indexing off to a
background task once the write has committed.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional, Tuple

from django.db import transaction
from django.db.models import F

from apps.publication.models import Artefact, Language, ListType, Provenance, Sensitivity
from apps.publication.tasks import schedule_artefact_search_indexing

logger = logging.getLogger(__name__)


def publish_artefact(
    *,
    location_id: str,
    list_type: ListType,
    content_date: date,
    display_from: datetime,
    display_to: datetime,
    sensitivity: Optional[str] = None,
    language: str = Language.ENGLISH,
    provenance: Optional[str] = None,
    payload: Any = None,
    is_flat_file: bool = False,
) -> Tuple[Artefact, bool]:
    """
    Create an artefact, or supersede the existing one for the same location,
    list type, content date and language.

    Returns (artefact, created). Indexing is scheduled for JSON artefacts only.
    """
    fields = {
        'sensitivity': Sensitivity.parse(sensitivity),
        'display_from': display_from,
        'display_to': display_to,
        'provenance': Provenance.normalise(provenance),
        'payload': payload,
        'is_flat_file': is_flat_file,
    }

    with transaction.atomic():
        existing = (
            Artefact.objects
            .select_for_update()
            .filter(
                location_id=location_id,
                list_type=list_type,
                content_date=content_date,
                language=language,
            )
            .first()
        )
        if existing:
            for name, value in fields.items():
                setattr(existing, name, value)
            existing.superseded_count = F('superseded_count') + 1
            existing.save()
            existing.refresh_from_db()
            artefact, created = existing, False
        else:
            artefact = Artefact.objects.create(
                location_id=location_id,
                list_type=list_type,
                content_date=content_date,
                language=language,
                **fields,
            )
            created = True

        if not is_flat_file:
            artefact_id, list_type_id = artefact.artefact_id, list_type.id
            transaction.on_commit(lambda: schedule_artefact_search_indexing(artefact_id, list_type_id))

    logger.info(
        f"[Ingestion] {'Created' if created else 'Superseded'} artefact {artefact.artefact_id} "
        f"(location {location_id}, list type {list_type.id}, sensitivity {artefact.sensitivity})"
    )
    return artefact, created
