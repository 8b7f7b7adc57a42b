"""
Celery tasks for publication background work.

Search indexing runs after the ingestion transaction commits so the
ingestion response never waits on it, and an indexing failure can never roll
back the artefact write.
"""

from __future__ import annotations

import logging
from uuid import UUID

from celery import shared_task
from django.utils import timezone

logger = logging.getLogger(__name__)


@shared_task
def index_artefact_search(artefact_id: str, list_type_id: int) -> int:
    """
    Rebuild the case search index of one artefact from its stored payload.

    The payload is read from the database rather than passed through the
    broker, so the task always indexes the latest stored version.
    """
    from apps.publication.models import Artefact
    from apps.publication.services.artefact_search import ArtefactSearchIndexer

    artefact = Artefact.objects.filter(artefact_id=artefact_id).only('payload').first()
    if artefact is None:
        logger.warning(f"[Task] Artefact {artefact_id} no longer exists, skipping search indexing")
        return 0

    return ArtefactSearchIndexer().extract_and_store(artefact_id, list_type_id, artefact.payload)


def schedule_artefact_search_indexing(artefact_id: UUID | str, list_type_id: int) -> None:
    """Fire-and-forget: enqueue indexing, logging (never raising) if the broker rejects it."""
    try:
        index_artefact_search.delay(str(artefact_id), list_type_id)
    except Exception:
        logger.exception(f"[Task] Could not enqueue search indexing for artefact {artefact_id}")


@shared_task
def purge_expired_artefacts():
    """
    Periodic task removing artefacts whose display window has closed.
    Their search rows go with them (cascade). Runs hourly via Celery Beat.
    """
    from apps.publication.models import Artefact

    expired = Artefact.objects.filter(display_to__lt=timezone.now())
    count = expired.count()
    expired.delete()

    logger.info(f"[Task] Purged {count} expired artefacts")
    return {'deleted': count}
