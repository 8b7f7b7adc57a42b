"""
Artefact search indexing.

After an artefact is ingested, its JSON payload is scanned for case numbers
and case names using the field names configured for its list type, and the
results replace whatever was previously indexed for that artefact.

Indexing is best-effort: it never raises, so it cannot fail the ingestion that
triggered it. Every outcome is logged instead. The delete and inserts run in one
transaction, so readers see either the previous index or the new one.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol
from uuid import UUID

from django.db import transaction

from apps.list_search_config.services import config_service
from apps.publication.services import artefact_search_queries
from apps.publication.services.search_field_locator import locate_cases

logger = logging.getLogger(__name__)


class SearchConfigSource(Protocol):
    def get_config_for_list_type(self, list_type_id: int) -> Any: ...


class ArtefactSearchStore(Protocol):
    def delete_artefact_search_by_artefact_id(self, artefact_id: UUID | str) -> Any: ...

    def create_artefact_search(
        self,
        artefact_id: UUID | str,
        case_number: Optional[str],
        case_name: Optional[str],
    ) -> Any: ...


class ArtefactSearchIndexer:
    """
    Rebuilds the search index rows of a single artefact.

    Both collaborators are injectable; by default the list search config
    service and the ORM-backed search queries are used.
    """

    def __init__(
        self,
        config_source: Optional[SearchConfigSource] = None,
        store: Optional[ArtefactSearchStore] = None,
    ):
        self.config_source = config_source or config_service
        self.store = store or artefact_search_queries

    def extract_and_store(self, artefact_id: UUID | str, list_type_id: int, payload: Any) -> int:
        """
        Index `payload` for the artefact and return the number of rows written.

        Returns 0 without touching existing rows when the list type has no
        search config, the payload is not a JSON object or array, or no case
        data is found.
        """
        try:
            config = self.config_source.get_config_for_list_type(list_type_id)
            if config is None:
                logger.info(f"[ArtefactSearch] No config found for list type {list_type_id}")
                return 0

            if payload is None or not isinstance(payload, (dict, list)):
                logger.info(f"[ArtefactSearch] Invalid JSON payload for artefact {artefact_id}")
                return 0

            cases = locate_cases(
                payload,
                getattr(config, 'case_number_field_name', None),
                getattr(config, 'case_name_field_name', None),
            )
            if not cases:
                logger.info(f"[ArtefactSearch] No case data found in payload for artefact {artefact_id}")
                return 0

            # Full replace: a failed insert rolls back to the previous index
            with transaction.atomic():
                self.store.delete_artefact_search_by_artefact_id(artefact_id)
                for case in cases:
                    self.store.create_artefact_search(artefact_id, case.case_number, case.case_name)

            logger.info(
                f"[ArtefactSearch] Extracted {len(cases)} case record(s) for artefact {artefact_id}"
            )
            return len(cases)

        except Exception as e:
            logger.exception(f"[ArtefactSearch] Failed to extract/store for artefact {artefact_id}: {e}")
            return 0


def extract_and_store_artefact_search(artefact_id: UUID | str, list_type_id: int, payload: Any) -> None:
    ArtefactSearchIndexer().extract_and_store(artefact_id, list_type_id, payload)
