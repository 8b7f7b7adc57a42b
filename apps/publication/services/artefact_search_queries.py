from __future__ import annotations

from typing import Iterable, List, Optional, Set
from uuid import UUID

from django.conf import settings

from apps.publication.models import ArtefactSearch


def _result_limit() -> int:
    return getattr(settings, 'ARTEFACT_SEARCH_RESULT_LIMIT', 50)


def create_artefact_search(
    artefact_id: UUID | str,
    case_number: Optional[str],
    case_name: Optional[str],
) -> ArtefactSearch:
    return ArtefactSearch.objects.create(
        artefact_id=artefact_id,
        case_number=case_number,
        case_name=case_name,
    )


def delete_artefact_search_by_artefact_id(artefact_id: UUID | str) -> int:
    deleted, _ = ArtefactSearch.objects.filter(artefact_id=artefact_id).delete()
    return deleted


def find_artefact_search_by_artefact_id(artefact_id: UUID | str) -> Optional[ArtefactSearch]:
    return ArtefactSearch.objects.filter(artefact_id=artefact_id).order_by('id').first()


def find_all_artefact_search_by_artefact_id(artefact_id: UUID | str) -> List[ArtefactSearch]:
    return list(ArtefactSearch.objects.filter(artefact_id=artefact_id).order_by('id'))


def find_artefact_ids_by_case_number(case_number: str) -> Set[UUID]:
    return set(ArtefactSearch.objects.filter(case_number=case_number).values_list('artefact_id', flat=True))


def find_artefact_ids_by_case_name(case_name: str) -> Set[UUID]:
    return set(ArtefactSearch.objects.filter(case_name__icontains=case_name).values_list('artefact_id', flat=True))


def _newest_first(qs, artefact_ids: Optional[Iterable[UUID | str]]) -> List[ArtefactSearch]:
    # Restrict before slicing so the cap only counts rows the caller may return
    if artefact_ids is not None:
        qs = qs.filter(artefact_id__in=list(artefact_ids))
    return list(qs.order_by('-created_at', '-id')[:_result_limit()])


def find_by_case_number(
    case_number: str,
    artefact_ids: Optional[Iterable[UUID | str]] = None,
) -> List[ArtefactSearch]:
    """Exact case number match, newest first, optionally within `artefact_ids`."""
    return _newest_first(ArtefactSearch.objects.filter(case_number=case_number), artefact_ids)


def find_by_case_name(
    case_name: str,
    artefact_ids: Optional[Iterable[UUID | str]] = None,
) -> List[ArtefactSearch]:
    """Case-insensitive partial case name match, newest first, optionally within `artefact_ids`."""
    return _newest_first(ArtefactSearch.objects.filter(case_name__icontains=case_name), artefact_ids)
