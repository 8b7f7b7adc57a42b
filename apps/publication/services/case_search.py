from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Set
from uuid import UUID

from apps.publication.services.artefact_search_queries import (
    find_artefact_ids_by_case_name,
    find_artefact_ids_by_case_number,
    find_by_case_name,
    find_by_case_number,
)

# Given the ids of artefacts holding a hit, return the ones the caller may see
VisibleArtefacts = Callable[[Set[UUID]], Iterable[UUID]]


class CaseSearchError(ValueError):
    """Raised when a case search is attempted with blank input."""


@dataclass(frozen=True)
class CaseSearchResult:
    id: int
    artefact_id: str
    case_number: Optional[str]
    case_name: Optional[str]


def _to_results(rows) -> List[CaseSearchResult]:
    return [
        CaseSearchResult(
            id=row.id,
            artefact_id=str(row.artefact_id),
            case_number=row.case_number,
            case_name=row.case_name,
        )
        for row in rows
    ]


def search_by_case_name(
    case_name: Optional[str],
    visible_artefacts: Optional[VisibleArtefacts] = None,
) -> List[CaseSearchResult]:
    term = (case_name or '').strip()
    if not term:
        raise CaseSearchError("Case name is required")

    artefact_ids = None
    if visible_artefacts is not None:
        artefact_ids = visible_artefacts(find_artefact_ids_by_case_name(term))
    return _to_results(find_by_case_name(term, artefact_ids))


def search_by_case_reference(
    case_reference: Optional[str],
    visible_artefacts: Optional[VisibleArtefacts] = None,
) -> List[CaseSearchResult]:
    """
    Exact case number search, newest first.

    With `visible_artefacts`, hits outside the visible artefacts are dropped
    before the result cap is applied.
    """
    term = (case_reference or '').strip()
    if not term:
        raise CaseSearchError("Case reference is required")

    artefact_ids = None
    if visible_artefacts is not None:
        artefact_ids = visible_artefacts(find_artefact_ids_by_case_number(term))
    return _to_results(find_by_case_number(term, artefact_ids))
