"""
Publication access decisions.

Three questions are answered for a (viewer, artefact) pair:

1. Metadata: may the viewer know the publication exists (title, court, date)?
2. Data: may the viewer read its content on admin-facing tooling?
3. Publication: may the viewer read it on public-facing pages?

Every function here is pure and fails closed: an unknown sensitivity is
treated as CLASSIFIED, and a CLASSIFIED artefact whose list type cannot be
resolved is never granted through provenance matching.

`viewer` is anything exposing `role` and `provenance` (a UserProfile or a User),
or None for an anonymous visitor.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Union

from apps.accounts.models import UserRole
from apps.publication.models import Artefact, ListType, Sensitivity

METADATA_ONLY_ROLES = (UserRole.INTERNAL_ADMIN_CTSC, UserRole.INTERNAL_ADMIN_LOCAL)

METADATA_ROLES = (
    UserRole.SYSTEM_ADMIN,
    UserRole.INTERNAL_ADMIN_CTSC,
    UserRole.INTERNAL_ADMIN_LOCAL,
    UserRole.VERIFIED,
)

ListTypeLookup = Union[Mapping[int, ListType], Iterable[ListType]]


def _role(viewer) -> Optional[str]:
    if viewer is None:
        return None
    return getattr(viewer, 'role', None)


def _is_system_admin(viewer) -> bool:
    return _role(viewer) == UserRole.SYSTEM_ADMIN


def _is_verified(viewer) -> bool:
    return _role(viewer) == UserRole.VERIFIED


def _provenance_matches(viewer, list_type: Optional[ListType]) -> bool:
    if list_type is None:
        return False
    viewer_provenance = getattr(viewer, 'provenance', None)
    if not viewer_provenance:
        return False
    return viewer_provenance == list_type.provenance


def can_access_publication_metadata(viewer, artefact: Artefact) -> bool:
    sensitivity = Sensitivity.parse(artefact.sensitivity)
    if sensitivity == Sensitivity.PUBLIC:
        return True
    return _role(viewer) in METADATA_ROLES


def can_access_publication(viewer, artefact: Artefact, list_type: Optional[ListType]) -> bool:
    sensitivity = Sensitivity.parse(artefact.sensitivity)

    if sensitivity == Sensitivity.PUBLIC:
        return True

    # SYSTEM_ADMIN sees everything, no provenance needed
    if _is_system_admin(viewer):
        return True

    # Anonymous, base public and internal admin viewers stop here
    if not _is_verified(viewer):
        return False

    if sensitivity == Sensitivity.PRIVATE:
        return True

    return _provenance_matches(viewer, list_type)


def can_access_publication_data(viewer, artefact: Artefact, list_type: Optional[ListType]) -> bool:
    sensitivity = Sensitivity.parse(artefact.sensitivity)

    # Internal admins get metadata only for anything beyond PUBLIC
    if _role(viewer) in METADATA_ONLY_ROLES and sensitivity != Sensitivity.PUBLIC:
        return False

    return can_access_publication(viewer, artefact, list_type)


def _index_list_types(list_types: ListTypeLookup) -> Mapping[int, ListType]:
    if isinstance(list_types, Mapping):
        return list_types
    return {lt.id: lt for lt in list_types}


def filter_accessible_publications(
    viewer,
    artefacts: Iterable[Artefact],
    list_types: ListTypeLookup,
) -> List[Artefact]:
    """
    Keep the artefacts the viewer may browse on public pages, in input order.

    An artefact whose list type is not in `list_types` is always dropped.
    """
    by_id = _index_list_types(list_types)
    accessible: List[Artefact] = []
    for artefact in artefacts:
        list_type = by_id.get(artefact.list_type_id)
        if list_type is None:
            continue
        if can_access_publication(viewer, artefact, list_type):
            accessible.append(artefact)
    return accessible


def filter_publications_for_summary(viewer, artefacts: Iterable[Artefact]) -> List[Artefact]:
    """Keep the artefacts whose existence the viewer may see (admin summaries)."""
    return [a for a in artefacts if can_access_publication_metadata(viewer, a)]
