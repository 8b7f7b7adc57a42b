import pytest

from apps.accounts.models import UserRole
from apps.accounts.services.viewer import UserProfile
from apps.publication.models import Artefact, ListType
from apps.publication.services.authorisation import (
    can_access_publication,
    can_access_publication_data,
    can_access_publication_metadata,
    filter_accessible_publications,
    filter_publications_for_summary,
)

CFT_LIST = ListType(id=1, name="CIVIL_DAILY_CAUSE_LIST", provenance="CFT_IDAM")
CRIME_LIST = ListType(id=2, name="CROWN_DAILY_LIST", provenance="CRIME_IDAM")

SYSTEM_ADMIN = UserProfile(role=UserRole.SYSTEM_ADMIN, provenance="SSO")
CTSC_ADMIN = UserProfile(role=UserRole.INTERNAL_ADMIN_CTSC, provenance="SSO")
LOCAL_ADMIN = UserProfile(role=UserRole.INTERNAL_ADMIN_LOCAL, provenance="SSO")
CFT_USER = UserProfile(role=UserRole.VERIFIED, provenance="CFT_IDAM")
B2C_USER = UserProfile(role=UserRole.VERIFIED, provenance="B2C_IDAM")
CRIME_USER = UserProfile(role=UserRole.VERIFIED, provenance="CRIME_IDAM")
PUBLIC_USER = UserProfile(role=UserRole.PUBLIC)

ALL_VIEWERS = [None, SYSTEM_ADMIN, CTSC_ADMIN, LOCAL_ADMIN, CFT_USER, B2C_USER, CRIME_USER, PUBLIC_USER]


def artefact(sensitivity, list_type_id=1):
    return Artefact(sensitivity=sensitivity, list_type_id=list_type_id, location_id="240")


# --- can_access_publication (public pages) ---

@pytest.mark.parametrize("viewer", ALL_VIEWERS)
def test_public_is_visible_to_every_viewer(viewer):
    assert can_access_publication(viewer, artefact("PUBLIC"), CFT_LIST) is True
    assert can_access_publication(viewer, artefact("PUBLIC"), None) is True


@pytest.mark.parametrize("viewer,expected", [
    (None, False),
    (PUBLIC_USER, False),
    (CTSC_ADMIN, False),
    (LOCAL_ADMIN, False),
    (SYSTEM_ADMIN, True),
    (CFT_USER, True),
    (B2C_USER, True),
    (CRIME_USER, True),
])
def test_private_requires_verified_or_system_admin(viewer, expected):
    assert can_access_publication(viewer, artefact("PRIVATE"), CFT_LIST) is expected


@pytest.mark.parametrize("viewer,list_type,expected", [
    (CFT_USER, CFT_LIST, True),
    (B2C_USER, CFT_LIST, False),
    (CRIME_USER, CFT_LIST, False),
    (CRIME_USER, CRIME_LIST, True),
    (B2C_USER, CRIME_LIST, False),
    (SYSTEM_ADMIN, CRIME_LIST, True),
    (CTSC_ADMIN, CFT_LIST, False),
    (LOCAL_ADMIN, CFT_LIST, False),
    (PUBLIC_USER, CFT_LIST, False),
    (None, CFT_LIST, False),
])
def test_classified_requires_matching_provenance(viewer, list_type, expected):
    assert can_access_publication(viewer, artefact("CLASSIFIED"), list_type) is expected


def test_classified_without_list_type_is_denied_to_verified_users():
    assert can_access_publication(CFT_USER, artefact("CLASSIFIED"), None) is False


def test_verified_user_without_provenance_cannot_see_classified():
    viewer = UserProfile(role=UserRole.VERIFIED, provenance=None)
    assert can_access_publication(viewer, artefact("CLASSIFIED"), CFT_LIST) is False
    assert can_access_publication(viewer, artefact("PRIVATE"), CFT_LIST) is True


@pytest.mark.parametrize("sensitivity", [None, "", "UNKNOWN", "public"])
def test_missing_or_unknown_sensitivity_is_treated_as_classified(sensitivity):
    item = artefact(sensitivity)
    assert can_access_publication(None, item, CFT_LIST) is False
    assert can_access_publication(B2C_USER, item, CFT_LIST) is False
    assert can_access_publication(CFT_USER, item, CFT_LIST) is True


# --- can_access_publication_data (admin content) ---

@pytest.mark.parametrize("viewer", [CTSC_ADMIN, LOCAL_ADMIN, None, PUBLIC_USER])
def test_data_public_is_readable_by_everyone(viewer):
    assert can_access_publication_data(viewer, artefact("PUBLIC"), CFT_LIST) is True


@pytest.mark.parametrize("sensitivity", ["PRIVATE", "CLASSIFIED"])
@pytest.mark.parametrize("viewer", [CTSC_ADMIN, LOCAL_ADMIN])
def test_data_internal_admins_never_get_restricted_content(viewer, sensitivity):
    assert can_access_publication_data(viewer, artefact(sensitivity), CFT_LIST) is False


def test_data_internal_admin_with_matching_provenance_is_still_denied():
    admin = UserProfile(role=UserRole.INTERNAL_ADMIN_LOCAL, provenance="CFT_IDAM")
    assert can_access_publication_data(admin, artefact("CLASSIFIED"), CFT_LIST) is False


def test_data_private_and_classified_rules():
    assert can_access_publication_data(SYSTEM_ADMIN, artefact("PRIVATE"), CFT_LIST) is True
    assert can_access_publication_data(B2C_USER, artefact("PRIVATE"), CFT_LIST) is True
    assert can_access_publication_data(None, artefact("PRIVATE"), CFT_LIST) is False
    assert can_access_publication_data(SYSTEM_ADMIN, artefact("CLASSIFIED"), CFT_LIST) is True
    assert can_access_publication_data(CFT_USER, artefact("CLASSIFIED"), CFT_LIST) is True
    assert can_access_publication_data(B2C_USER, artefact("CLASSIFIED"), CFT_LIST) is False
    assert can_access_publication_data(CFT_USER, artefact("CLASSIFIED"), None) is False


# --- can_access_publication_metadata ---

@pytest.mark.parametrize("viewer", ALL_VIEWERS)
def test_metadata_public_is_visible_to_every_viewer(viewer):
    assert can_access_publication_metadata(viewer, artefact("PUBLIC")) is True


@pytest.mark.parametrize("sensitivity", ["PRIVATE", "CLASSIFIED", None])
@pytest.mark.parametrize("viewer,expected", [
    (None, False),
    (PUBLIC_USER, False),
    (SYSTEM_ADMIN, True),
    (CTSC_ADMIN, True),
    (LOCAL_ADMIN, True),
    (CFT_USER, True),
    (B2C_USER, True),
])
def test_metadata_for_restricted_items_ignores_provenance(viewer, expected, sensitivity):
    assert can_access_publication_metadata(viewer, artefact(sensitivity)) is expected


# --- filters ---

def test_filter_keeps_input_order_and_applies_public_page_rules():
    items = [
        artefact("CLASSIFIED", 2),
        artefact("PUBLIC", 1),
        artefact("PRIVATE", 1),
        artefact("CLASSIFIED", 1),
    ]
    list_types = [CFT_LIST, CRIME_LIST]

    assert filter_accessible_publications(None, items, list_types) == [items[1]]
    assert filter_accessible_publications(CFT_USER, items, list_types) == items[1:]
    assert filter_accessible_publications(CRIME_USER, items, list_types) == [items[0], items[1], items[2]]
    assert filter_accessible_publications(SYSTEM_ADMIN, items, list_types) == items
    assert filter_accessible_publications(LOCAL_ADMIN, items, list_types) == [items[1]]
    assert filter_accessible_publications(CTSC_ADMIN, items, list_types) == [items[1]]


def test_filter_accepts_id_keyed_mapping():
    items = [artefact("CLASSIFIED", 1)]
    assert filter_accessible_publications(CFT_USER, items, {1: CFT_LIST}) == items


def test_filter_drops_artefacts_with_unknown_list_type():
    items = [artefact("PUBLIC", 99), artefact("CLASSIFIED", 99)]
    assert filter_accessible_publications(SYSTEM_ADMIN, items, [CFT_LIST]) == []
    assert filter_accessible_publications(None, items, []) == []


def test_filter_handles_empty_input():
    assert filter_accessible_publications(CFT_USER, [], [CFT_LIST]) == []


def test_summary_filter_uses_metadata_rules():
    items = [artefact("PUBLIC"), artefact("PRIVATE"), artefact("CLASSIFIED")]
    assert filter_publications_for_summary(None, items) == [items[0]]
    assert filter_publications_for_summary(LOCAL_ADMIN, items) == items
    assert filter_publications_for_summary(PUBLIC_USER, items) == [items[0]]
