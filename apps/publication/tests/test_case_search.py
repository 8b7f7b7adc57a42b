from django.test import TestCase

from apps.publication.services.artefact_search_queries import create_artefact_search
from apps.publication.services.case_search import (
    CaseSearchError,
    CaseSearchResult,
    search_by_case_name,
    search_by_case_reference,
)
from apps.publication.tests.helpers import make_artefact, make_list_type


class TestCaseSearch(TestCase):
    def setUp(self):
        self.artefact = make_artefact(make_list_type())
        self.row = create_artefact_search(self.artefact.artefact_id, "T20267001", "R v Hughes")

    def test_search_by_case_reference_trims_input(self):
        results = search_by_case_reference("  T20267001 ")
        self.assertEqual(results, [
            CaseSearchResult(
                id=self.row.id,
                artefact_id=str(self.artefact.artefact_id),
                case_number="T20267001",
                case_name="R v Hughes",
            )
        ])

    def test_search_by_case_name_is_partial(self):
        results = search_by_case_name("hughes")
        self.assertEqual([r.case_number for r in results], ["T20267001"])

    def test_no_match_returns_empty_list(self):
        self.assertEqual(search_by_case_reference("T00000000"), [])
        self.assertEqual(search_by_case_name("Nobody"), [])

    def test_blank_input_is_rejected(self):
        for blank in (None, "", "   "):
            with self.assertRaisesMessage(CaseSearchError, "Case reference is required"):
                search_by_case_reference(blank)
            with self.assertRaisesMessage(CaseSearchError, "Case name is required"):
                search_by_case_name(blank)

    def test_visible_artefacts_restrict_results(self):
        hidden = make_artefact(self.artefact.list_type, location_id="999")
        create_artefact_search(hidden.artefact_id, "T20267001", "R v Hughes")
        seen = []

        def only_first(artefact_ids):
            seen.append(set(artefact_ids))
            return [self.artefact.artefact_id]

        results = search_by_case_reference("T20267001", only_first)

        self.assertEqual([r.artefact_id for r in results], [str(self.artefact.artefact_id)])
        self.assertEqual(seen, [{self.artefact.artefact_id, hidden.artefact_id}])
        self.assertEqual(search_by_case_name("hughes", lambda ids: []), [])
