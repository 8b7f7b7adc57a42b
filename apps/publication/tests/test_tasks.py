from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone as dt_timezone
from unittest.mock import patch

from django.test import TestCase

from apps.list_search_config.models import ListSearchConfig
from apps.publication.models import Artefact, ArtefactSearch
from apps.publication.tasks import index_artefact_search, purge_expired_artefacts, schedule_artefact_search_indexing
from apps.publication.tests.helpers import civil_cause_list, make_artefact, make_list_type


class TestIndexArtefactSearchTask(TestCase):
    def setUp(self):
        self.list_type = make_list_type()
        ListSearchConfig.objects.create(list_type=self.list_type, case_number_field_name="caseNumber")

    def test_indexes_stored_payload(self):
        artefact = make_artefact(self.list_type, payload=civil_cause_list(("1001", "A"), ("1002", "B")))

        written = index_artefact_search(str(artefact.artefact_id), self.list_type.id)

        self.assertEqual(written, 2)
        self.assertEqual(
            sorted(ArtefactSearch.objects.filter(artefact=artefact).values_list("case_number", flat=True)),
            ["1001", "1002"],
        )

    def test_missing_artefact_is_skipped(self):
        self.assertEqual(index_artefact_search(str(uuid.uuid4()), self.list_type.id), 0)

    def test_schedule_swallows_broker_errors(self):
        with patch("apps.publication.tasks.index_artefact_search.delay", side_effect=ConnectionError("broker down")):
            schedule_artefact_search_indexing(uuid.uuid4(), self.list_type.id)

    def test_schedule_sends_string_id(self):
        artefact_id = uuid.uuid4()
        with patch("apps.publication.tasks.index_artefact_search.delay") as delay:
            schedule_artefact_search_indexing(artefact_id, self.list_type.id)
        delay.assert_called_once_with(str(artefact_id), self.list_type.id)


class TestPurgeExpiredArtefacts(TestCase):
    def test_removes_only_expired_artefacts_and_their_search_rows(self):
        list_type = make_list_type()
        now = datetime.now(dt_timezone.utc)
        expired = make_artefact(list_type, display_from=now - timedelta(days=3), display_to=now - timedelta(days=1))
        current = make_artefact(list_type, location_id="999")
        ArtefactSearch.objects.create(artefact=expired, case_number="OLD")

        result = purge_expired_artefacts()

        self.assertEqual(result, {"deleted": 1})
        self.assertEqual(list(Artefact.objects.values_list("artefact_id", flat=True)), [current.artefact_id])
        self.assertFalse(ArtefactSearch.objects.exists())
