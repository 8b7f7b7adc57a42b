from __future__ import annotations

import tempfile
import textwrap
from io import StringIO
from pathlib import Path

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from apps.list_search_config.models import ListSearchConfig
from apps.publication.models import ArtefactSearch, ListType
from apps.publication.services.list_type_loader import ListTypeFileError, load_list_types
from apps.publication.tests.helpers import civil_cause_list, make_artefact, make_list_type


class ListTypeFileTestCase(TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write(self, text: str) -> str:
        path = Path(self.tmp.name) / "list_types.yaml"
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return str(path)


class TestLoadListTypes(ListTypeFileTestCase):
    def test_bundled_fixture_loads(self):
        created, updated = load_list_types(settings.LIST_TYPES_FILE)

        self.assertGreater(created, 0)
        self.assertEqual(updated, 0)
        crown = ListType.objects.get(name="CROWN_DAILY_LIST")
        self.assertEqual(crown.provenance, "CRIME_IDAM")
        self.assertEqual(crown.search_config.case_number_field_name, "caseNumber")
        self.assertEqual(crown.search_config.case_name_field_name, "")
        self.assertFalse(ListSearchConfig.objects.filter(list_type__name="SJP_PUBLIC_LIST").exists())

    def test_reloading_updates_in_place(self):
        path = self.write("""
            list_types:
              - name: CIVIL_DAILY_CAUSE_LIST
                friendly_name: Civil list
                provenance: CFT_IDAM
        """)
        self.assertEqual(load_list_types(path), (1, 0))

        path = self.write("""
            list_types:
              - name: CIVIL_DAILY_CAUSE_LIST
                friendly_name: Civil Daily Cause List
                provenance: CFT_IDAM
                search_config:
                  case_number_field_name: caseNumber
        """)
        self.assertEqual(load_list_types(path), (0, 1))
        list_type = ListType.objects.get()
        self.assertEqual(list_type.friendly_name, "Civil Daily Cause List")
        self.assertEqual(list_type.search_config.case_number_field_name, "caseNumber")

    def test_missing_required_keys(self):
        path = self.write("""
            list_types:
              - name: NO_PROVENANCE
              - provenance: CFT_IDAM
        """)
        with self.assertRaisesMessage(ListTypeFileError, "list_types[0].provenance, list_types[1].name"):
            load_list_types(path)
        self.assertFalse(ListType.objects.exists())

    def test_invalid_search_config_rolls_back(self):
        path = self.write("""
            list_types:
              - name: GOOD_LIST
                provenance: CFT_IDAM
              - name: BAD_LIST
                provenance: CFT_IDAM
                search_config:
                  case_number_field_name: case-number
        """)
        with self.assertRaises(ListTypeFileError):
            load_list_types(path)
        self.assertFalse(ListType.objects.exists())


class TestManagementCommands(ListTypeFileTestCase):
    def test_load_list_types_command(self):
        out = StringIO()
        call_command("load_list_types", stdout=out)
        self.assertIn("created", out.getvalue())

    def test_load_list_types_missing_file(self):
        with self.assertRaises(CommandError):
            call_command("load_list_types", str(Path(self.tmp.name) / "absent.yaml"))

    def test_reindex_rebuilds_search_rows(self):
        list_type = make_list_type()
        ListSearchConfig.objects.create(list_type=list_type, case_number_field_name="caseNumber")
        artefact = make_artefact(list_type, payload=civil_cause_list(("1001", "A")))
        make_artefact(list_type, location_id="300", is_flat_file=True, payload=civil_cause_list(("X", "Y")))

        out = StringIO()
        call_command("reindex_artefact_search", "--dry-run", stdout=out)
        self.assertIn("1 artefacts would be reindexed", out.getvalue())
        self.assertFalse(ArtefactSearch.objects.exists())

        out = StringIO()
        call_command("reindex_artefact_search", "--list-type", str(list_type.id), stdout=out)
        self.assertIn("Reindexed 1 artefacts (1 case records written)", out.getvalue())
        self.assertEqual(list(ArtefactSearch.objects.values_list("artefact_id", "case_number")), [(artefact.artefact_id, "1001")])
