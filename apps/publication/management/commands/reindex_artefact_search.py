from django.core.management.base import BaseCommand

from apps.publication.models import Artefact
from apps.publication.services.artefact_search import ArtefactSearchIndexer


class Command(BaseCommand):
    help = "Rebuild the case search index from stored artefact payloads"

    def add_arguments(self, parser):
        parser.add_argument("--list-type", type=int, dest="list_type", help="Only reindex artefacts of this list type id")
        parser.add_argument("--dry-run", action="store_true", help="Count artefacts without reindexing")

    def handle(self, *args, **options):
        qs = Artefact.objects.filter(is_flat_file=False).order_by('created_at')
        if options.get("list_type"):
            qs = qs.filter(list_type_id=options["list_type"])

        if options["dry_run"]:
            self.stdout.write(f"{qs.count()} artefacts would be reindexed")
            return

        indexer = ArtefactSearchIndexer()
        artefact_count = record_count = 0
        for artefact in qs.iterator():
            record_count += indexer.extract_and_store(artefact.artefact_id, artefact.list_type_id, artefact.payload)
            artefact_count += 1

        self.stdout.write(self.style.SUCCESS(
            f"Reindexed {artefact_count} artefacts ({record_count} case records written)"
        ))
