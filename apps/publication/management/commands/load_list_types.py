from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.publication.services.list_type_loader import ListTypeFileError, load_list_types


class Command(BaseCommand):
    help = "Create or update list types and their case search config from a YAML file"

    def add_arguments(self, parser):
        parser.add_argument("path", nargs="?", type=str, help="YAML file (defaults to settings.LIST_TYPES_FILE)")

    def handle(self, *args, **options):
        path = options.get("path") or settings.LIST_TYPES_FILE
        try:
            created, updated = load_list_types(path)
        except (OSError, ListTypeFileError) as e:
            raise CommandError(str(e))
        self.stdout.write(self.style.SUCCESS(f"List types loaded: {created} created, {updated} updated"))
