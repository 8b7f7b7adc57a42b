from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

import yaml
from django.db import transaction

from apps.list_search_config.services.config_service import save_config
from apps.publication.models import ListType

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ['name', 'provenance']


class ListTypeFileError(Exception):
    """Raised when a list type file is missing required entries."""


def _load_yaml(path: str) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _validate(entries: List[Dict[str, Any]]) -> None:
    missing: list[str] = []
    for i, entry in enumerate(entries):
        for k in REQUIRED_KEYS:
            if not entry.get(k):
                missing.append(f"list_types[{i}].{k}")
    if missing:
        raise ListTypeFileError(f"Missing required keys: {', '.join(missing)}")


def load_list_types(path: str) -> Tuple[int, int]:
    """
    Upsert list types (and their optional search config) from a YAML file.

    Returns (created, updated).
    """
    entries = _load_yaml(path).get('list_types') or []
    _validate(entries)

    created_count = updated_count = 0
    with transaction.atomic():
        for entry in entries:
            list_type, created = ListType.objects.update_or_create(
                name=entry['name'],
                defaults={
                    'friendly_name': entry.get('friendly_name', ''),
                    'welsh_friendly_name': entry.get('welsh_friendly_name', ''),
                    'provenance': entry['provenance'],
                    'is_non_strategic': bool(entry.get('is_non_strategic', False)),
                },
            )
            if created:
                created_count += 1
            else:
                updated_count += 1

            search_config = entry.get('search_config')
            if search_config:
                result = save_config(
                    list_type.id,
                    search_config.get('case_number_field_name'),
                    search_config.get('case_name_field_name'),
                )
                if not result.success:
                    messages = '; '.join(e.message for e in result.errors)
                    raise ListTypeFileError(f"Invalid search config for {entry['name']}: {messages}")

    logger.info(f"Loaded list types from {path} (created: {created_count}, updated: {updated_count})")
    return created_count, updated_count
