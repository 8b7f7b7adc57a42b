"""
Per list type configuration of the JSON field names used for case search.

System admins choose, for each list type, which leaf keys in the hearing list
payload hold the case number and case name. The artefact search indexer reads
this configuration; field names are validated here before being stored.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from apps.list_search_config.models import ListSearchConfig

logger = logging.getLogger(__name__)

FIELD_NAME_PATTERN = re.compile(r'^[A-Za-z0-9_]+$')
MAX_FIELD_NAME_LENGTH = 100

CASE_NUMBER_LABEL = "Case number field name"
CASE_NAME_LABEL = "Case name field name"


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass
class SaveResult:
    success: bool
    errors: List[FieldError] = field(default_factory=list)
    config: Optional[ListSearchConfig] = None


def validate_field_name(value: Optional[str], label: str) -> Optional[FieldError]:
    """Return a FieldError for an invalid name, None when valid or blank."""
    trimmed = (value or '').strip()
    if not trimmed:
        return None
    if len(trimmed) > MAX_FIELD_NAME_LENGTH:
        return FieldError(field=label, message=f"{label} must be {MAX_FIELD_NAME_LENGTH} characters or less")
    if not FIELD_NAME_PATTERN.match(trimmed):
        return FieldError(field=label, message=f"{label} must contain only letters, numbers and underscores")
    return None


def get_config_for_list_type(list_type_id: int) -> Optional[ListSearchConfig]:
    return ListSearchConfig.objects.filter(list_type_id=list_type_id).first()


def save_config(
    list_type_id: int,
    case_number_field_name: Optional[str],
    case_name_field_name: Optional[str],
) -> SaveResult:
    case_number = (case_number_field_name or '').strip()
    case_name = (case_name_field_name or '').strip()

    if not case_number and not case_name:
        return SaveResult(success=False, errors=[FieldError(field='', message="Enter at least one field name")])

    errors = [
        error
        for error in (
            validate_field_name(case_number, CASE_NUMBER_LABEL),
            validate_field_name(case_name, CASE_NAME_LABEL),
        )
        if error is not None
    ]
    if errors:
        return SaveResult(success=False, errors=errors)

    config, created = ListSearchConfig.objects.update_or_create(
        list_type_id=list_type_id,
        defaults={
            'case_number_field_name': case_number,
            'case_name_field_name': case_name,
        },
    )
    logger.info(
        f"Saved search config for list type {list_type_id} "
        f"(case number: {case_number or '-'}, case name: {case_name or '-'}, created: {created})"
    )
    return SaveResult(success=True, config=config)
