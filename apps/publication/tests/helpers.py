from __future__ import annotations

from datetime import date, datetime, timedelta, timezone as dt_timezone

from apps.publication.models import Artefact, ListType


def make_list_type(name: str = "CIVIL_DAILY_CAUSE_LIST", provenance: str = "CFT_IDAM") -> ListType:
    return ListType.objects.create(name=name, friendly_name=name.replace("_", " ").title(), provenance=provenance)


def make_artefact(list_type: ListType, **overrides) -> Artefact:
    now = datetime.now(dt_timezone.utc)
    fields = {
        "location_id": "240",
        "list_type": list_type,
        "sensitivity": "PUBLIC",
        "provenance": "MANUAL_UPLOAD",
        "content_date": date(2026, 10, 18),
        "display_from": now - timedelta(days=1),
        "display_to": now + timedelta(days=1),
        "payload": None,
    }
    fields.update(overrides)
    return Artefact.objects.create(**fields)


def civil_cause_list(*cases):
    """Hearing list payload with the given (caseNumber, caseName) pairs nested the way court lists do."""
    return {
        "document": {"publicationDate": "2026-10-18T09:00:00Z"},
        "courtLists": [
            {
                "courtHouse": {
                    "courtHouseName": "Oxford Combined Court Centre",
                    "courtRoom": [
                        {
                            "courtRoomName": "Courtroom 1",
                            "session": [
                                {
                                    "sittings": [
                                        {
                                            "sittingStart": "2026-10-18T10:00:00Z",
                                            "hearing": [
                                                {
                                                    "hearingType": "Directions",
                                                    "case": [
                                                        {"caseNumber": number, "caseName": name}
                                                        for number, name in cases
                                                    ],
                                                }
                                            ],
                                        }
                                    ]
                                }
                            ],
                        }
                    ],
                }
            }
        ],
    }
