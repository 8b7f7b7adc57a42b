"""
Schema-agnostic location of case records inside hearing list JSON.

Different list types nest their cases at different paths, e.g.
courtLists[].courtHouse.courtRoom[].session[].sittings[].hearing[].case[],
so nothing here knows about a particular shape. The only guidance is the pair
of leaf key names configured for the list type.

JSON is treated as a sum of three variants: object (dict), array (list) and
scalar (anything else). Traversal is depth-first in document order and uses an
explicit stack so very deep payloads cannot exhaust the interpreter's
recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass(frozen=True)
class CaseRecord:
    case_number: Optional[str] = None
    case_name: Optional[str] = None


def _clean_field_name(field_name: Optional[str]) -> Optional[str]:
    if not isinstance(field_name, str):
        return None
    field_name = field_name.strip()
    return field_name or None


def _string_value(node: dict, field_name: Optional[str]) -> Optional[str]:
    if field_name is None:
        return None
    value = node.get(field_name)
    if isinstance(value, str) and value.strip():
        return value
    return None


def _as_case(node: dict, case_number_field: Optional[str], case_name_field: Optional[str]) -> Optional[CaseRecord]:
    case_number = _string_value(node, case_number_field)
    case_name = _string_value(node, case_name_field)
    if case_number is None and case_name is None:
        return None
    return CaseRecord(case_number=case_number, case_name=case_name)


def locate_cases(
    value: Any,
    case_number_field: Optional[str],
    case_name_field: Optional[str],
) -> List[CaseRecord]:
    """
    Return one CaseRecord per candidate case node found in `value`.

    A candidate is an object that directly holds one of the configured keys
    with a non-blank string value. Each candidate contributes exactly one
    record and is not searched further; every other object property and array
    element is visited.

    >>> locate_cases({"caseNumber": "C1", "caseName": "N1"}, "caseNumber", "caseName")
    [CaseRecord(case_number='C1', case_name='N1')]
    """
    case_number_field = _clean_field_name(case_number_field)
    case_name_field = _clean_field_name(case_name_field)
    if case_number_field is None and case_name_field is None:
        return []

    records: List[CaseRecord] = []
    stack: List[Any] = [value]
    while stack:
        node = stack.pop()
        if isinstance(node, dict):
            record = _as_case(node, case_number_field, case_name_field)
            if record is not None:
                records.append(record)
                continue
            children = list(node.values())
        elif isinstance(node, list):
            children = node
        else:
            continue
        # reversed so the first child is popped next
        for child in reversed(children):
            if isinstance(child, (dict, list)):
                stack.append(child)
    return records
