from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.services.viewer import viewer_from_request

from ..models import Artefact, ListType
from ..serializers.artefact_search import CaseSearchResultSerializer
from ..services.authorisation import filter_accessible_publications
from ..services.case_search import CaseSearchError, search_by_case_name, search_by_case_reference


def _visible_to(viewer):
    def visible_artefacts(artefact_ids):
        artefacts = list(Artefact.objects.filter(artefact_id__in=list(artefact_ids)).defer('payload'))
        list_types = ListType.objects.in_bulk({a.list_type_id for a in artefacts})
        return [a.artefact_id for a in filter_accessible_publications(viewer, artefacts, list_types)]
    return visible_artefacts


class CaseSearchView(APIView):
    """
    GET /api/search/cases/?case_number=…  exact case number
    GET /api/search/cases/?case_name=…    partial, case-insensitive case name

    Only hits in publications the viewer may open on public pages are returned.
    A blank case_number falls back to case_name when both are sent.
    """

    permission_classes = [AllowAny]

    def get(self, request) -> Response:
        case_number = request.query_params.get('case_number')
        case_name = request.query_params.get('case_name')
        if case_number is None and case_name is None:
            return Response({"detail": "case_number or case_name is required"}, status=status.HTTP_400_BAD_REQUEST)

        visible_artefacts = _visible_to(viewer_from_request(request))
        try:
            if case_name is not None and not (case_number or '').strip():
                results = search_by_case_name(case_name, visible_artefacts)
            else:
                results = search_by_case_reference(case_number, visible_artefacts)
        except CaseSearchError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        data = CaseSearchResultSerializer(results, many=True).data
        return Response({"count": len(data), "results": data}, status=status.HTTP_200_OK)
