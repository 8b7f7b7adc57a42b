"""
Publication endpoints for public pages and admin tooling.

Every response that reveals an artefact first passes the access decision for
the surface it is served on:
- public browse and content: can_access_publication
- existence/metadata: can_access_publication_metadata
- admin content: can_access_publication_data
"""

from __future__ import annotations

import logging

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.permissions import IsSystemAdmin
from apps.accounts.services.viewer import viewer_from_request

from ..filters import ArtefactFilter
from ..models import Artefact, ListType
from ..serializers.artefact import ArtefactDataSerializer, ArtefactIngestSerializer, ArtefactMetadataSerializer
from ..services.authorisation import (
    can_access_publication,
    can_access_publication_data,
    can_access_publication_metadata,
    filter_accessible_publications,
    filter_publications_for_summary,
)
from ..services.ingestion import publish_artefact

logger = logging.getLogger(__name__)


def _filtered_artefacts(request):
    filterset = ArtefactFilter(
        request.query_params,
        queryset=Artefact.objects.select_related('list_type').defer('payload'),
    )
    if not filterset.is_valid():
        return None, Response({"errors": filterset.errors}, status=status.HTTP_400_BAD_REQUEST)
    return list(filterset.qs), None


class PublicationListView(APIView):
    """
    GET  /api/publications/?location_id=…  publications the viewer may browse
    POST /api/publications/                 ingest a publication (system admin)
    """

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsSystemAdmin()]
        return [AllowAny()]

    def get(self, request) -> Response:
        artefacts, error = _filtered_artefacts(request)
        if error:
            return error

        list_types = ListType.objects.in_bulk({a.list_type_id for a in artefacts})
        visible = filter_accessible_publications(viewer_from_request(request), artefacts, list_types)
        data = ArtefactMetadataSerializer(visible, many=True).data
        return Response({"count": len(data), "publications": data}, status=status.HTTP_200_OK)

    def post(self, request) -> Response:
        serializer = ArtefactIngestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        artefact, created = publish_artefact(**serializer.validated_data)
        return Response(
            ArtefactMetadataSerializer(artefact).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class PublicationMetadataView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, artefact_id) -> Response:
        artefact = get_object_or_404(Artefact.objects.select_related('list_type').defer('payload'), pk=artefact_id)
        if not can_access_publication_metadata(viewer_from_request(request), artefact):
            return Response({"detail": "You do not have access to this publication."}, status=status.HTTP_403_FORBIDDEN)
        return Response(ArtefactMetadataSerializer(artefact).data, status=status.HTTP_200_OK)


class PublicationDataView(APIView):
    """Publication content for public-facing pages."""

    permission_classes = [AllowAny]

    def get(self, request, artefact_id) -> Response:
        artefact = get_object_or_404(Artefact.objects.select_related('list_type'), pk=artefact_id)
        if not can_access_publication(viewer_from_request(request), artefact, artefact.list_type):
            return Response({"detail": "You do not have access to this publication."}, status=status.HTTP_403_FORBIDDEN)
        return Response(ArtefactDataSerializer(artefact).data, status=status.HTTP_200_OK)


class AdminPublicationListView(APIView):
    """Summary listing for admin tooling: every publication whose existence the viewer may see."""

    permission_classes = [IsAuthenticated]

    def get(self, request) -> Response:
        artefacts, error = _filtered_artefacts(request)
        if error:
            return error

        visible = filter_publications_for_summary(viewer_from_request(request), artefacts)
        data = ArtefactMetadataSerializer(visible, many=True).data
        return Response({"count": len(data), "publications": data}, status=status.HTTP_200_OK)


class AdminPublicationDataView(APIView):
    """Publication content for admin tooling. Internal admins only ever get PUBLIC content."""

    permission_classes = [IsAuthenticated]

    def get(self, request, artefact_id) -> Response:
        artefact = get_object_or_404(Artefact.objects.select_related('list_type'), pk=artefact_id)
        viewer = viewer_from_request(request)
        if not can_access_publication_data(viewer, artefact, artefact.list_type):
            logger.info(f"Denied admin data access to artefact {artefact_id} for role {viewer.role if viewer else None}")
            return Response({"detail": "You do not have access to this publication data."}, status=status.HTTP_403_FORBIDDEN)
        return Response(ArtefactDataSerializer(artefact).data, status=status.HTTP_200_OK)
