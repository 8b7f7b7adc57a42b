"""
System admin endpoints for configuring case search fields per list type.

GET /api/system-admin/list-types/<list_type_id>/search-config/
PUT /api/system-admin/list-types/<list_type_id>/search-config/
"""

import logging

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.permissions import IsSystemAdmin
from apps.publication.models import ListType

from .serializers import ListSearchConfigInputSerializer, ListSearchConfigSerializer
from .services.config_service import get_config_for_list_type, save_config

logger = logging.getLogger(__name__)


class ListSearchConfigView(APIView):
    permission_classes = [IsSystemAdmin]

    def get(self, request, list_type_id: int):
        list_type = get_object_or_404(ListType, pk=list_type_id)
        config = get_config_for_list_type(list_type.id)
        return Response({
            "list_type_id": list_type.id,
            "case_number_field_name": config.case_number_field_name if config else "",
            "case_name_field_name": config.case_name_field_name if config else "",
        })

    def put(self, request, list_type_id: int):
        list_type = get_object_or_404(ListType, pk=list_type_id)
        serializer = ListSearchConfigInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = save_config(
            list_type.id,
            serializer.validated_data['case_number_field_name'],
            serializer.validated_data['case_name_field_name'],
        )
        if not result.success:
            return Response(
                {"errors": [{"field": e.field, "message": e.message} for e in result.errors]},
                status=status.HTTP_400_BAD_REQUEST,
            )

        logger.info(f"Search config for list type {list_type.id} updated by user {request.user.pk}")
        return Response(ListSearchConfigSerializer(result.config).data, status=status.HTTP_200_OK)
