from rest_framework import serializers

from .models import ListSearchConfig


class ListSearchConfigSerializer(serializers.ModelSerializer):
    class Meta:
        model = ListSearchConfig
        fields = [
            'list_type', 'case_number_field_name', 'case_name_field_name', 'created_at', 'updated_at'
        ]


class ListSearchConfigInputSerializer(serializers.Serializer):
    # Field-level rules live in config_service so the API and admin share them
    case_number_field_name = serializers.CharField(required=False, allow_blank=True, default='', trim_whitespace=False)
    case_name_field_name = serializers.CharField(required=False, allow_blank=True, default='', trim_whitespace=False)
