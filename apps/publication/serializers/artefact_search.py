from rest_framework import serializers


class CaseSearchResultSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    artefact_id = serializers.CharField()
    case_number = serializers.CharField(allow_null=True)
    case_name = serializers.CharField(allow_null=True)
