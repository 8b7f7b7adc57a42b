from rest_framework import serializers

from ..models import Artefact, Language, ListType, Provenance, Sensitivity


class ArtefactMetadataSerializer(serializers.ModelSerializer):
    list_type_name = serializers.CharField(source='list_type.friendly_name', read_only=True)
    provenance_label = serializers.SerializerMethodField()

    class Meta:
        model = Artefact
        fields = [
            'artefact_id', 'location_id', 'list_type', 'list_type_name', 'sensitivity',
            'provenance', 'provenance_label', 'language', 'content_date', 'display_from',
            'display_to', 'is_flat_file', 'superseded_count', 'last_received_date',
        ]

    def get_provenance_label(self, obj: Artefact) -> str:
        return Provenance.label_for(obj.provenance)


class ArtefactDataSerializer(serializers.ModelSerializer):
    class Meta:
        model = Artefact
        fields = ['artefact_id', 'list_type', 'content_date', 'language', 'is_flat_file', 'payload']


class ArtefactIngestSerializer(serializers.Serializer):
    location_id = serializers.CharField(max_length=64)
    list_type = serializers.PrimaryKeyRelatedField(queryset=ListType.objects.all())
    content_date = serializers.DateField()
    display_from = serializers.DateTimeField()
    display_to = serializers.DateTimeField()
    sensitivity = serializers.ChoiceField(choices=Sensitivity.choices, required=False)
    language = serializers.ChoiceField(choices=Language.choices, default=Language.ENGLISH)
    provenance = serializers.CharField(max_length=64, required=False, allow_blank=True)
    payload = serializers.JSONField(required=False, allow_null=True)
    is_flat_file = serializers.BooleanField(default=False)

    def validate(self, attrs):
        if attrs['display_to'] < attrs['display_from']:
            raise serializers.ValidationError({'display_to': "Display to must be on or after display from."})
        return attrs
