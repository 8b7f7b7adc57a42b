import django_filters

from .models import Artefact, Sensitivity


class ArtefactFilter(django_filters.FilterSet):
    location_id = django_filters.CharFilter(field_name='location_id')
    list_type = django_filters.NumberFilter(field_name='list_type_id')
    sensitivity = django_filters.ChoiceFilter(choices=Sensitivity.choices)
    content_date_from = django_filters.DateFilter(field_name='content_date', lookup_expr='gte')
    content_date_to = django_filters.DateFilter(field_name='content_date', lookup_expr='lte')

    class Meta:
        model = Artefact
        fields = ['location_id', 'list_type', 'sensitivity', 'language']
