from django.urls import path

from .views.case_search import CaseSearchView
from .views.publications import (
    AdminPublicationDataView,
    AdminPublicationListView,
    PublicationDataView,
    PublicationListView,
    PublicationMetadataView,
)

urlpatterns = [
    path('publications/', PublicationListView.as_view(), name='publication_list'),
    path('publications/<uuid:artefact_id>/', PublicationMetadataView.as_view(), name='publication_metadata'),
    path('publications/<uuid:artefact_id>/data/', PublicationDataView.as_view(), name='publication_data'),
    path('admin/publications/', AdminPublicationListView.as_view(), name='admin_publication_list'),
    path('admin/publications/<uuid:artefact_id>/data/', AdminPublicationDataView.as_view(), name='admin_publication_data'),
    path('search/cases/', CaseSearchView.as_view(), name='case_search'),
]
