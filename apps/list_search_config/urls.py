from django.urls import path

from .views import ListSearchConfigView

urlpatterns = [
    path('list-types/<int:list_type_id>/search-config/', ListSearchConfigView.as_view(), name='list_search_config'),
]
