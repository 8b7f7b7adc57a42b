from django.apps import AppConfig


class ListSearchConfigConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.list_search_config'
    verbose_name = 'List Search Config'
