from django.apps import AppConfig


class LoadedTemplatesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core.loaded_templates'
    label = 'loaded_templates'
    verbose_name = 'Loaded Templates'
