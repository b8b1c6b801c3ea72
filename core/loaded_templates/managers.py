"""
Loaded Template Managers Module

Markers are write-once, read-many: the manager exposes exactly the two
operations the registration routines need.

Usage:
    from core.loaded_templates.models import LoadedTemplate

    if LoadedTemplate.objects.count_by_type_and_key('QUALITY_GATE', 'SonarQube way') == 0:
        ...
        LoadedTemplate.objects.insert('QUALITY_GATE', 'SonarQube way')
"""

from django.db import models


class LoadedTemplateQuerySet(models.QuerySet):
    """
    QuerySet for LoadedTemplate markers.

    Methods:
        - for_type_and_key(template_type, key): Markers matching the pair
    """

    def for_type_and_key(self, template_type, key):
        """Return markers registered under (template_type, key)."""
        return self.filter(template_type=template_type, key=key)


class LoadedTemplateManager(models.Manager.from_queryset(LoadedTemplateQuerySet)):
    """
    Manager for LoadedTemplate markers.

    Both methods run on the current connection, so inside transaction.atomic()
    they see (and write to) the transaction's own view of the table.
    """

    def count_by_type_and_key(self, template_type, key) -> int:
        """Exact count of markers for (template_type, key)."""
        return self.get_queryset().for_type_and_key(template_type, key).count()

    def insert(self, template_type, key):
        """Persist one marker row."""
        return self.create(template_type=template_type, key=key)
