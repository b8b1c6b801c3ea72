"""
Loaded Template Models
Records which built-in objects have already been registered in the database.
"""
from django.db import models
from .managers import LoadedTemplateManager


class LoadedTemplate(models.Model):
    """
    Marker for a registered built-in object, identified by (template_type, key).
    The existence of a row means "already registered". Rows are created once
    and never updated or deleted by the registration routines.
    """
    QUALITY_GATE_TYPE = 'QUALITY_GATE'

    template_type = models.CharField(
        max_length=50,
        db_index=True,
        help_text="Kind of built-in object (e.g., 'QUALITY_GATE')"
    )
    key = models.CharField(
        max_length=200,
        help_text="Identifier of the built-in object within its type"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    objects = LoadedTemplateManager()

    class Meta:
        db_table = 'loaded_templates'
        verbose_name = 'Loaded Template'
        verbose_name_plural = 'Loaded Templates'
        ordering = ['template_type', 'key']
        constraints = [
            models.UniqueConstraint(
                fields=['template_type', 'key'],
                name='uniq_loaded_template_type_key'
            ),
        ]

    def __str__(self):
        return f"{self.template_type}: {self.key}"
