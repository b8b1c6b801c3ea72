"""
Quality Gates App Configuration
"""

from django.apps import AppConfig
from django.db.models.signals import post_migrate


class QualityGatesConfig(AppConfig):
    """Configuration for the Quality Gates app"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core.quality_gates'
    label = 'quality_gates'
    verbose_name = 'Quality Gates'

    def ready(self):
        """Register the built-in quality gate after migrations run"""
        from .signals import register_builtin_quality_gates
        post_migrate.connect(
            register_builtin_quality_gates,
            sender=self,
            dispatch_uid='quality_gates.register_builtin_quality_gates'
        )
