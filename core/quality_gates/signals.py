"""
Startup hook: registers the built-in quality gate once the schema is migrated.
"""
from django.conf import settings

from .registration import RegisterQualityGates


def register_builtin_quality_gates(sender, using=None, **kwargs):
    """
    post_migrate receiver. Registers on the database that was just migrated.
    Errors propagate and abort the migrate run.
    """
    if not getattr(settings, 'REGISTER_BUILTIN_QUALITY_GATES', True):
        return

    registrar = RegisterQualityGates(using=using)
    registrar.start()
    registrar.stop()
