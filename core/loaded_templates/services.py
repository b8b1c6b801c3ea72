"""
Service layer for loaded templates.
Transactional test-and-set used to register built-in objects exactly once.
"""
import logging
from typing import Callable, Optional

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from .models import LoadedTemplate

logger = logging.getLogger(__name__)


def is_registered(template_type: str, key: str, using=None) -> bool:
    """Return True if a marker exists for (template_type, key)."""
    return LoadedTemplate.objects.db_manager(using).count_by_type_and_key(template_type, key) > 0


def register_if_absent(template_type: str, key: str, creation_procedure: Callable[[], None],
                       using=None, should_register: Optional[Callable[[], bool]] = None) -> bool:
    """
    Run creation_procedure and write the (template_type, key) marker, unless
    the marker already exists.

    The existence check, the procedure and the marker insert share one
    transaction.atomic() block on the `using` database, so a failure anywhere
    leaves no partial state and the marker is only ever written after the
    procedure has succeeded. Mutual exclusion between processes comes from
    the database: two processes that both observe "absent" race on unique
    constraints (or on the procedure's own uniqueness checks once the winner
    has committed), the loser's transaction is rolled back, and the loser
    then finds the winner's committed marker.

    Args:
        template_type: Marker type (e.g., LoadedTemplate.QUALITY_GATE_TYPE)
        key: Marker key within the type
        creation_procedure: Callable performing the writes to protect
        using: Database alias, None for the default database
        should_register: Check run inside the transaction. Defaults to
            "no marker for (template_type, key)".

    Returns:
        bool: True if this call performed the registration

    Raises:
        Any storage or validation error from the check, the procedure or the
        insert. IntegrityError and ValidationError are only absorbed when the
        marker turns out to exist.
    """
    if should_register is None:
        def should_register():
            return not is_registered(template_type, key, using=using)

    try:
        with transaction.atomic(using=using):
            if not should_register():
                logger.info(f"Template {template_type} '{key}' already registered, skipping")
                return False

            creation_procedure()
            LoadedTemplate.objects.db_manager(using).insert(template_type, key)
    except (IntegrityError, ValidationError):
        if not is_registered(template_type, key, using=using):
            raise
        logger.info(
            f"Template {template_type} '{key}' was registered concurrently by another process"
        )
        return False

    logger.info(f"Registered template {template_type} '{key}'")
    return True
