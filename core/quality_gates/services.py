"""
Service layer for Quality Gates.
Contains the validation and write operations used by the API and by the
built-in gate registration.

Write operations take an optional `using` database alias; None routes to
the default database.
"""
import logging
from typing import Optional

from django.core.exceptions import ValidationError
from django.db import transaction

from .core_config import LEAK_PERIOD
from .models import QualityGate, QualityGateCondition

logger = logging.getLogger(__name__)


class QualityGateUpdater:
    """Creates quality gates."""

    @staticmethod
    def _validate_name(name, using=None):
        if not name or not name.strip():
            raise ValidationError({'name': "Name can't be empty"})
        if QualityGate.objects.using(using).filter(name=name).exists():
            raise ValidationError({'name': 'Name has already been taken'})

    @classmethod
    def create(cls, name: str, using=None) -> QualityGate:
        """
        Create a new quality gate. The gate is not flagged as default.

        Args:
            name: Display name, must be non-empty and unique
            using: Database alias

        Returns:
            The persisted QualityGate, with its generated id

        Raises:
            ValidationError: If the name is empty or already taken
        """
        cls._validate_name(name, using=using)
        gate = QualityGate.objects.db_manager(using).create(name=name, is_default=False)
        logger.debug(f"Created quality gate '{gate.name}' (id={gate.pk})")
        return gate


class QualityGateConditionsUpdater:
    """Attaches threshold conditions to quality gates."""

    @staticmethod
    def _validate_operator(operator):
        if operator not in QualityGateCondition.Operator.values:
            raise ValidationError({
                'operator': f"Operator '{operator}' is not valid. "
                            f"Possible values: {', '.join(QualityGateCondition.Operator.values)}"
            })

    @staticmethod
    def _validate_thresholds(warning_threshold, error_threshold):
        if not warning_threshold and not error_threshold:
            raise ValidationError('At least one threshold (warning, error) must be set.')

    @staticmethod
    def _validate_period(metric_key, period):
        if period is None:
            # new_* metrics are differential
            if metric_key.startswith('new_'):
                raise ValidationError({'period': 'A period must be selected for differential metrics.'})
            return
        if period != LEAK_PERIOD:
            raise ValidationError({
                'period': f"The only valid quality gate period is {LEAK_PERIOD}, the leak period."
            })

    @staticmethod
    def _validate_unique_condition(gate, metric_key, period):
        if gate.conditions.filter(metric_key=metric_key, period=period).exists():
            suffix = ' over leak period' if period == LEAK_PERIOD else ''
            raise ValidationError(f"Condition on metric '{metric_key}'{suffix} already exists.")

    @classmethod
    def create_condition(cls, gate_id, metric_key: str, operator: str,
                         warning_threshold: Optional[str], error_threshold: Optional[str],
                         period: Optional[int], using=None) -> QualityGateCondition:
        """
        Create a condition on an existing quality gate.

        Thresholds are stored as given, without numeric parsing.

        Args:
            gate_id: Id of the owning gate
            metric_key: Key of the metric to check
            operator: 'GT' or 'LT'
            warning_threshold: Optional warning threshold, as text
            error_threshold: Error threshold, as text
            period: None or LEAK_PERIOD
            using: Database alias

        Returns:
            The persisted QualityGateCondition

        Raises:
            ValidationError: If the gate does not exist or the condition is invalid
        """
        gate = QualityGate.objects.using(using).filter(pk=gate_id).first()
        if gate is None:
            raise ValidationError(f"Quality gate with id {gate_id} does not exist")
        if not metric_key:
            raise ValidationError({'metric_key': "Metric key can't be empty"})

        cls._validate_operator(operator)
        cls._validate_thresholds(warning_threshold, error_threshold)
        cls._validate_period(metric_key, period)
        cls._validate_unique_condition(gate, metric_key, period)

        condition = QualityGateCondition.objects.db_manager(using).create(
            gate=gate,
            metric_key=metric_key,
            operator=operator,
            warning_threshold=warning_threshold,
            error_threshold=error_threshold,
            period=period,
        )
        logger.debug(f"Added condition {metric_key} {operator} {error_threshold} to gate '{gate.name}'")
        return condition


# ----------------------
# Default gate policies
# ----------------------
# Policies run inside QualityGates.set_default's transaction.

def _lock_gate_and_defaults(gate_id, using=None):
    """Lock the target gate and the current default rows; return the target."""
    gates = QualityGate.objects.using(using).select_for_update()
    list(gates.filter(is_default=True))
    return gates.get(pk=gate_id)


def overwrite_default(gate_id, using=None) -> QualityGate:
    """
    Make the gate the default, clearing the flag on every other gate.

    Raises:
        QualityGate.DoesNotExist: If the gate does not exist
    """
    gate = _lock_gate_and_defaults(gate_id, using=using)
    QualityGate.objects.using(using).filter(is_default=True).exclude(pk=gate.pk).update(is_default=False)
    if not gate.is_default:
        gate.is_default = True
        gate.save(update_fields=['is_default', 'updated_at'])
    return gate


def set_default_if_none(gate_id, using=None) -> QualityGate:
    """
    Make the gate the default only when no gate is default yet.

    Raises:
        QualityGate.DoesNotExist: If the gate does not exist
    """
    gate = _lock_gate_and_defaults(gate_id, using=using)
    if not QualityGate.objects.using(using).filter(is_default=True).exists():
        gate.is_default = True
        gate.save(update_fields=['is_default', 'updated_at'])
    return gate


class QualityGates:
    """Queries and default management for quality gates."""

    default_policy = staticmethod(overwrite_default)

    @staticmethod
    def get_quality_gates():
        """Get all quality gates."""
        return QualityGate.objects.all().order_by('name')

    @staticmethod
    def get_quality_gate(pk):
        """Get a quality gate with its conditions prefetched."""
        return QualityGate.objects.prefetch_related('conditions').get(pk=pk)

    @staticmethod
    def get_default(using=None) -> Optional[QualityGate]:
        """Return the default quality gate, or None if there is none."""
        return QualityGate.objects.using(using).filter(is_default=True).first()

    @classmethod
    def set_default(cls, gate_id, using=None) -> QualityGate:
        """Apply the default policy to the gate, atomically."""
        with transaction.atomic(using=using):
            gate = cls.default_policy(gate_id, using=using)
        if gate.is_default:
            logger.info(f"Quality gate '{gate.name}' (id={gate.pk}) is now the default")
        return gate
