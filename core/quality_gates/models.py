"""
Quality Gate Models
A quality gate is a named set of threshold conditions on metrics.
"""
from django.db import models
from core.base import TimestampMixin


class QualityGate(TimestampMixin):
    """
    Named quality gate. At most one gate is flagged as the system default.
    """
    name = models.CharField(max_length=100, unique=True, db_index=True)
    is_default = models.BooleanField(
        default=False,
        help_text="Gate applied to projects without an explicit gate"
    )

    class Meta:
        db_table = 'quality_gates'
        verbose_name = 'Quality Gate'
        verbose_name_plural = 'Quality Gates'
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(
                fields=['is_default'],
                condition=models.Q(is_default=True),
                name='uniq_default_quality_gate'
            ),
        ]

    def __str__(self):
        return self.name


class QualityGateCondition(TimestampMixin):
    """
    Threshold condition on one metric, owned by a single quality gate.
    Thresholds are kept as text; interpreting them is up to the evaluator.
    """

    class Operator(models.TextChoices):
        GREATER_THAN = 'GT', 'is greater than'
        LESS_THAN = 'LT', 'is less than'

    gate = models.ForeignKey(
        QualityGate,
        on_delete=models.CASCADE,
        related_name='conditions'
    )
    metric_key = models.CharField(
        max_length=64,
        help_text="Key of the measured metric (e.g., 'new_coverage')"
    )
    operator = models.CharField(max_length=2, choices=Operator.choices)
    warning_threshold = models.CharField(max_length=64, null=True, blank=True)
    error_threshold = models.CharField(max_length=64, null=True, blank=True)
    period = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        help_text="Comparison period index. 1 = leak period (new code)"
    )

    class Meta:
        db_table = 'quality_gate_conditions'
        verbose_name = 'Quality Gate Condition'
        verbose_name_plural = 'Quality Gate Conditions'
        ordering = ['gate__name', 'id']

    def __str__(self):
        return f"{self.gate.name} - {self.metric_key} {self.operator} {self.error_threshold}"
