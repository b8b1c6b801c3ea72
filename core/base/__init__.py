"""
Core Base Module

Provides shared base classes and utilities for all quality gate modules.

Exports:
    - TimestampMixin: Adds created_at, updated_at

Usage:
    from core.base import TimestampMixin

    class QualityGate(TimestampMixin):
        name = models.CharField(max_length=100)
"""

from core.base.models import TimestampMixin

__all__ = [
    'TimestampMixin',
]
