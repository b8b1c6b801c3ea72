"""
Register Built-in Quality Gates

This management command creates the built-in quality gate ("SonarQube way")
with its conditions and marks it as the default gate.

Usage:
    python manage.py register_quality_gates

This is idempotent - safe to run multiple times.
"""

from django.core.management.base import BaseCommand
from core.quality_gates.core_config import BUILTIN_QUALITY_GATE, BUILTIN_QUALITY_GATE_CONDITIONS
from core.quality_gates.registration import RegisterQualityGates


class Command(BaseCommand):
    help = 'Register the built-in quality gate and make it the default'

    def handle(self, *args, **options):
        self.stdout.write('Starting built-in quality gate registration...\n')

        registrar = RegisterQualityGates()
        try:
            created = registrar.register()
        except Exception as e:
            self.stdout.write(self.style.ERROR(f'\n❌ Error: {str(e)}\n'))
            raise
        finally:
            registrar.stop()

        if created:
            self.stdout.write(self.style.SUCCESS(
                f"✓ Created quality gate: {BUILTIN_QUALITY_GATE} "
                f"({len(BUILTIN_QUALITY_GATE_CONDITIONS)} conditions, default)"
            ))
        else:
            self.stdout.write(f"- Quality gate already registered: {BUILTIN_QUALITY_GATE}")

        self.stdout.write(self.style.SUCCESS('\n✅ Success!\n'))
