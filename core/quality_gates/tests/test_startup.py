import io
from unittest import mock

from django.core.management import call_command
from django.db import DatabaseError
from django.test import TestCase, override_settings

from core.loaded_templates.models import LoadedTemplate
from core.quality_gates.core_config import BUILTIN_QUALITY_GATE
from core.quality_gates.models import QualityGate
from core.quality_gates.registration import RegisterQualityGates
from core.quality_gates.signals import register_builtin_quality_gates
from core.base.test_utils import reset_quality_gate_storage


class PostMigrateRegistrationTests(TestCase):
    """Tests for the post_migrate startup hook"""

    def test_builtin_gate_registered_by_migrate(self):
        """Creating the test database already ran the hook"""
        gate = QualityGate.objects.get(name=BUILTIN_QUALITY_GATE)

        self.assertTrue(gate.is_default)
        self.assertEqual(gate.conditions.count(), 4)
        self.assertEqual(
            LoadedTemplate.objects.count_by_type_and_key(LoadedTemplate.QUALITY_GATE_TYPE, BUILTIN_QUALITY_GATE),
            1
        )

    def test_hook_registers_on_empty_storage(self):
        reset_quality_gate_storage()

        register_builtin_quality_gates(sender=None)

        self.assertTrue(QualityGate.objects.filter(name=BUILTIN_QUALITY_GATE, is_default=True).exists())

    @override_settings(REGISTER_BUILTIN_QUALITY_GATES=False)
    def test_hook_can_be_disabled(self):
        reset_quality_gate_storage()

        register_builtin_quality_gates(sender=None)

        self.assertEqual(QualityGate.objects.count(), 0)
        self.assertEqual(LoadedTemplate.objects.count(), 0)

    def test_hook_propagates_storage_errors(self):
        reset_quality_gate_storage()

        with mock.patch.object(RegisterQualityGates, 'register', side_effect=DatabaseError('connection refused')):
            with self.assertRaises(DatabaseError):
                register_builtin_quality_gates(sender=None)


class RegisterQualityGatesCommandTests(TestCase):
    """Tests for the register_quality_gates management command"""

    def setUp(self):
        reset_quality_gate_storage()

    def test_command_creates_then_skips(self):
        out = io.StringIO()
        call_command('register_quality_gates', stdout=out)
        self.assertIn(f'Created quality gate: {BUILTIN_QUALITY_GATE}', out.getvalue())

        out = io.StringIO()
        call_command('register_quality_gates', stdout=out)
        self.assertIn(f'Quality gate already registered: {BUILTIN_QUALITY_GATE}', out.getvalue())

        self.assertEqual(QualityGate.objects.count(), 1)

    def test_command_reports_and_raises_errors(self):
        out = io.StringIO()

        with mock.patch.object(RegisterQualityGates, 'register', side_effect=DatabaseError('connection refused')):
            with self.assertRaises(DatabaseError):
                call_command('register_quality_gates', stdout=out)

        self.assertIn('Error: connection refused', out.getvalue())


class PostMigrateMultipleDatabasesTests(TestCase):
    """The hook registers on the database post_migrate reports"""
    databases = {'default', 'secondary'}

    def setUp(self):
        reset_quality_gate_storage('default')
        reset_quality_gate_storage('secondary')

    def test_hook_forwards_database_alias(self):
        with mock.patch('core.quality_gates.signals.RegisterQualityGates') as registrar_class:
            register_builtin_quality_gates(sender=None, using='secondary', verbosity=0)

        registrar_class.assert_called_once_with(using='secondary')
        registrar_class.return_value.start.assert_called_once_with()

    def test_hook_registers_on_migrated_database_only(self):
        register_builtin_quality_gates(sender=None, using='secondary')

        self.assertTrue(
            QualityGate.objects.using('secondary').filter(name=BUILTIN_QUALITY_GATE, is_default=True).exists()
        )
        self.assertEqual(LoadedTemplate.objects.using('secondary').count(), 1)
        self.assertEqual(QualityGate.objects.using('default').count(), 0)
        self.assertEqual(LoadedTemplate.objects.using('default').count(), 0)
