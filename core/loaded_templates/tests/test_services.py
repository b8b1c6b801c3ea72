from unittest import mock

from django.core.exceptions import ValidationError
from django.test import TestCase
from django.db import DatabaseError, IntegrityError
from core.loaded_templates.managers import LoadedTemplateManager
from core.loaded_templates.models import LoadedTemplate
from core.loaded_templates.services import is_registered, register_if_absent
from core.base.test_utils import reset_quality_gate_storage

TYPE = LoadedTemplate.QUALITY_GATE_TYPE
KEY = 'SonarQube way'


class RegisterIfAbsentTests(TestCase):
    """Tests for the transactional test-and-set"""

    def setUp(self):
        reset_quality_gate_storage()

    def test_runs_procedure_and_writes_marker(self):
        """First call runs the procedure and writes the marker"""
        procedure = mock.Mock()

        with self.assertLogs('core.loaded_templates.services', level='INFO') as logs:
            registered = register_if_absent(TYPE, KEY, procedure)

        self.assertTrue(registered)
        procedure.assert_called_once_with()
        self.assertTrue(is_registered(TYPE, KEY))
        self.assertIn("Registered template QUALITY_GATE 'SonarQube way'", logs.output[0])

    def test_skips_when_marker_present(self):
        """Existing marker means no procedure call and no new marker"""
        LoadedTemplate.objects.insert(TYPE, KEY)
        procedure = mock.Mock()

        registered = register_if_absent(TYPE, KEY, procedure)

        self.assertFalse(registered)
        procedure.assert_not_called()
        self.assertEqual(LoadedTemplate.objects.count(), 1)

    def test_marker_with_other_key_does_not_suppress(self):
        LoadedTemplate.objects.insert(TYPE, 'Another gate')
        procedure = mock.Mock()

        self.assertTrue(register_if_absent(TYPE, KEY, procedure))
        procedure.assert_called_once_with()

    def test_failing_procedure_rolls_back_everything(self):
        """Writes made by a failing procedure are undone and no marker is written"""
        error = DatabaseError('simulated failure')

        def procedure():
            LoadedTemplate.objects.insert('OTHER', 'written before failure')
            raise error

        with self.assertRaises(DatabaseError) as cm:
            register_if_absent(TYPE, KEY, procedure)

        self.assertIs(cm.exception, error)
        self.assertEqual(LoadedTemplate.objects.count(), 0)

    def test_integrity_error_absorbed_when_marker_appeared(self):
        """Losing a registration race is not an error"""
        procedure = mock.Mock(side_effect=IntegrityError('duplicate key'))

        with mock.patch.object(LoadedTemplateManager, 'count_by_type_and_key', side_effect=[0, 1]):
            registered = register_if_absent(TYPE, KEY, procedure)

        self.assertFalse(registered)
        procedure.assert_called_once_with()

    def test_integrity_error_reraised_when_marker_absent(self):
        """Constraint violations unrelated to a race propagate"""
        procedure = mock.Mock(side_effect=IntegrityError('not null constraint failed'))

        with self.assertRaises(IntegrityError):
            register_if_absent(TYPE, KEY, procedure)

        self.assertFalse(is_registered(TYPE, KEY))

    def test_validation_error_absorbed_when_marker_appeared(self):
        """A uniqueness check failing because the winner committed first is not an error"""
        procedure = mock.Mock(side_effect=ValidationError({'name': 'Name has already been taken'}))

        with mock.patch.object(LoadedTemplateManager, 'count_by_type_and_key', side_effect=[0, 1]):
            registered = register_if_absent(TYPE, KEY, procedure)

        self.assertFalse(registered)

    def test_validation_error_reraised_when_marker_absent(self):
        procedure = mock.Mock(side_effect=ValidationError("Name can't be empty"))

        with self.assertRaises(ValidationError):
            register_if_absent(TYPE, KEY, procedure)

        self.assertFalse(is_registered(TYPE, KEY))

    def test_custom_check_decides_registration(self):
        """should_register replaces the default marker check"""
        procedure = mock.Mock()
        should_register = mock.Mock(return_value=False)

        registered = register_if_absent(TYPE, KEY, procedure, should_register=should_register)

        self.assertFalse(registered)
        should_register.assert_called_once_with()
        procedure.assert_not_called()
        self.assertFalse(is_registered(TYPE, KEY))

    def test_accepts_default_database_alias(self):
        procedure = mock.Mock()

        self.assertTrue(register_if_absent(TYPE, KEY, procedure, using='default'))
        self.assertTrue(is_registered(TYPE, KEY, using='default'))


class RegisterIfAbsentMultipleDatabasesTests(TestCase):
    """Markers are checked and written on the requested database only"""
    databases = {'default', 'secondary'}

    def setUp(self):
        reset_quality_gate_storage('default')
        reset_quality_gate_storage('secondary')

    def test_marker_written_to_requested_database(self):
        registered = register_if_absent(TYPE, KEY, mock.Mock(), using='secondary')

        self.assertTrue(registered)
        self.assertTrue(is_registered(TYPE, KEY, using='secondary'))
        self.assertFalse(is_registered(TYPE, KEY, using='default'))

    def test_marker_on_other_database_does_not_suppress(self):
        LoadedTemplate.objects.db_manager('default').insert(TYPE, KEY)
        procedure = mock.Mock()

        self.assertTrue(register_if_absent(TYPE, KEY, procedure, using='secondary'))
        procedure.assert_called_once_with()

    def test_rollback_on_requested_database(self):
        def procedure():
            LoadedTemplate.objects.db_manager('secondary').insert('OTHER', 'written before failure')
            raise DatabaseError('simulated failure')

        with self.assertRaises(DatabaseError):
            register_if_absent(TYPE, KEY, procedure, using='secondary')

        self.assertEqual(LoadedTemplate.objects.using('secondary').count(), 0)
