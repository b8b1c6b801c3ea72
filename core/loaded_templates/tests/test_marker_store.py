from django.test import TestCase
from django.db import IntegrityError, transaction
from core.loaded_templates.models import LoadedTemplate
from core.base.test_utils import reset_quality_gate_storage


class LoadedTemplateManagerTests(TestCase):
    """Tests for the LoadedTemplate marker store"""

    def setUp(self):
        reset_quality_gate_storage()

    def test_count_is_zero_when_absent(self):
        """No marker means count 0"""
        self.assertEqual(
            LoadedTemplate.objects.count_by_type_and_key(LoadedTemplate.QUALITY_GATE_TYPE, 'SonarQube way'),
            0
        )

    def test_insert_then_count(self):
        """Inserted marker is counted exactly once"""
        marker = LoadedTemplate.objects.insert(LoadedTemplate.QUALITY_GATE_TYPE, 'SonarQube way')

        self.assertIsNotNone(marker.pk)
        self.assertEqual(
            LoadedTemplate.objects.count_by_type_and_key(LoadedTemplate.QUALITY_GATE_TYPE, 'SonarQube way'),
            1
        )

    def test_count_is_scoped_to_type_and_key(self):
        """Markers with another type or key are not counted"""
        LoadedTemplate.objects.insert(LoadedTemplate.QUALITY_GATE_TYPE, 'Other gate')
        LoadedTemplate.objects.insert('PERMISSION_TEMPLATE', 'SonarQube way')

        self.assertEqual(
            LoadedTemplate.objects.count_by_type_and_key(LoadedTemplate.QUALITY_GATE_TYPE, 'SonarQube way'),
            0
        )
        self.assertEqual(LoadedTemplate.objects.for_type_and_key('PERMISSION_TEMPLATE', 'SonarQube way').count(), 1)

    def test_duplicate_marker_rejected(self):
        """(template_type, key) is unique at the database level"""
        LoadedTemplate.objects.insert(LoadedTemplate.QUALITY_GATE_TYPE, 'SonarQube way')

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                LoadedTemplate.objects.insert(LoadedTemplate.QUALITY_GATE_TYPE, 'SonarQube way')

        self.assertEqual(LoadedTemplate.objects.count(), 1)

    def test_str(self):
        marker = LoadedTemplate.objects.insert(LoadedTemplate.QUALITY_GATE_TYPE, 'SonarQube way')
        self.assertEqual(str(marker), 'QUALITY_GATE: SonarQube way')
