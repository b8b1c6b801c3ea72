from django.core.exceptions import ValidationError
from django.test import SimpleTestCase
from rest_framework import status
from rest_framework.exceptions import NotFound

from qualitygate_project.response_formatter import custom_exception_handler, format_error_response


class FormatErrorResponseTests(SimpleTestCase):
    """Tests for the error envelope"""

    def test_field_errors(self):
        body = format_error_response({'name': ['Name has already been taken']}, 400)

        self.assertEqual(body, {
            'status': 'error',
            'message': 'name: Name has already been taken',
            'data': None,
        })

    def test_several_fields_joined(self):
        body = format_error_response({'operator': ['bad', 'worse'], 'period': 'missing'}, 400)
        self.assertEqual(body['message'], 'operator: bad, worse; period: missing')

    def test_detail(self):
        body = format_error_response({'detail': 'Not found.'}, 404)
        self.assertEqual(body['message'], 'Not found.')

    def test_list(self):
        body = format_error_response(['first', 'second'], 400)
        self.assertEqual(body['message'], 'first, second')

    def test_scalar(self):
        body = format_error_response('Something failed', 500)
        self.assertEqual(body['message'], 'Something failed')


class CustomExceptionHandlerTests(SimpleTestCase):

    def test_django_validation_error_becomes_400(self):
        response = custom_exception_handler(ValidationError({'name': "Name can't be empty"}), {})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], "name: Name can't be empty")

    def test_django_validation_error_without_fields(self):
        response = custom_exception_handler(ValidationError('At least one threshold (warning, error) must be set.'), {})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'At least one threshold (warning, error) must be set.')

    def test_drf_exception_is_wrapped(self):
        response = custom_exception_handler(NotFound(), {})

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['status'], 'error')
        self.assertIsNone(response.data['data'])

    def test_unhandled_exception_returns_none(self):
        self.assertIsNone(custom_exception_handler(RuntimeError('boom'), {}))
