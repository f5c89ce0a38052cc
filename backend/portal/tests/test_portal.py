from django.test import TestCase, override_settings
from rest_framework.test import APIClient


class SlowRequestLoggingTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    @override_settings(SLOW_REQUEST_LOG_MS=0)
    def test_slow_request_is_logged(self):
        with self.assertLogs('django.request', level='WARNING') as logs:
            resp = self.client.get('/api/reporting/reports/')
        self.assertEqual(resp.status_code, 401)
        self.assertIn('X-Response-Time-Ms', resp)
        self.assertTrue(any('Slow request GET /api/reporting/reports/ -> 401' in line for line in logs.output))

    @override_settings(SLOW_REQUEST_LOG_ENABLED=False)
    def test_disabled(self):
        resp = self.client.get('/api/reporting/reports/')
        self.assertNotIn('X-Response-Time-Ms', resp)


class ErrorPayloadTests(TestCase):
    def test_errors_carry_status_code_and_error(self):
        resp = APIClient().get('/api/auth/me/')
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.data['status_code'], 401)
        self.assertEqual(resp.data['error'], resp.data['detail'])
