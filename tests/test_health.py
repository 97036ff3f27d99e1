"""
Basic health check tests to ensure the application starts correctly.
"""
from django.test import TestCase, Client
from django.urls import reverse


class HealthCheckTests(TestCase):
    """Basic health check tests"""

    def setUp(self):
        self.client = Client()

    def test_health_check_reports_database_connected(self):
        response = self.client.get(reverse('health_check'))

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['status'], 'healthy')
        self.assertEqual(data['database'], 'connected')

    def test_health_check_rejects_post(self):
        response = self.client.post(reverse('health_check'))
        self.assertEqual(response.status_code, 405)

    def test_api_root_lists_endpoints(self):
        response = self.client.get(reverse('api_root'))

        self.assertEqual(response.status_code, 200)
        self.assertIn('costing', response.json()['endpoints']['resources'])
