"""
Health endpoints, error envelope and the seed command
"""
from io import StringIO

from django.core.management import call_command
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from accounts.models import Role, User
from learning.models import Badge


class HealthCheckTest(TestCase):

    def test_liveness(self):
        response = APIClient().get('/api/health')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'ok')

    def test_database_status(self):
        response = APIClient().get('/api/health/database')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['database']['status'], 'healthy')
        self.assertEqual(response.data['tables']['missing'], [])


class ErrorEnvelopeTest(TestCase):

    def test_invalid_token_is_401_with_message(self):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION='Token not-a-real-token')

        response = client.get('/api/user')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertIn('message', response.data)


class SeedAcademyCommandTest(TestCase):

    def test_seed_is_idempotent(self):
        call_command('seed_academy', stdout=StringIO())
        call_command('seed_academy', stdout=StringIO())

        self.assertEqual(
            set(Role.objects.values_list('name', flat=True)),
            {'admin', 'supervisor', 'content_creator', 'frontliner'},
        )
        self.assertEqual(Badge.objects.filter(type='assessment').count(), 1)
        self.assertEqual(Badge.objects.filter(type='course_completion').count(), 1)

        admin = User.objects.get(role='admin')
        self.assertTrue(admin.is_superuser)
        self.assertEqual(User.objects.filter(role='admin').count(), 1)
