"""
Registration, login and profile self-service
"""
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient, APITestCase

from accounts.models import User
from notifications.models import Notification


class AuthenticationTest(APITestCase):

    def setUp(self):
        self.user = User.objects.create_user(
            username='aisha', email='aisha@vx.ae', password='test123', name='Aisha Al Mansoori'
        )
        self.client = APIClient()

    def test_register_creates_frontliner(self):
        response = self.client.post(
            '/api/register',
            {'name': 'Omar Khalid', 'email': 'omar@vx.ae', 'password': 'secret1', 'role': 'admin'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIn('token', response.data)
        self.assertEqual(response.data['user']['role'], 'frontliner')
        self.assertTrue(response.data['user']['username'].startswith('omar_'))
        self.assertNotIn('password', response.data['user'])

        user = User.objects.get(email='omar@vx.ae')
        self.assertTrue(user.check_password('secret1'))
        self.assertTrue(Notification.objects.filter(user=user, title='Welcome to VX Academy!').exists())

    def test_register_duplicate_email(self):
        response = self.client.post(
            '/api/register',
            {'name': 'Someone', 'email': 'AISHA@vx.ae', 'password': 'secret1'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Email address already in use')

    def test_register_requires_fields(self):
        response = self.client.post('/api/register', {'email': 'x@vx.ae'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_login_returns_token_and_user(self):
        response = self.client.post('/api/login', {'email': 'aisha@vx.ae', 'password': 'test123'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['token'], Token.objects.get(user=self.user).key)
        self.assertEqual(response.data['user']['email'], 'aisha@vx.ae')

    def test_login_wrong_password(self):
        response = self.client.post('/api/login', {'email': 'aisha@vx.ae', 'password': 'nope'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['message'], 'Invalid email or password')

    def test_current_user(self):
        response = self.client.get('/api/user')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['message'], 'Not authenticated')

        token = Token.objects.create(user=self.user)
        self.client.credentials(HTTP_AUTHORIZATION=f'Token {token.key}')
        response = self.client.get('/api/user')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['name'], 'Aisha Al Mansoori')

    def test_logout_revokes_token(self):
        token = Token.objects.create(user=self.user)
        self.client.credentials(HTTP_AUTHORIZATION=f'Token {token.key}')

        response = self.client.post('/api/logout')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Token.objects.filter(user=self.user).exists())


class ProfileTest(APITestCase):

    def setUp(self):
        self.user = User.objects.create_user(
            username='aisha', email='aisha@vx.ae', password='test123', name='Aisha'
        )
        User.objects.create_user(username='taken', email='taken@vx.ae', password='test123', name='Taken')
        token = Token.objects.create(user=self.user)
        self.client = APIClient()
        self.client.credentials(HTTP_AUTHORIZATION=f'Token {token.key}')

    def test_update_profile_ignores_role_and_xp(self):
        response = self.client.patch(
            '/api/user/profile',
            {'name': 'Aisha M.', 'language': 'ar', 'role': 'admin', 'xp_points': 9999},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertEqual(self.user.name, 'Aisha M.')
        self.assertEqual(self.user.language, 'ar')
        self.assertEqual(self.user.role, 'frontliner')
        self.assertEqual(self.user.xp_points, 0)

    def test_update_profile_duplicate_email(self):
        response = self.client.patch('/api/user/profile', {'email': 'taken@vx.ae'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Email address already in use')

    def test_change_password(self):
        response = self.client.patch(
            '/api/user/change-password',
            {'current_password': 'test123', 'new_password': 'betterpass'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password('betterpass'))

    def test_change_password_validation(self):
        cases = [
            ({'new_password': 'betterpass'}, 'Current password and new password are required'),
            ({'current_password': 'test123', 'new_password': '123'}, 'New password must be at least 6 characters long'),
            ({'current_password': 'wrong', 'new_password': 'betterpass'}, 'Current password is incorrect'),
        ]
        for payload, message in cases:
            response = self.client.patch('/api/user/change-password', payload, format='json')
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data['message'], message)

    def test_preferences_acknowledged(self):
        response = self.client.patch('/api/user/preferences', {'theme': 'dark'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
