"""
Admin user management, roles and role-mandatory courses
"""
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient, APITestCase

from accounts.models import Role, RoleMandatoryCourse, User
from content.models import Course, Module, TrainingArea
from learning.models import UserProgress
from notifications.models import Notification


def authed_client(user):
    token, _ = Token.objects.get_or_create(user=user)
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Token {token.key}')
    return client


class AdminUserManagementTest(APITestCase):

    def setUp(self):
        self.admin = User.objects.create_user(
            username='admin', email='admin@vx.ae', password='test123', name='Admin', role='admin'
        )
        self.frontliner = User.objects.create_user(
            username='front', email='front@vx.ae', password='test123', name='Front Liner'
        )
        self.client = authed_client(self.admin)

        area = TrainingArea.objects.create(name='Service')
        module = Module.objects.create(training_area=area, name='Basics')
        self.course = Course.objects.create(module=module, name='Welcome Desk')

    def test_list_users_with_role_filter(self):
        response = self.client.get('/api/admin/users?role=frontliner')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([u['username'] for u in response.data], ['front'])

    def test_non_admin_cannot_list(self):
        response = authed_client(self.frontliner).get('/api/admin/users')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_create_user_with_course_assignment(self):
        response = self.client.post(
            '/api/admin/users',
            {
                'username': 'newbie',
                'password': 'welcome1',
                'name': 'New Bie',
                'email': 'newbie@vx.ae',
                'role': 'supervisor',
                'course_ids': [self.course.pk],
            },
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['assigned_course_ids'], [self.course.pk])
        user = User.objects.get(username='newbie')
        self.assertEqual(user.role, 'supervisor')
        self.assertTrue(user.check_password('welcome1'))
        progress = UserProgress.objects.get(user=user, course=self.course)
        self.assertEqual(progress.percent_complete, 0)
        self.assertTrue(Notification.objects.filter(user=user, type='course_assigned').exists())

    def test_create_user_duplicate_username(self):
        response = self.client.post(
            '/api/admin/users',
            {'username': 'front', 'password': 'welcome1', 'name': 'Dup', 'email': 'dup@vx.ae'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Username already exists')

    def test_bulk_create_reports_failures(self):
        response = self.client.post(
            '/api/admin/users/bulk',
            {'users': [
                {'name': 'Bulk One', 'email': 'bulk1@vx.ae'},
                {'name': 'Bulk Two', 'email': 'front@vx.ae', 'username': 'bulk2', 'password': 'secret1'},
            ]},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['created'], 1)
        self.assertEqual(response.data['failed'], 1)
        self.assertIn('generated_password', response.data['users'][0])
        self.assertIn('email', response.data['failed_users'][0]['error'])

        created = User.objects.get(email='bulk1@vx.ae')
        self.assertTrue(created.check_password(response.data['users'][0]['generated_password']))

    def test_admin_updates_any_user(self):
        response = self.client.put(
            f'/api/admin/users/{self.frontliner.pk}',
            {'role': 'supervisor', 'name': 'Promoted', 'password': 'ignored1'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.frontliner.refresh_from_db()
        self.assertEqual(self.frontliner.role, 'supervisor')
        self.assertTrue(self.frontliner.check_password('test123'))

    def test_admin_update_cannot_overwrite_xp(self):
        self.frontliner.add_xp(120)

        response = self.client.put(
            f'/api/admin/users/{self.frontliner.pk}',
            {'name': 'Still Front', 'xp_points': 99999},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['xp_points'], 120)
        self.frontliner.refresh_from_db()
        self.assertEqual(self.frontliner.xp_points, 120)
        self.assertEqual(self.frontliner.name, 'Still Front')

    def test_user_updates_only_own_basic_fields(self):
        client = authed_client(self.frontliner)

        response = client.put(
            f'/api/admin/users/{self.frontliner.pk}',
            {'name': 'Renamed', 'role': 'admin'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.frontliner.refresh_from_db()
        self.assertEqual(self.frontliner.name, 'Renamed')
        self.assertEqual(self.frontliner.role, 'frontliner')

        response = client.put(f'/api/admin/users/{self.admin.pk}', {'name': 'Hacked'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_cannot_delete_self(self):
        response = self.client.delete(f'/api/admin/users/{self.admin.pk}')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.delete(f'/api/admin/users/{self.frontliner.pk}')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(User.objects.filter(pk=self.frontliner.pk).exists())


class RoleManagementTest(APITestCase):

    def setUp(self):
        self.admin = User.objects.create_user(
            username='admin', email='admin@vx.ae', password='test123', name='Admin', role='admin'
        )
        self.client = authed_client(self.admin)

        area = TrainingArea.objects.create(name='Safety')
        module = Module.objects.create(training_area=area, name='Emergencies')
        self.course = Course.objects.create(module=module, name='Fire Drill')

    def test_roles_readable_by_any_signed_in_user(self):
        Role.objects.create(name='frontliner', description='Frontline staff')
        user = User.objects.create_user(username='front', email='front@vx.ae', password='test123', name='Front')

        response = authed_client(user).get('/api/roles')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]['name'], 'frontliner')
        self.assertTrue(response.data[0]['is_system'])

    def test_create_role_validation(self):
        response = self.client.post('/api/admin/roles', {'name': 'night_shift'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.post(
            '/api/admin/roles', {'name': 'night_shift', 'description': 'Overnight team'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        response = self.client.post(
            '/api/admin/roles', {'name': 'night_shift', 'description': 'Again'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_cannot_delete_custom_role_in_use(self):
        role = Role.objects.create(name='night_shift', description='Overnight team')
        User.objects.create_user(
            username='owl', email='owl@vx.ae', password='test123', name='Night Owl', role='night_shift'
        )

        response = self.client.delete(f'/api/admin/roles/{role.pk}')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Cannot delete role that is in use')

    def test_delete_unused_role(self):
        role = Role.objects.create(name='temp', description='Temporary')
        response = self.client.delete(f'/api/admin/roles/{role.pk}')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

    def test_mandatory_courses_lifecycle(self):
        role = Role.objects.create(name='frontliner', description='Frontline staff')
        url = f'/api/admin/roles/{role.pk}/mandatory-courses'

        created = self.client.post(url, {'course_id': self.course.pk}, format='json')
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)

        again = self.client.post(url, {'course_id': self.course.pk}, format='json')
        self.assertEqual(again.status_code, status.HTTP_200_OK)
        self.assertEqual(again.data['id'], created.data['id'])

        missing = self.client.post(url, {'course_id': 9999}, format='json')
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)

        listing = self.client.get(url)
        self.assertEqual(listing.data[0]['course_name'], 'Fire Drill')

        removed = self.client.delete(f'{url}/{self.course.pk}')
        self.assertEqual(removed.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(RoleMandatoryCourse.objects.exists())

    def test_my_mandatory_courses_include_progress(self):
        role = Role.objects.create(name='frontliner', description='Frontline staff')
        RoleMandatoryCourse.objects.create(role=role, course=self.course)
        user = User.objects.create_user(username='front', email='front@vx.ae', password='test123', name='Front')
        UserProgress.objects.create(user=user, course=self.course, percent_complete=100, completed=True)

        response = authed_client(user).get('/api/my-mandatory-courses')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]['name'], 'Fire Drill')
        self.assertTrue(response.data[0]['is_completed'])
        self.assertEqual(response.data[0]['percent_complete'], 100)
