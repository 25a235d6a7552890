"""
Content authoring API: public reads, role-gated writes, nested listings
"""
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient, APITestCase

from accounts.models import User
from content.models import Assessment, Course, LearningBlock, Module, Question, TrainingArea, Unit


class ContentApiTest(APITestCase):

    def setUp(self):
        self.creator = User.objects.create_user(
            username='creator', email='creator@vx.ae', password='test123', name='Creator',
            role='content_creator',
        )
        self.frontliner = User.objects.create_user(
            username='front', email='front@vx.ae', password='test123', name='Front'
        )
        creator_token = Token.objects.create(user=self.creator)
        self.client = APIClient()
        self.client.credentials(HTTP_AUTHORIZATION=f'Token {creator_token.key}')

        self.area = TrainingArea.objects.create(name='Culture')
        self.module = Module.objects.create(training_area=self.area, name='Heritage')
        self.course = Course.objects.create(module=self.module, name='Emirati Traditions')

    def test_anonymous_can_read(self):
        response = APIClient().get('/api/courses')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]['name'], 'Emirati Traditions')

    def test_anonymous_write_is_unauthenticated(self):
        response = APIClient().post('/api/training-areas', {'name': 'Nope'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_frontliner_write_is_forbidden(self):
        token = Token.objects.create(user=self.frontliner)
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Token {token.key}')

        response = client.post('/api/training-areas', {'name': 'Nope'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['message'], 'Unauthorized')

    def test_build_full_hierarchy(self):
        area = self.client.post('/api/training-areas', {'name': 'Attractions'}, format='json')
        self.assertEqual(area.status_code, status.HTTP_201_CREATED)

        module = self.client.post(
            '/api/modules', {'training_area_id': area.data['id'], 'name': 'Museums'}, format='json'
        )
        self.assertEqual(module.status_code, status.HTTP_201_CREATED)

        course = self.client.post(
            '/api/courses',
            {'module_id': module.data['id'], 'name': 'Louvre Abu Dhabi', 'level': 'intermediate', 'duration': 45},
            format='json',
        )
        self.assertEqual(course.status_code, status.HTTP_201_CREATED)

        unit = self.client.post('/api/units', {'course_id': course.data['id'], 'name': 'Galleries'}, format='json')
        self.assertEqual(unit.status_code, status.HTTP_201_CREATED)
        self.assertEqual(unit.data['duration'], 30)
        self.assertEqual(unit.data['xp_points'], 100)

        block = self.client.post(
            '/api/learning-blocks',
            {'unit_id': unit.data['id'], 'type': 'video', 'title': 'Tour', 'video_url': 'https://cdn.vx.ae/tour.mp4'},
            format='json',
        )
        self.assertEqual(block.status_code, status.HTTP_201_CREATED)
        self.assertEqual(block.data['xp_points'], 10)

        assessment = self.client.post(
            '/api/assessments', {'unit_id': unit.data['id'], 'title': 'Gallery quiz'}, format='json'
        )
        self.assertEqual(assessment.status_code, status.HTTP_201_CREATED)
        self.assertEqual(assessment.data['passing_score'], 70)
        self.assertEqual(assessment.data['xp_points'], 50)

        question = self.client.post(
            '/api/questions',
            {
                'assessment_id': assessment.data['id'],
                'question_text': 'When did the museum open?',
                'question_type': 'mcq',
                'options': ['2015', '2017', '2019'],
                'correct_answer': '2017',
            },
            format='json',
        )
        self.assertEqual(question.status_code, status.HTTP_201_CREATED)

        self.assertEqual(len(self.client.get(f"/api/courses/{course.data['id']}/units").data), 1)
        self.assertEqual(len(self.client.get(f"/api/units/{unit.data['id']}/blocks").data), 1)
        self.assertEqual(len(self.client.get(f"/api/units/{unit.data['id']}/assessments").data), 1)
        self.assertEqual(len(self.client.get(f"/api/assessments/{assessment.data['id']}/questions").data), 1)

    def test_filters(self):
        other_area = TrainingArea.objects.create(name='Safety')
        Module.objects.create(training_area=other_area, name='Fire')
        Unit.objects.create(course=self.course, name='Unit A')

        modules = self.client.get(f'/api/modules?training_area_id={self.area.pk}')
        self.assertEqual([m['name'] for m in modules.data], ['Heritage'])

        units = self.client.get(f'/api/units?course_id={self.course.pk}')
        self.assertEqual(len(units.data), 1)

    def test_units_listed_in_order(self):
        Unit.objects.create(course=self.course, name='Second', order=2)
        Unit.objects.create(course=self.course, name='First', order=1)

        response = self.client.get(f'/api/courses/{self.course.pk}/units')

        self.assertEqual([u['name'] for u in response.data], ['First', 'Second'])

    def test_invalid_passing_score(self):
        unit = Unit.objects.create(course=self.course, name='Unit A')
        response = self.client.post(
            '/api/assessments', {'unit_id': unit.pk, 'title': 'Bad', 'passing_score': 150}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_true_false_answer_validated(self):
        unit = Unit.objects.create(course=self.course, name='Unit A')
        assessment = Assessment.objects.create(unit=unit, title='Quiz')

        response = self.client.post(
            '/api/questions',
            {
                'assessment_id': assessment.pk,
                'question_text': 'Gahwa is served with dates.',
                'question_type': 'true_false',
                'correct_answer': 'maybe',
            },
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_update_and_delete(self):
        response = self.client.patch(f'/api/courses/{self.course.pk}', {'level': 'advanced'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['level'], 'advanced')

        unit = Unit.objects.create(course=self.course, name='Unit A')
        block = LearningBlock.objects.create(unit=unit, type='text', title='Read')
        question_assessment = Assessment.objects.create(unit=unit, title='Quiz')
        Question.objects.create(assessment=question_assessment, question_text='Q', correct_answer='A')

        response = self.client.delete(f'/api/courses/{self.course.pk}')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(LearningBlock.objects.filter(pk=block.pk).exists())

    def test_missing_course_returns_404(self):
        response = self.client.get('/api/courses/9999')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Not found')
