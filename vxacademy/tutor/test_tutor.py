from django.test import SimpleTestCase
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient, APITestCase

from accounts.models import User
from tutor.models import AiTutorConversation
from tutor.responder import DEFAULT_REPLY, generate_reply


class ResponderTest(SimpleTestCase):

    def test_topics(self):
        self.assertIn('Emirati culture', generate_reply('Tell me about local culture'))
        self.assertIn('Sheikh Zayed Grand Mosque', generate_reply('Which museum should guests visit?'))
        self.assertIn('difficult visitor', generate_reply('How do I deal with difficult visitors?'))
        self.assertIn('Shukran', generate_reply('How do I say thank you in Arabic?'))
        self.assertEqual(generate_reply('What is the weather like?'), DEFAULT_REPLY)


class TutorApiTest(APITestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='u1', email='u1@vx.ae', password='test123', name='User One')
        token = Token.objects.create(user=self.user)
        self.client = APIClient()
        self.client.credentials(HTTP_AUTHORIZATION=f'Token {token.key}')

    def test_empty_conversation(self):
        response = self.client.get('/api/ai-tutor/conversation')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['messages'], [])

    def test_first_message_seeds_conversation(self):
        response = self.client.post('/api/ai-tutor/message', {'message': 'Any Arabic phrases?'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        roles = [m['role'] for m in response.data['conversation']['messages']]
        self.assertEqual(roles, ['system', 'assistant', 'user', 'assistant'])
        self.assertIn('Marhaba', response.data['message'])

        self.client.post('/api/ai-tutor/message', {'message': 'thanks'}, format='json')
        conversation = AiTutorConversation.objects.get(user=self.user)
        self.assertEqual(len(conversation.messages), 6)

    def test_message_required(self):
        response = self.client.post('/api/ai-tutor/message', {'message': '   '}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Message is required')
