"""
Notification triggers fired by learning and account events.

Notifications are a side channel: every trigger logs and swallows its own
failures so the action that fired it still succeeds.
"""
import logging

from django.db import transaction

from .models import Notification

logger = logging.getLogger(__name__)


class NotificationTriggers:

    @staticmethod
    def notify(user, type, title, message, metadata=None):
        """Create a notification; returns None instead of raising"""
        try:
            with transaction.atomic():
                return Notification.objects.create(
                    user=user,
                    type=type,
                    title=title,
                    message=message,
                    metadata=metadata,
                )
        except Exception as e:
            logger.error(f"Failed to create '{type}' notification for user {getattr(user, 'pk', None)}: {e}")
            return None

    @staticmethod
    def on_user_welcome(user):
        return NotificationTriggers.notify(
            user,
            'achievement',
            'Welcome to VX Academy!',
            f"Welcome aboard, {user.name}! Start your first course to earn XP and badges.",
            {'event': 'welcome'},
        )

    @staticmethod
    def on_course_assigned(user, course):
        return NotificationTriggers.notify(
            user,
            'course_assigned',
            'New Course Assigned',
            f'You have been assigned the course "{course.name}".',
            {'course_id': course.pk},
        )

    @staticmethod
    def on_badge_earned(user, badge):
        return NotificationTriggers.notify(
            user,
            'badge_earned',
            'Achievement Unlocked!',
            f'You earned the "{badge.name}" badge.',
            {'badge_id': badge.pk, 'xp_points': badge.xp_points or 0},
        )

    @staticmethod
    def on_assessment_passed(user, assessment, score):
        return NotificationTriggers.notify(
            user,
            'achievement',
            'Assessment Passed!',
            f'You passed "{assessment.title}" with a score of {score}%.',
            {'assessment_id': assessment.pk, 'score': score},
        )

    @staticmethod
    def on_course_completed(user, course):
        return NotificationTriggers.notify(
            user,
            'achievement',
            'Course Completed!',
            f'Congratulations on completing "{course.name}".',
            {'course_id': course.pk},
        )

    @staticmethod
    def on_certificate_earned(user, certificate):
        return NotificationTriggers.notify(
            user,
            'achievement',
            'Certificate Earned!',
            f'Your certificate {certificate.certificate_number} for "{certificate.course.name}" is ready.',
            {'certificate_id': certificate.pk, 'course_id': certificate.course_id},
        )
