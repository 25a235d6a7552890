"""
Assessment submission: score an attempt and, on a pass, propagate XP, badges
and course completion.
"""
import logging

from django.conf import settings
from django.utils import timezone

from content.models import Unit
from learning.models import AssessmentAttempt
from notifications.triggers import NotificationTriggers
from .badges import BadgeService
from .progress import CourseProgressService

logger = logging.getLogger(__name__)

DEFAULT_ASSESSMENT_XP = 50
PASSED_MESSAGE = 'Congratulations! You passed the assessment.'
FAILED_MESSAGE = 'You did not meet the passing score. Try again!'


def passing_score_for(assessment):
    if assessment.passing_score is None:
        return settings.VX_DEFAULT_PASSING_SCORE
    return assessment.passing_score


class AssessmentSubmissionService:

    @staticmethod
    def submit(user, assessment, answers, score):
        """
        Record an attempt and run the pass side effects.

        The attempt is stored before anything else and is never rolled back
        by a later failure.

        Raises:
            Unit.DoesNotExist: the assessment's unit is gone (only reachable on a pass)

        Returns:
            dict: attempt, passed, message
        """
        passed = score >= passing_score_for(assessment)
        now = timezone.now()

        attempt = AssessmentAttempt.objects.create(
            user=user,
            assessment=assessment,
            score=score,
            passed=passed,
            answers=answers,
            started_at=now,
            completed_at=now,
        )
        logger.info(
            f"User {user.pk} scored {score} on assessment {assessment.pk} "
            f"({'passed' if passed else 'failed'}, attempt {attempt.pk})"
        )

        if passed:
            NotificationTriggers.on_assessment_passed(user, assessment, score)

            unit = Unit.objects.select_related('course').get(pk=assessment.unit_id)

            xp = assessment.xp_points if assessment.xp_points is not None else DEFAULT_ASSESSMENT_XP
            user.add_xp(xp)

            BadgeService.award_first_of_type(user, 'assessment')

            progress, became_completed = CourseProgressService.recompute(user, unit.course)
            if progress.completed:
                BadgeService.award_course_completion(user)
            if became_completed:
                NotificationTriggers.on_course_completed(user, unit.course)

        return {
            'attempt': attempt,
            'passed': passed,
            'message': PASSED_MESSAGE if passed else FAILED_MESSAGE,
        }
