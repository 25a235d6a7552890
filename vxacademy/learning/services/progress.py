"""
Course progress service - decides which units a learner has finished and
keeps the per-course UserProgress row in step with that.

A unit is finished when
  * every learning block in it has a BlockCompletion for the user
    (a unit without blocks qualifies), and
  * the user has a passed attempt on any of its assessments
    (a unit without assessments qualifies).

percent_complete = round-half-up(100 * finished units / total units), 0 for a
course without units.
"""
import logging
from decimal import ROUND_HALF_UP, Decimal

from django.db import IntegrityError, transaction
from django.utils import timezone

from learning.models import AssessmentAttempt, BlockCompletion, UserProgress

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_XP = 10


def percent_of(completed, total):
    if not total:
        return 0
    ratio = Decimal(100 * completed) / Decimal(total)
    return int(ratio.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


class CourseProgressService:
    """Reads completions and attempts, writes UserProgress"""

    @staticmethod
    def is_unit_completed(user, unit):
        block_ids = list(unit.blocks.values_list('id', flat=True))
        if block_ids:
            done = BlockCompletion.objects.filter(user=user, block_id__in=block_ids).count()
            if done < len(block_ids):
                return False

        if unit.assessments.exists():
            return AssessmentAttempt.objects.filter(
                user=user, assessment__unit=unit, passed=True
            ).exists()
        return True

    @staticmethod
    def calculate(user, course):
        """
        Returns:
            dict: completed_units, total_units, percent_complete, completed
        """
        units = list(course.units.all())
        total_units = len(units)
        completed_units = sum(1 for unit in units if CourseProgressService.is_unit_completed(user, unit))

        return {
            'completed_units': completed_units,
            'total_units': total_units,
            'percent_complete': percent_of(completed_units, total_units),
            # zero units counts as complete
            'completed': completed_units == total_units,
        }

    @staticmethod
    def recompute(user, course):
        """
        Recalculate and persist the user's progress on a course.

        Returns:
            tuple: (UserProgress, became_completed) where became_completed is
            True only when this call flipped the course to completed.
        """
        result = CourseProgressService.calculate(user, course)

        with transaction.atomic():
            progress, created = UserProgress.objects.select_for_update().get_or_create(
                user=user, course=course
            )
            was_completed = progress.completed and not created
            progress.percent_complete = result['percent_complete']
            progress.completed = result['completed']
            progress.last_accessed = timezone.now()
            progress.save()

        logger.info(
            f"Progress for user {user.pk} on course {course.pk}: "
            f"{result['completed_units']}/{result['total_units']} units, {progress.percent_complete}%"
        )
        return progress, progress.completed and not was_completed

    @staticmethod
    def start_course(user, course):
        """Create the progress row at 0% if needed and touch last_accessed"""
        progress, created = UserProgress.objects.get_or_create(
            user=user,
            course=course,
            defaults={'percent_complete': 0, 'completed': False},
        )
        if not created:
            progress.last_accessed = timezone.now()
            progress.save(update_fields=['last_accessed'])
        return progress, created


class BlockCompletionService:

    @staticmethod
    def complete(user, block):
        """
        Mark a learning block done. Idempotent: a repeat call returns the
        existing completion and awards nothing.

        Returns:
            tuple: (BlockCompletion, created)
        """
        existing = BlockCompletion.objects.filter(user=user, block=block).first()
        if existing is not None:
            return existing, False

        try:
            with transaction.atomic():
                completion = BlockCompletion.objects.create(user=user, block=block)
        except IntegrityError:
            # Lost a race with a concurrent request for the same block
            return BlockCompletion.objects.get(user=user, block=block), False

        xp = block.xp_points if block.xp_points is not None else DEFAULT_BLOCK_XP
        user.add_xp(xp)
        logger.info(f"User {user.pk} completed block {block.pk} (+{xp} XP)")
        return completion, True
