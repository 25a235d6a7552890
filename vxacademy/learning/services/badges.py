"""
Badge awards. The (user, badge) unique constraint is the source of truth, so
an award is a conditional insert and concurrent callers cannot double-award.
"""
import logging

from django.db import IntegrityError, transaction

from learning.models import Badge, UserBadge
from notifications.triggers import NotificationTriggers

logger = logging.getLogger(__name__)


class BadgeService:

    @staticmethod
    def award(user, badge):
        """
        Give ``badge`` to ``user`` unless already held, crediting its XP.

        Returns:
            UserBadge or None: the new award, or None if the user already had it
        """
        try:
            with transaction.atomic():
                user_badge, created = UserBadge.objects.get_or_create(user=user, badge=badge)
        except IntegrityError:
            created = False

        if not created:
            return None

        xp = badge.xp_points or 0
        user.add_xp(xp)
        NotificationTriggers.on_badge_earned(user, badge)
        logger.info(f"Awarded badge '{badge.name}' to user {user.pk} (+{xp} XP)")
        return user_badge

    @staticmethod
    def award_first_of_type(user, badge_type):
        """Award the first catalog badge of ``badge_type`` if the user holds none of that type"""
        if UserBadge.objects.filter(user=user, badge__type=badge_type).exists():
            return None

        badge = Badge.objects.filter(type=badge_type).order_by('id').first()
        if badge is None:
            return None
        return BadgeService.award(user, badge)

    @staticmethod
    def award_course_completion(user):
        badge = Badge.objects.filter(type='course_completion').order_by('id').first()
        if badge is None:
            return None
        return BadgeService.award(user, badge)
