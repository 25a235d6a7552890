"""
Leaderboard and platform statistics
"""
import logging
from decimal import ROUND_HALF_UP, Decimal

from django.contrib.auth import get_user_model
from django.db.models import Count

from content.models import Course
from learning.models import UserBadge, UserProgress

logger = logging.getLogger(__name__)


class LeaderboardService:

    @staticmethod
    def top_users(limit):
        """Users ordered by XP, ranked 1..n; ties keep join order"""
        User = get_user_model()
        users = User.objects.filter(is_active=True).order_by('-xp_points', 'id')[:limit]
        return [
            {
                'rank': index,
                'id': user.pk,
                'username': user.username,
                'name': user.name,
                'role': user.role,
                'xp_points': user.xp_points,
                'avatar': user.avatar,
            }
            for index, user in enumerate(users, start=1)
        ]


class AdminStatsService:

    @staticmethod
    def collect():
        User = get_user_model()

        users_by_role = {
            row['role']: row['total']
            for row in User.objects.values('role').annotate(total=Count('id')).order_by('role')
        }

        progress_total = UserProgress.objects.count()
        completions = UserProgress.objects.filter(completed=True).count()
        completion_rate = 0.0
        if progress_total:
            completion_rate = float(
                (Decimal(100 * completions) / Decimal(progress_total)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
            )

        courses_by_module = [
            {'module_id': row['module_id'], 'module_name': row['module__name'], 'courses': row['total']}
            for row in Course.objects.values('module_id', 'module__name').annotate(total=Count('id')).order_by('module_id')
        ]

        top_courses = [
            {'course_id': row['course_id'], 'course_name': row['course__name'], 'completions': row['total']}
            for row in UserProgress.objects.filter(completed=True)
            .values('course_id', 'course__name')
            .annotate(total=Count('id'))
            .order_by('-total', 'course_id')[:5]
        ]

        return {
            'total_users': sum(users_by_role.values()),
            'users_by_role': users_by_role,
            'total_courses': Course.objects.count(),
            'courses_by_module': courses_by_module,
            'enrollments': progress_total,
            'completions': completions,
            'completion_rate': completion_rate,
            'top_courses': top_courses,
            'badges_awarded': UserBadge.objects.count(),
        }
