from .assessments import AssessmentSubmissionService
from .badges import BadgeService
from .certificates import CertificateService, CourseNotCompleted
from .leaderboard import AdminStatsService, LeaderboardService
from .progress import BlockCompletionService, CourseProgressService

__all__ = [
    'AdminStatsService',
    'AssessmentSubmissionService',
    'BadgeService',
    'BlockCompletionService',
    'CertificateService',
    'CourseNotCompleted',
    'CourseProgressService',
    'LeaderboardService',
]
