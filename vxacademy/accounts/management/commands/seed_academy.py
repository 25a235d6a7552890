"""
Management command to seed the system roles, an admin account and the
badges that the assessment flow awards automatically.
"""
from django.conf import settings
from django.core.management.base import BaseCommand

from accounts.models import Role, User
from learning.models import Badge

ROLE_DESCRIPTIONS = {
    'admin': 'Full platform administration',
    'supervisor': 'Oversees frontline teams and their progress',
    'content_creator': 'Authors training areas, courses and assessments',
    'frontliner': 'Frontline staff completing training',
}

DEFAULT_BADGES = [
    {
        'name': 'First Assessment',
        'description': 'Passed your first assessment',
        'type': 'assessment',
        'xp_points': 100,
    },
    {
        'name': 'Course Champion',
        'description': 'Completed a full course',
        'type': 'course_completion',
        'xp_points': 200,
    },
]


class Command(BaseCommand):
    help = 'Create system roles, the default admin user and automatic badges (safe to re-run)'

    def add_arguments(self, parser):
        parser.add_argument('--admin-email', default=settings.VX_ADMIN_EMAIL)
        parser.add_argument('--admin-password', default=settings.VX_ADMIN_PASSWORD)
        parser.add_argument('--skip-admin', action='store_true', help='Do not create the admin user')

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS('Seeding VX Academy...'))

        for name, description in ROLE_DESCRIPTIONS.items():
            _, created = Role.objects.get_or_create(name=name, defaults={'description': description})
            if created:
                self.stdout.write(self.style.SUCCESS(f'✓ Created role {name}'))

        for badge_data in DEFAULT_BADGES:
            _, created = Badge.objects.get_or_create(
                type=badge_data['type'],
                name=badge_data['name'],
                defaults={'description': badge_data['description'], 'xp_points': badge_data['xp_points']},
            )
            if created:
                self.stdout.write(self.style.SUCCESS(f"✓ Created badge {badge_data['name']}"))

        if not options['skip_admin']:
            email = options['admin_email']
            if User.objects.filter(email__iexact=email).exists():
                self.stdout.write(self.style.WARNING(f'✓ Admin {email} already exists'))
            else:
                User.objects.create_superuser(
                    username='admin',
                    email=email,
                    password=options['admin_password'],
                    name='Administrator',
                    role='admin',
                )
                self.stdout.write(self.style.SUCCESS(f'✓ Created admin user {email}'))

        self.stdout.write(self.style.SUCCESS('\n✓ Seeding complete'))
