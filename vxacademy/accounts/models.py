from django.contrib.auth.models import AbstractUser
from django.db import models
from django.db.models import F
from django.utils import timezone


SYSTEM_ROLES = ('admin', 'supervisor', 'content_creator', 'frontliner')


class User(AbstractUser):
    """Platform account. XP only ever moves through add_xp()."""
    ROLE_CHOICES = [
        ('admin', 'Admin'),
        ('supervisor', 'Supervisor'),
        ('content_creator', 'Content Creator'),
        ('frontliner', 'Frontliner'),
    ]

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255, unique=True)
    # Free text: custom Role names are valid too
    role = models.CharField(max_length=50, default='frontliner')
    xp_points = models.IntegerField(default=0)
    avatar = models.TextField(blank=True, null=True)
    language = models.CharField(max_length=10, default='en')
    created_at = models.DateTimeField(default=timezone.now)

    REQUIRED_FIELDS = ['email', 'name']

    class Meta:
        db_table = 'users'

    def __str__(self):
        return f"{self.name} <{self.email}>"

    @property
    def is_admin(self):
        return self.role == 'admin'

    def add_xp(self, amount):
        """Atomically add XP and refresh the in-memory value"""
        if not amount:
            return self.xp_points
        User.objects.filter(pk=self.pk).update(xp_points=F('xp_points') + amount)
        self.refresh_from_db(fields=['xp_points'])
        return self.xp_points


class Role(models.Model):
    """Named role with a permission map; system roles cannot be removed"""
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True, null=True)
    permissions = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'roles'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def is_system(self):
        return self.name in SYSTEM_ROLES

    def is_in_use(self):
        return User.objects.filter(role=self.name).exists()


class RoleMandatoryCourse(models.Model):
    role = models.ForeignKey(Role, on_delete=models.CASCADE, related_name='mandatory_courses')
    course = models.ForeignKey('content.Course', on_delete=models.CASCADE, related_name='mandatory_for_roles')
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'role_mandatory_courses'
        unique_together = ('role', 'course')

    def __str__(self):
        return f"{self.role.name} -> {self.course_id}"
