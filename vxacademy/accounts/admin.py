from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import Role, RoleMandatoryCourse, User


@admin.register(User)
class VxUserAdmin(UserAdmin):
    list_display = ['id', 'username', 'name', 'email', 'role', 'xp_points', 'is_active']
    list_filter = ['role', 'is_active']
    search_fields = ['username', 'name', 'email']
    fieldsets = UserAdmin.fieldsets + (
        ('VX Academy', {'fields': ('name', 'role', 'xp_points', 'avatar', 'language')}),
    )


class RoleMandatoryCourseInline(admin.TabularInline):
    model = RoleMandatoryCourse
    extra = 0


@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'description']
    inlines = [RoleMandatoryCourseInline]
