from django.urls import include, path
from rest_framework.routers import DefaultRouter

from . import views

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r'admin/users', views.AdminUserViewSet, basename='admin-user')
router.register(r'admin/roles', views.RoleViewSet, basename='admin-role')

role_list = views.RoleViewSet.as_view({'get': 'list'})
role_detail = views.RoleViewSet.as_view({'get': 'retrieve'})

urlpatterns = [
    # Authentication
    path('register', views.register, name='register'),
    path('login', views.login, name='login'),
    path('logout', views.logout, name='logout'),
    path('user', views.current_user, name='current-user'),
    # Profile
    path('user/profile', views.update_profile, name='user-profile'),
    path('user/change-password', views.change_password, name='user-change-password'),
    path('user/preferences', views.update_preferences, name='user-preferences'),
    path('my-mandatory-courses', views.my_mandatory_courses, name='my-mandatory-courses'),
    # Read-only role aliases for non-admin clients
    path('roles', role_list, name='role-list'),
    path('roles/<int:pk>', role_detail, name='role-detail'),
    path('', include(router.urls)),
]
