from django.urls import path

from . import views

badge_list = views.BadgeViewSet.as_view({'get': 'list', 'post': 'create'})
badge_detail = views.BadgeViewSet.as_view({'get': 'retrieve', 'patch': 'partial_update', 'put': 'update', 'delete': 'destroy'})

urlpatterns = [
    # Progress
    path('progress', views.progress, name='progress'),
    path('user/progress', views.user_progress, name='user-progress'),
    path('blocks/<int:block_id>/complete', views.complete_block, name='block-complete'),
    # Assessments
    path('assessments/<int:assessment_id>/submit', views.submit_assessment, name='assessment-submit'),
    # Badges and leaderboard
    path('badges', badge_list, name='badge-list'),
    path('user/badges', views.user_badges, name='user-badges'),
    path('admin/badges', badge_list, name='admin-badge-list'),
    path('admin/badges/<int:pk>', badge_detail, name='admin-badge-detail'),
    path('leaderboard', views.leaderboard, name='leaderboard'),
    path('admin/stats', views.admin_stats, name='admin-stats'),
    # Certificates
    path('certificates', views.certificate_list, name='certificate-list'),
    path('certificates/generate', views.certificate_generate, name='certificate-generate'),
    path('certificates/<int:certificate_id>', views.certificate_detail, name='certificate-detail'),
    path('certificates/<int:certificate_id>/pdf', views.certificate_pdf, name='certificate-pdf'),
]
