from django.urls import path
from .views import *

urlpatterns = [
    path('login/', login, name='login'),
    path('logout/', logout, name='logout'),
    path('api/session/', session_info, name='session_info'),
    path('api/nav/', navigation, name='navigation'),

    path('admin/', admin_settings, name='admin_settings'),
    path('admin/settings/', save_settings, name='save_settings'),
    path('admin/credentials/', change_credentials, name='change_credentials'),
    path('admin/features/<str:feature>/', toggle_feature, name='toggle_feature'),
    path('admin/reset/', reset_data, name='reset_data'),

    path('admin/moderators/add/', add_moderator, name='add_moderator'),
    path('admin/moderators/<str:id>/edit/', edit_moderator, name='edit_moderator'),
    path('admin/moderators/<str:id>/delete/', delete_moderator, name='delete_moderator'),
]
