from django.urls import path
from .views import *

urlpatterns = [
    path('', dashboard, name='dashboard'),
    path('entries/add/', add_entry, name='add_entry'),
    path('entries/<str:id>/edit/', edit_entry, name='edit_entry'),
    path('entries/<str:id>/link/', update_link, name='update_link'),
    path('entries/<str:id>/delete/', delete_entry, name='delete_entry'),

    path('api/youtube/video-info', video_info, name='video_info'),

    path('rankings/', rankings, name='rankings'),
    path('rankings/report/', report, name='monthly_report'),
]
