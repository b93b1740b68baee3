from django.urls import path
from .views import *

urlpatterns = [
    path('work-flow/', work_flow, name='work_flow'),
    path('work-flow/post-types/add/', add_post_type, name='add_post_type'),
    path('work-flow/post-types/<str:id>/edit/', edit_post_type, name='edit_post_type'),
    path('work-flow/post-types/<str:id>/delete/', delete_post_type, name='delete_post_type'),

    path('work-flow/post-types/<str:post_type_id>/jobs/add/', add_job, name='add_job'),
    path('work-flow/post-types/<str:post_type_id>/jobs/<str:job_id>/edit/', edit_job, name='edit_job'),
    path('work-flow/post-types/<str:post_type_id>/jobs/<str:job_id>/delete/', delete_job, name='delete_job'),

    path('work-flow/notes/add/', add_note, name='add_note'),
    path('work-flow/notes/<str:id>/edit/', edit_note, name='edit_note'),
    path('work-flow/notes/<str:id>/delete/', delete_note, name='delete_note'),

    path('video-upload-time/', upload_schedules, name='upload_schedules'),
    path('video-upload-time/add/', add_schedule, name='add_schedule'),
    path('video-upload-time/<str:id>/edit/', edit_schedule, name='edit_schedule'),
    path('video-upload-time/<str:id>/delete/', delete_schedule, name='delete_schedule'),
]
